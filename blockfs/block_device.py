"""A simulated disk made of fixed-size blocks held in memory."""

DEFAULT_BLOCK_SIZE = 1024
DEFAULT_BLOCK_COUNT = 64


class BlockDevice:
    """An in-memory disk split into ``block_count`` blocks of ``block_size`` bytes."""

    def __init__(self, block_size=DEFAULT_BLOCK_SIZE, block_count=DEFAULT_BLOCK_COUNT):
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        if block_count <= 0:
            raise ValueError(f"block count must be positive, got {block_count}")
        self._block_size = block_size
        self._block_count = block_count
        self._disk = bytearray(block_size * block_count)

    @property
    def block_size(self):
        """Size of one block in bytes."""
        return self._block_size

    @property
    def block_count(self):
        """Number of blocks on the device."""
        return self._block_count

    def _span(self, index):
        if not 0 <= index < self._block_count:
            raise IndexError(
                f"block {index} out of range (device has {self._block_count} blocks)"
            )
        start = index * self._block_size
        return slice(start, start + self._block_size)

    def read_block(self, index):
        """Return a copy of the whole block at ``index``."""
        return bytes(self._disk[self._span(index)])

    def write_block(self, index, data):
        """Overwrite the block at ``index``; shorter data is padded with zero bytes."""
        span = self._span(index)
        data = bytes(data)
        if len(data) > self._block_size:
            raise ValueError(
                f"data of {len(data)} bytes does not fit in a {self._block_size}-byte block"
            )
        self._disk[span] = data.ljust(self._block_size, b"\0")