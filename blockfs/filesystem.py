"""A flat file system with contiguous-first allocation on a block device."""

from dataclasses import dataclass, field
from itertools import islice


class FileSystemError(Exception):
    """Raised when a file system operation cannot be carried out."""


@dataclass
class Inode:
    """A file's name, size in bytes and the device blocks it occupies."""

    name: str
    size: int
    blocks: list = field(default_factory=list)


class FileSystem:
    """A single-directory file system kept on a :class:`BlockDevice`."""

    def __init__(self, device):
        self._device = device
        self._free = [True] * device.block_count
        self._root = {}

    @property
    def device(self):
        return self._device

    def __contains__(self, filename):
        return filename in self._root

    def __len__(self):
        return len(self._root)

    def _inode(self, filename):
        try:
            return self._root[filename]
        except KeyError:
            raise FileNotFoundError(filename) from None

    def is_free(self, index):
        """Tell whether the block at ``index`` is unallocated."""
        if not 0 <= index < len(self._free):
            raise IndexError(f"block {index} out of range")
        return self._free[index]

    def allocate_blocks(self, count):
        """Reserve the first ``count`` free blocks and return their indices."""
        if count < 0:
            raise ValueError(f"block count must not be negative, got {count}")
        found = list(islice((i for i, free in enumerate(self._free) if free), count))
        if len(found) < count:
            raise FileSystemError(
                f"not enough free blocks: {count} requested, {len(found)} available"
            )
        for index in found:
            self._free[index] = False
        return found

    def free_blocks(self, blocks):
        """Zero the given blocks and mark them free."""
        zero = bytes(self._device.block_size)
        for index in blocks:
            self._device.write_block(index, zero)
            self._free[index] = True

    def create(self, filename, size):
        """Create a file of ``size`` bytes and return its inode."""
        if filename in self._root:
            raise FileExistsError(filename)
        if size < 0:
            raise ValueError(f"file size must not be negative, got {size}")
        count = -(-size // self._device.block_size)
        if count == 0:
            raise FileSystemError(f"cannot create {filename!r} with no blocks")
        inode = Inode(filename, size, self.allocate_blocks(count))
        self._root[filename] = inode
        return inode

    def _check_range(self, inode, offset, length):
        if offset < 0 or length < 0:
            raise ValueError("offset and length must not be negative")
        if offset + length > inode.size:
            raise FileSystemError(
                f"range {offset}..{offset + length} exceeds size {inode.size} of {inode.name!r}"
            )

    def _chunks(self, inode, offset, length):
        """Yield (device block, offset in block, byte count) covering a file range."""
        block_size = self._device.block_size
        position = offset
        end = offset + length
        while position < end:
            block_offset = position % block_size
            count = min(block_size - block_offset, end - position)
            yield inode.blocks[position // block_size], block_offset, count
            position += count

    def write(self, filename, offset, data):
        """Write ``data`` (bytes or str) at ``offset``; return the number of bytes written."""
        inode = self._inode(filename)
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = memoryview(bytes(data))
        self._check_range(inode, offset, len(data))
        position = 0
        for block, block_offset, count in self._chunks(inode, offset, len(data)):
            buffer = bytearray(self._device.read_block(block))
            buffer[block_offset:block_offset + count] = data[position:position + count]
            self._device.write_block(block, buffer)
            position += count
        return len(data)

    def read(self, filename, offset, length):
        """Return ``length`` bytes of the file starting at ``offset``."""
        inode = self._inode(filename)
        self._check_range(inode, offset, length)
        return b"".join(
            self._device.read_block(block)[block_offset:block_offset + count]
            for block, block_offset, count in self._chunks(inode, offset, length)
        )

    def delete(self, filename):
        """Remove a file, zeroing and freeing its blocks."""
        inode = self._inode(filename)
        self.free_blocks(inode.blocks)
        del self._root[filename]

    def compact(self):
        """Move all used blocks to the front of the disk; return the first free index."""
        moves = sorted(
            (
                (old, inode, position)
                for inode in self._root.values()
                for position, old in enumerate(inode.blocks)
            ),
            key=lambda move: move[0],
        )
        next_free = 0
        for old, inode, position in moves:
            if old != next_free:
                self._device.write_block(next_free, self._device.read_block(old))
                self._free[old] = True
                self._free[next_free] = False
            inode.blocks[position] = next_free
            next_free += 1
        for index in range(next_free, len(self._free)):
            self._free[index] = True
        return next_free

    def list_files(self):
        """Return the inodes ordered by increasing file size."""
        return sorted(self._root.values(), key=lambda inode: inode.size)

    def format_listing(self):
        """Render the file listing as text, one file per line."""
        lines = ["Liste des fichiers :"]
        lines.extend(
            f" - {inode.name} : size {inode.size}, nbBlocs={len(inode.blocks)}"
            for inode in self.list_files()
        )
        return "\n".join(lines)