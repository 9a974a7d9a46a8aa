# blockfs

A small file system held entirely in memory. It runs on a simulated block
device. By default the device has 64 blocks of 1024 bytes each, or 64 KiB in
total. The file system keeps three things:

- a free-block bitmap,
- a flat root directory that maps each file name to an `Inode` (`name`,
  `size` in bytes, and `blocks`, the list of device block indices),
- a compaction pass that moves every allocated block to the front of the
  disk, so no gaps are left between files.

## Installation

```
pip install .
```

To also run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from blockfs.block_device import BlockDevice
from blockfs.filesystem import FileSystem, FileSystemError

device = BlockDevice(1024, 64)        # block_size, block_count
fs = FileSystem(device)

fs.create("notes.txt", 3000)          # returns the Inode; takes 3 blocks
fs.write("notes.txt", 0, "hello")     # str is encoded as UTF-8; returns 5
print(fs.read("notes.txt", 0, 5))     # b'hello'

fs.create("other.bin", 2048)
fs.delete("notes.txt")                # zeroes blocks 0-2 and marks them free
print(fs.compact())                   # moves other.bin down to blocks 0 and 1; prints 2

print(fs.format_listing())            # files listed by ascending size
for inode in fs.list_files():
    print(inode)

print("other.bin" in fs, len(fs))     # True 1
print(fs.is_free(5))                  # True

try:
    fs.create("huge.bin", 100_000)
except FileSystemError as exc:
    print("error:", exc)
```

### Block device

`BlockDevice(block_size=1024, block_count=64)` holds a zero-filled disk.
The `block_size` and `block_count` properties report its shape.

- `read_block(index)` returns a copy of one whole block as `bytes`.
- `write_block(index, data)` overwrites one block. Data shorter than a block
  is padded with zero bytes.

An index out of range raises `IndexError`. Data longer than a block raises
`ValueError`.

### File system

`FileSystem(device)` starts empty, with every block free.

- `create(filename, size)` reserves `ceil(size / block_size)` blocks. It
  takes the first free blocks found, in index order.
- `write(filename, offset, data)` and `read(filename, offset, length)` work
  on any byte range inside the file's size.
- `delete(filename)` zeroes the file's blocks and frees them.
- `compact()` moves used blocks down, keeping their order on disk. It
  returns the index of the first free block after compaction.
- `list_files()` returns the inodes sorted by size. `format_listing()`
  renders them as text.
- `allocate_blocks(count)` and `free_blocks(blocks)` reserve and release
  blocks directly. `is_free(index)` checks a single block.

### Errors

| Situation | Exception |
|---|---|
| creating a name that already exists | `FileExistsError` |
| reading, writing or deleting a name that does not exist | `FileNotFoundError` |
| too few free blocks for a file or an allocation | `FileSystemError` |
| creating a file of size 0 | `FileSystemError` |
| reading or writing past the file's size | `FileSystemError` |
| a negative size, offset, length or block count | `ValueError` |
| a block index outside the device (`is_free`) | `IndexError` |

## Demo

The package includes a command that runs a fixed scenario on a fresh 64 KiB
disk. It creates files, writes to them and reads them back. It then deletes
some of the files to leave gaps and compacts the disk. It prints the
listing at each step. It exits with status 0 on success, and raises
`ScenarioError` if a check fails.

```
blockfs-demo
```

## What it does not do

- The disk exists only in memory. Nothing is saved to or loaded from a
  file, so all data is lost when the process ends.
- There is a single root directory. Subdirectories are not supported.
- A file's size is fixed when it is created. Files cannot grow or shrink.