import pytest

from blockfs.block_device import BlockDevice
from blockfs.filesystem import FileSystem, FileSystemError, Inode

BLOCK = 16
COUNT = 8


@pytest.fixture
def fs():
    return FileSystem(BlockDevice(block_size=BLOCK, block_count=COUNT))


def test_new_filesystem_has_every_block_free(fs):
    assert all(fs.is_free(i) for i in range(COUNT))
    assert len(fs) == 0


def test_create_uses_first_free_blocks(fs):
    inode = fs.create("a", 3 * BLOCK)
    assert inode == Inode("a", 3 * BLOCK, [0, 1, 2])
    assert not any(fs.is_free(i) for i in range(3))
    assert fs.is_free(3)


def test_partial_block_rounds_up(fs):
    inode = fs.create("a", 2 * BLOCK + 1)
    assert len(inode.blocks) == 3


def test_duplicate_name_rejected(fs):
    fs.create("a", BLOCK)
    with pytest.raises(FileExistsError):
        fs.create("a", BLOCK)


def test_create_without_space_leaves_bitmap_untouched(fs):
    with pytest.raises(FileSystemError):
        fs.create("huge", (COUNT + 1) * BLOCK)
    assert all(fs.is_free(i) for i in range(COUNT))
    assert "huge" not in fs


def test_zero_size_file_is_rejected(fs):
    with pytest.raises(FileSystemError):
        fs.create("empty", 0)


def test_allocate_zero_blocks_returns_empty_list(fs):
    assert fs.allocate_blocks(0) == []


def test_write_read_round_trip_across_blocks(fs):
    fs.create("a", 4 * BLOCK)
    payload = bytes(range(40))
    assert fs.write("a", BLOCK - 3, payload) == len(payload)
    assert fs.read("a", BLOCK - 3, len(payload)) == payload


def test_unwritten_bytes_read_as_zero(fs):
    fs.create("a", 2 * BLOCK)
    fs.write("a", 5, b"hi")
    assert fs.read("a", 0, 9) == bytes(5) + b"hi" + bytes(2)


def test_overlapping_writes(fs):
    fs.create("a", 2 * BLOCK)
    fs.write("a", 0, b"Bonjour tout le monde!")
    fs.write("a", 25, b"Suite")
    data = fs.read("a", 0, 30)
    assert data.startswith(b"Bonjour tout le monde!")
    assert data[25:] == b"Suite"


def test_string_data_is_utf8_encoded(fs):
    fs.create("a", BLOCK)
    text = "déjà"
    written = fs.write("a", 0, text)
    assert fs.read("a", 0, written).decode("utf-8") == text


def test_write_past_end_rejected(fs):
    fs.create("a", 10)
    with pytest.raises(FileSystemError):
        fs.write("a", 8, b"abc")
    assert fs.read("a", 0, 10) == bytes(10)


def test_read_past_end_rejected(fs):
    fs.create("a", 10)
    with pytest.raises(FileSystemError):
        fs.read("a", 5, 6)


def test_missing_file_operations_raise(fs):
    with pytest.raises(FileNotFoundError):
        fs.write("nope", 0, b"x")
    with pytest.raises(FileNotFoundError):
        fs.read("nope", 0, 1)
    with pytest.raises(FileNotFoundError):
        fs.delete("nope")


def test_delete_frees_and_zeroes_blocks(fs):
    inode = fs.create("a", 2 * BLOCK)
    fs.write("a", 0, b"x" * (2 * BLOCK))
    blocks = list(inode.blocks)
    fs.delete("a")
    assert "a" not in fs
    assert all(fs.is_free(b) for b in blocks)
    assert all(fs.device.read_block(b) == bytes(BLOCK) for b in blocks)


def test_deleted_hole_is_reused_first(fs):
    fs.create("a", BLOCK)
    hole = fs.create("b", 2 * BLOCK).blocks
    fs.create("c", BLOCK)
    fs.delete("b")
    assert fs.create("d", BLOCK).blocks == hole[:1]


def test_compact_moves_blocks_to_front_and_keeps_data(fs):
    fs.create("a", BLOCK)
    fs.create("b", 2 * BLOCK)
    fs.create("c", 2 * BLOCK)
    fs.write("a", 0, b"first")
    fs.write("c", BLOCK - 2, b"spanning")
    fs.delete("b")

    used = fs.compact()

    files = {inode.name: inode for inode in fs.list_files()}
    assert used == sum(len(i.blocks) for i in files.values())
    assert sorted(b for i in files.values() for b in i.blocks) == list(range(used))
    assert all(not fs.is_free(i) for i in range(used))
    assert all(fs.is_free(i) for i in range(used, COUNT))
    assert fs.read("a", 0, 5) == b"first"
    assert fs.read("c", BLOCK - 2, 8) == b"spanning"


def test_compact_on_contiguous_disk_changes_nothing(fs):
    a = fs.create("a", 2 * BLOCK)
    fs.write("a", 0, b"keep")
    before = list(a.blocks)
    assert fs.compact() == len(before)
    assert a.blocks == before
    assert fs.read("a", 0, 4) == b"keep"


def test_list_files_sorted_by_size(fs):
    fs.create("big", 3 * BLOCK)
    fs.create("small", 1)
    fs.create("mid", BLOCK + 1)
    assert [i.name for i in fs.list_files()] == ["small", "mid", "big"]


def test_format_listing(fs):
    fs.create("a", 1)
    lines = fs.format_listing().splitlines()
    assert lines[0] == "Liste des fichiers :"
    assert lines[1] == " - a : size 1, nbBlocs=1"


def test_is_free_out_of_range(fs):
    with pytest.raises(IndexError):
        fs.is_free(COUNT)
    with pytest.raises(IndexError):
        fs.is_free(-1)