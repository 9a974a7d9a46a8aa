"""Demonstration scenario exercising creation, I/O, deletion and compaction."""

import argparse

from blockfs.block_device import BlockDevice
from blockfs.filesystem import FileSystem


class ScenarioError(RuntimeError):
    """Raised when a step of the demonstration does not behave as expected."""


def _check(condition, message):
    if not condition:
        raise ScenarioError(message)


def _create(fs, name, size):
    inode = fs.create(name, size)
    print(f"Fichier {name} cree, taille {size} octets, blocs alloues = {len(inode.blocks)}")


def _write(fs, name, offset, text):
    count = fs.write(name, offset, text)
    print(f"Write dans {name} ({count} octets) ")


def _delete(fs, name):
    fs.delete(name)
    print(f"Fichier {name} supprime ")


def main(argv=None):
    """Run the demonstration on a fresh 64 KiB disk; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="blockfs-demo",
        description="Run a file system scenario on a simulated 64 KiB disk.",
    )
    parser.parse_args(argv)

    fs = FileSystem(BlockDevice())

    _create(fs, "test1.txt", 30000)
    _write(fs, "test1.txt", 0, "Bonjour tout le monde!")
    _write(fs, "test1.txt", 25, "Suite de texte dans test1.")

    content = fs.read("test1.txt", 0, 90)
    print(f"Read dans test1.txt ({len(content)} octets)")
    _check(b"Bonjour tout le monde!" in content, "Texte 1 non trouvé")
    _check(b"Suite de texte dans test1." in content, "Texte 2 non trouvé")

    print(fs.format_listing())

    _create(fs, "data.bin", 20000)
    _create(fs, "text3.txt", 14000)
    print(fs.format_listing())

    _delete(fs, "data.bin")
    print(fs.format_listing())

    _create(fs, "bigfile.bin", 10000)
    _delete(fs, "text3.txt")

    print("=== Debut de la compaction du disque ===")
    next_free = fs.compact()
    print(f"=== Fin de la compaction. nextFreeBlock = {next_free} ===")

    print(fs.format_listing())

    content = fs.read("test1.txt", 0, 90)
    _check(b"Bonjour tout le monde!" in content, "Texte 1 perdu après compaction")

    print("\nTous les tests se sont déroulés sans échec !")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())