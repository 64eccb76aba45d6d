"""Utility functions for reading (possibly compressed) read files."""

import gzip
from pathlib import Path

GZIP_MAGIC = b'\x1f\x8b'

FASTQ_LINES = 4


def is_gzipped(file_path):
    """Checks whether file is gzipped, using its suffix or magic bytes."""

    file_path = Path(file_path)

    if file_path.suffix == '.gz':
        return True

    with file_path.open('rb') as file_:
        return file_.read(len(GZIP_MAGIC)) == GZIP_MAGIC


def open_file(file_path, mode='rb'):
    """Opens file for reading, transparently decompressing gzipped files."""

    if is_gzipped(file_path):
        return gzip.open(str(file_path), mode)
    return Path(file_path).open(mode)


def _make_gen(reader):
    b = reader(1024 * 1024)
    while b:
        yield b
        b = reader(1024 * 1024)


def count_lines(file_path):
    """Counts newlines in file, decompressing gzipped files on the fly."""

    with open_file(file_path) as file_:
        return sum(buf.count(b'\n') for buf in _make_gen(file_.read))


def read_count(file_path):
    """Counts fastq records in file.

    Assumes well-formed fastq framing of four lines per record and does
    not parse the records themselves. Partial records count as a record
    once they are at least half complete.
    """
    return (count_lines(file_path) + FASTQ_LINES // 2) // FASTQ_LINES
