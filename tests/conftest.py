import gzip
import sys
import textwrap
from pathlib import Path

import pytest


@pytest.helpers.register
def fastq_records(names, seq='ACGTACGTAC'):
    """Builds fastq text for records with the given names."""
    return ''.join('@{}\n{}\n+\n{}\n'.format(name, seq, 'I' * len(seq))
                   for name in names)


@pytest.helpers.register
def write_fastq(file_path, names, compress=False):
    """Writes fastq records with the given names to file_path."""

    file_path = Path(file_path)
    text = fastq_records(names).encode()

    if compress:
        with gzip.open(str(file_path), 'wb') as file_:
            file_.write(text)
    else:
        file_path.write_bytes(text)

    return file_path


@pytest.helpers.register
def write_executable(file_path, source):
    """Writes a python script that can be executed directly."""

    file_path = Path(file_path)
    file_path.write_text('#!{}\n{}'.format(sys.executable,
                                           textwrap.dedent(source)))
    file_path.chmod(0o755)

    return file_path
