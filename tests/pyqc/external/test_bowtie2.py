from pathlib import Path

import pytest

from pyqc.external.bowtie2 import bowtie2_screen, shell

# pylint: disable=redefined-outer-name


@pytest.fixture
def screen_args():
    """Basic arguments for bowtie2_screen function."""

    return {
        'read_path': Path('/path/to/reads.1.fq'),
        'index_path': Path('/path/to/index'),
        'unaligned_path': Path('/path/to/reads.1.fq.did_not_align.fq'),
        'aligned_path': Path('/path/to/reads.1.fq.did_align.fq'),
        'threads': 10
    }


def test_screen(mocker, screen_args):
    """Tests screening invocation of bowtie2."""

    mock = mocker.patch.object(shell, 'run')
    outputs = bowtie2_screen(**screen_args)

    expected = ['bowtie2', '--al', '/path/to/reads.1.fq.did_align.fq',
                '--end-to-end', '--sensitive', '--threads', '10',
                '--un', '/path/to/reads.1.fq.did_not_align.fq',
                '-S', '/dev/null', '-U', '/path/to/reads.1.fq',
                '-x', '/path/to/index'] # yapf: disable
    mock.assert_called_with(expected, log_path=None)

    assert outputs.unaligned == screen_args['unaligned_path']
    assert outputs.aligned == screen_args['aligned_path']

