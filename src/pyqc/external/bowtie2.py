"""Module with functions for calling bowtie2."""

from collections import namedtuple
from pathlib import Path

from . import util as shell

ScreenOutputs = namedtuple('ScreenOutputs', ['unaligned', 'aligned'])


def bowtie2_screen(read_path,
                   index_path,
                   unaligned_path,
                   aligned_path,
                   threads=1,
                   log_path=None,
                   command='bowtie2'):
    """Screens reads against a reference genome using bowtie2.

    Reads are aligned end-to-end using the sensitive preset. Alignments
    themselves are discarded; reads that did not align are written to
    unaligned_path and reads that did align are written to aligned_path.

    Parameters
    ----------
    read_path : Path
        Path to the (unpaired) reads to screen.
    index_path : Path
        Path to the bowtie2 index of the genome to screen against.

    """

    options = {
        '-x': index_path,
        '-U': read_path,
        '--sensitive': True,
        '--end-to-end': True,
        '--threads': threads,
        '--un': unaligned_path,
        '--al': aligned_path,
        '-S': '/dev/null'
    }

    args = [str(command)] + shell.flatten_arguments(options)

    shell.run(args, log_path=log_path)

    return ScreenOutputs(unaligned=Path(unaligned_path),
                         aligned=Path(aligned_path))
