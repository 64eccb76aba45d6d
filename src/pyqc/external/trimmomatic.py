"""Module with functions for calling Trimmomatic."""

from collections import namedtuple
from pathlib import Path

from . import util as shell

TrimmedPairs = namedtuple('TrimmedPairs',
                          ['paired1', 'unpaired1', 'paired2', 'unpaired2'])


def trimmomatic_pe(in1_path,
                   in2_path,
                   baseout,
                   steps,
                   threads=1,
                   log_path=None,
                   command=('trimmomatic', ),
                   check=True):
    """Runs Trimmomatic in paired-end mode.

    Parameters
    ----------
    in1_path : Path
        Path to the #1 mates.
    in2_path : Path
        Path to the #2 mates.
    baseout : Path
        Base name for the outputs. Trimmomatic derives the four output
        files from this name by appending _1P, _1U, _2P and _2U.
    steps : List[str]
        Trimming steps, as built by ``illumina_clip``, ``sliding_window``
        and ``min_len``.
    command : Tuple[str]
        Command prefix used to start Trimmomatic, for example
        ``('java', '-jar', 'trimmomatic-0.35.jar')``.

    Returns
    -------
    TrimmedPairs
        Paths of the four output files.

    """

    if not steps:
        raise ValueError('No trimming steps given')

    args = list(command) + [
        'PE', '-threads', str(threads),
        str(in1_path), str(in2_path),
        '-baseout', str(baseout)
    ] + list(steps) # yapf: disable

    shell.run(args, log_path=log_path, check=check)

    return paired_outputs(baseout)


def trimmomatic_se(input_path,
                   output_path,
                   steps,
                   threads=1,
                   log_path=None,
                   command=('trimmomatic', ),
                   check=True):
    """Runs Trimmomatic in single-end mode."""

    if not steps:
        raise ValueError('No trimming steps given')

    args = list(command) + [
        'SE', '-threads', str(threads),
        str(input_path), str(output_path)
    ] + list(steps) # yapf: disable

    shell.run(args, log_path=log_path, check=check)

    return Path(output_path)


def paired_outputs(baseout):
    """Returns the output paths Trimmomatic derives from baseout."""

    baseout = str(baseout)

    return TrimmedPairs(
        paired1=Path(baseout + '_1P'),
        unpaired1=Path(baseout + '_1U'),
        paired2=Path(baseout + '_2P'),
        unpaired2=Path(baseout + '_2U'))


def illumina_clip(adapters_path,
                  seed_mismatches=2,
                  palindrome_clip_threshold=30,
                  simple_clip_threshold=10):
    """Builds an ILLUMINACLIP step."""
    return 'ILLUMINACLIP:{}:{}:{}:{}'.format(
        adapters_path, seed_mismatches, palindrome_clip_threshold,
        simple_clip_threshold)


def sliding_window(window_size=4, quality=15):
    """Builds a SLIDINGWINDOW step."""
    return 'SLIDINGWINDOW:{}:{}'.format(window_size, quality)


def min_len(length=50):
    """Builds a MINLEN step."""
    return 'MINLEN:{}'.format(length)
