"""Module with functions for calling FixPairs."""

from collections import namedtuple
from pathlib import Path

from . import util as shell

FixedPairs = namedtuple('FixedPairs', ['paired1', 'paired2', 'unpaired'])


def fix_pairs(in1_path, in2_path, basename, log_path=None,
              command='FixPairs'):
    """Restores mate pairing of two independently filtered read files.

    FixPairs writes mates that are present in both inputs to
    ``<basename>.1.fq`` and ``<basename>.2.fq`` (in matching order) and
    reads whose mate is missing to ``<basename>.U.fq``.
    """

    args = [str(command), str(in1_path), str(in2_path), str(basename)]
    shell.run(args, log_path=log_path)

    return fixed_outputs(basename)


def fixed_outputs(basename):
    """Returns the output paths FixPairs writes for basename."""

    basename = str(basename)

    return FixedPairs(
        paired1=Path(basename + '.1.fq'),
        paired2=Path(basename + '.2.fq'),
        unpaired=Path(basename + '.U.fq'))
