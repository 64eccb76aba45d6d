"""Module with functions for calling FLASH."""

from collections import namedtuple
from pathlib import Path

from . import util as shell

FlashOutputs = namedtuple('FlashOutputs',
                          ['combined', 'not_combined1', 'not_combined2'])


def flash(in1_path,
          in2_path,
          output_dir,
          output_prefix='flashed',
          max_overlap=250,
          threads=1,
          log_path=None,
          command='flash'):
    """Merges overlapping mate pairs using FLASH.

    Returns the paths of the merged reads and of the two files with
    mates that could not be merged. These follow the fixed naming scheme
    of FLASH: ``<prefix>.extendedFrags.fastq`` and
    ``<prefix>.notCombined_{1,2}.fastq`` within output_dir.
    """

    options = {
        '--threads': threads,
        '--output-prefix': output_prefix,
        '--max-overlap': max_overlap,
        '--output-directory': output_dir
    }

    args = [str(command)] + shell.flatten_arguments(options) + [
        str(in1_path), str(in2_path)
    ]

    shell.run(args, log_path=log_path)

    return flash_outputs(output_dir, output_prefix)


def flash_outputs(output_dir, output_prefix='flashed'):
    """Returns the output paths FLASH writes for the given prefix."""

    output_dir = Path(output_dir)

    return FlashOutputs(
        combined=output_dir / (output_prefix + '.extendedFrags.fastq'),
        not_combined1=output_dir / (output_prefix + '.notCombined_1.fastq'),
        not_combined2=output_dir / (output_prefix + '.notCombined_2.fastq'))
