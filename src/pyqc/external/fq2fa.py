"""Module with functions for calling fq2fa (from IDBA)."""

from . import util as shell


def fq2fa(input_paths, output_path, filter_=True, log_path=None,
          command='fq2fa'):
    """Converts fastq to fasta.

    Paired inputs (two paths) are merged into a single interleaved
    fasta file. With filter_, reads containing Ns are dropped.
    """

    if not 0 < len(input_paths) <= 2:
        raise ValueError('fq2fa expects one or two input paths')

    options = ['--filter'] if filter_ else []

    if len(input_paths) == 2:
        options.append('--merge')

    args = ([str(command)] + options + [str(fp) for fp in input_paths] +
            [str(output_path)])

    shell.run(args, log_path=log_path)

    return output_path
