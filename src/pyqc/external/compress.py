"""Module with functions for compressing output files."""

from pathlib import Path

from . import util as shell


def compress(file_paths, threads=1, log_path=None, command='pigz',
             check=True):
    """Compresses files in place using pigz or gzip.

    Uses the best compression level. The number of threads is only passed
    to pigz, as gzip is single-threaded.

    Returns the paths of the compressed files.
    """

    file_paths = [Path(fp) for fp in file_paths]

    args = [str(command), '--best']

    if Path(str(command)).name == 'pigz':
        args += ['--processes', str(threads)]

    args += [str(fp) for fp in file_paths]

    shell.run(args, log_path=log_path, check=check)

    return [fp.with_name(fp.name + '.gz') for fp in file_paths]
