"""Utility functions for staging files between pipeline stages.

The mutating functions in this module come in a strict and non-strict
flavour, selected by the ``check`` argument. Strict calls raise a
StagingError when the underlying filesystem operation fails, whereas
non-strict calls only log a warning. Non-strict calls are used for
housekeeping, such as removing intermediate files that have already
been consumed.
"""

import logging
import shutil
from pathlib import Path

from pyqc.errors import MissingFileError, StagingError


def check_files(*file_paths):
    """Raises a MissingFileError for the first path that does not exist."""

    for file_path in file_paths:
        if not Path(file_path).exists():
            raise MissingFileError(Path(file_path))


def move_file(src_path, dest_path, check=True):
    """Moves src_path to dest_path, replacing dest_path if it exists."""

    try:
        shutil.move(str(src_path), str(dest_path))
    except OSError as err:
        _handle_error('Failed to move {} to {}'.format(src_path, dest_path),
                      err, check)

    return Path(dest_path)


def concatenate_files(file_paths, output_path, check=True):
    """Concatenates files (in the given order) into output_path."""

    try:
        with Path(output_path).open('wb') as out_file:
            for file_path in file_paths:
                with Path(file_path).open('rb') as in_file:
                    shutil.copyfileobj(in_file, out_file)
    except OSError as err:
        _handle_error('Failed to concatenate files into {}'
                      .format(output_path), err, check)

    return Path(output_path)


def delete_files(*file_paths, check=True):
    """Deletes the given files."""

    for file_path in file_paths:
        try:
            Path(file_path).unlink()
        except OSError as err:
            _handle_error('Failed to delete {}'.format(file_path), err, check)


def touch(file_path, check=True):
    """Creates an empty placeholder file."""

    try:
        Path(file_path).touch()
    except OSError as err:
        _handle_error('Failed to create {}'.format(file_path), err, check)

    return Path(file_path)


def make_directory(dir_path, check=True):
    """Creates a directory (and its parents) if it does not exist yet."""

    try:
        Path(dir_path).mkdir(parents=True, exist_ok=True)
    except OSError as err:
        _handle_error('Failed to create directory {}'.format(dir_path), err,
                      check)

    return Path(dir_path)


def remove_directory(dir_path, check=False):
    """Removes a directory and its contents."""

    try:
        shutil.rmtree(str(dir_path))
    except OSError as err:
        _handle_error('Failed to remove directory {}'.format(dir_path), err,
                      check)


def _handle_error(message, err, check):
    if check:
        raise StagingError('{}: {}'.format(message, err)) from err

    logging.getLogger().warning('%s (%s)', message, err)
