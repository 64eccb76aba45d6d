import logging
import shutil
import subprocess
from pathlib import Path

from pyqc.errors import ConfigError, ToolFailure


def run(arguments, log_path=None, check=True):
    """Runs the given command, appending its stdout/stderr to log_path.

    Parameters
    ----------
    arguments : List[str]
        Command and arguments, passed to the process as-is (no shell).
    log_path : Path
        Log file that receives both stdout and stderr of the process. The
        file is opened in append mode and created if absent. If None,
        the output of the process is discarded.
    check : bool
        Whether to raise a ToolFailure if the process exits with a
        non-zero status.

    Returns
    -------
    int
        Exit status of the process.

    """

    arguments = [str(arg) for arg in arguments]
    log_fh = _open_log(log_path)

    try:
        process = subprocess.Popen(
            arguments, stdout=log_fh, stderr=subprocess.STDOUT)
        process.wait()
    except FileNotFoundError as err:
        raise ConfigError(
            'Unable to find executable {}'.format(arguments[0])) from err
    finally:
        _close_log(log_fh)

    # Check return code.
    if process.returncode != 0:
        if check:
            raise ToolFailure(
                tool=arguments[0],
                arguments=arguments[1:],
                exit_code=process.returncode,
                log_path=log_path)

        logging.getLogger().warning('%s terminated with errorcode %d',
                                    arguments[0], process.returncode)

    return process.returncode


def _open_log(log_path):
    if log_path is None:
        return subprocess.DEVNULL
    return Path(log_path).open('ab')


def _close_log(log_fh):
    if log_fh != subprocess.DEVNULL:
        log_fh.close()


def flatten_arguments(arg_dict):
    """Flattens a dict of options into an argument list."""

    # Iterate over keys in lexical order, so that we have a
    # reproducible order of iteration (useful for tests).
    opt_names = sorted(arg_dict.keys())

    # Flatten values.
    options = []
    for opt_name in opt_names:
        opt_value = arg_dict[opt_name]

        if isinstance(opt_value, (tuple, list)):
            options += [opt_name] + [str(v) for v in opt_value]
        elif opt_value is True:
            options += [opt_name]
        elif not (opt_value is False or opt_value is None):
            options += [opt_name, str(opt_value)]

    return options


def which(executable):
    """Returns the full path of executable, or None if it is not found."""
    path = shutil.which(str(executable))
    return Path(path) if path is not None else None


def require_executable(executable):
    """Returns the full path of executable, raising if it is not found."""

    path = which(executable)

    if path is None:
        raise ConfigError('Missing required executable {}'.format(executable))

    return path
