"""Exceptions raised by the QC pipeline."""


class QcError(Exception):
    """Base class for errors that abort a QC run."""


class ConfigError(QcError):
    """Invalid configuration, detected before any stage runs."""


class ToolFailure(QcError):
    """External tool exited with a non-zero status."""

    def __init__(self, tool, arguments, exit_code, log_path=None):
        self.tool = tool
        self.arguments = list(arguments)
        self.exit_code = exit_code
        self.log_path = log_path

        message = '{} terminated with errorcode {}'.format(tool, exit_code)
        if log_path is not None:
            message += ' (see {})'.format(log_path)

        super().__init__(message)


class MissingFileError(QcError):
    """Expected file does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__('File {} does not exist'.format(path))


class StagingError(QcError):
    """Moving, concatenating or deleting an intermediate file failed."""
