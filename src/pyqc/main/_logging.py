import logging
from importlib.metadata import PackageNotFoundError, version as _version


def setup_logging(level=logging.INFO):
    logging.basicConfig(
        format='[%(asctime)-15s]  %(levelname)-8s %(message)s',
        level=level,
        datefmt='%Y-%m-%d %H:%M:%S')


def print_header(logger, command=None):
    try:
        version = _version('pyqc')
    except PackageNotFoundError:
        version = 'unknown'

    if command is None:
        header_str = ' PyQC ({}) '.format(version)
    else:
        header_str = ' PyQC {} ({}) '.format(command, version)

    logger.info('{:-^60}'.format(header_str))


def print_footer(logger):
    logger.info('{:-^60}'.format(' Done! '))
