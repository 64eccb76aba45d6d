"""Script for the pyqc command.

The pyqc command runs quality control on a pair of Illumina read files:
adapters are clipped, reads are quality trimmed and overlapping mates are
merged. The screen variant additionally removes reads that hit a given
reference genome and repairs the mate pairs of the remaining reads.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

from pyqc.config import QcConfig
from pyqc.errors import QcError
from pyqc.pipeline import QcPipeline

from . import Command
from ._logging import setup_logging, print_header, print_footer


def main(argv=None):
    """Main function for pyqc."""

    # Exit quietly if the pipe we are writing to is closed.
    if hasattr(signal, 'SIGPIPE'):
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)

    setup_logging()

    args = parse_args(argv)
    args.command.run(args)


def parse_args(argv=None):
    """Parses arguments for pyqc."""

    # Setup main parser.
    parser = argparse.ArgumentParser(prog='pyqc')
    subparsers = parser.add_subparsers(dest='variant')
    subparsers.required = True

    # Register commands.
    commands = PipelineCommand.available_commands()

    for _, command in sorted(commands.items()):
        command.register(subparsers)

    return parser.parse_args(argv)


class PipelineCommand(Command):
    """Base command class for the QC pipelines."""

    default_outdir = None
    screen = False

    def configure(self, parser):
        parser.add_argument(
            '--forward', required=True, type=Path,
            help='Forward reads (fastq).')
        parser.add_argument(
            '--reverse', required=True, type=Path,
            help='Reverse reads (fastq).')

        parser.add_argument(
            '--threads', default=10, type=int,
            help='Number of threads passed to the external tools.')

        parser.add_argument(
            '--outdir', default=Path(self.default_outdir), type=Path,
            help='Output directory, which must not exist yet.')

        parser.add_argument(
            '--trimmomatic', default='trimmomatic',
            help='Trimmomatic wrapper executable.')
        parser.add_argument(
            '--trimmomatic-jar', default=None, type=Path,
            help='Trimmomatic jar, started using java. Takes precedence '
            'over --trimmomatic.')
        parser.add_argument(
            '--adapters', default=None, type=Path,
            help='Adapter fasta to clip (defaults to '
            'adapters/TruSeq3-PE-both.fa next to the Trimmomatic jar).')
        parser.add_argument(
            '--flash', default='flash', help='FLASH executable.')

        parser.add_argument(
            '--no-compress', default=False, action='store_true',
            help='Do not compress the output files.')

        return parser

    def run(self, args):
        logger = logging.getLogger()
        print_header(logger, command=self.name)

        try:
            config = QcConfig.from_args(args, screen=self.screen)
            pipeline = QcPipeline(config, logger=logger)
            pipeline.run(args.forward, args.reverse, output_dir=args.outdir)
        except QcError as err:
            logger.error(str(err))
            sys.exit(1)

        print_footer(logger)


class QcCommand(PipelineCommand):
    """Adapter/quality trims reads and merges overlapping mates."""

    name = 'qc'
    default_outdir = 'one_lib_with_flash'


class ScreenCommand(PipelineCommand):
    """Runs QC and removes reads that hit a reference genome."""

    name = 'screen'
    default_outdir = 'qc_with_genome_screen'
    screen = True

    def configure(self, parser):
        super().configure(parser)

        parser.add_argument(
            '--bowtie-idx', required=True, type=Path,
            help='Bowtie2 index of the genome to screen reads against.')
        parser.add_argument(
            '--bowtie2', default='bowtie2', help='bowtie2 executable.')
        parser.add_argument(
            '--fix-pairs', default='FixPairs', help='FixPairs executable.')
        parser.add_argument(
            '--fq2fa', default='fq2fa',
            help='fq2fa executable (from IDBA). The fasta conversion is '
            'skipped if it cannot be found.')

        return parser


if __name__ == '__main__':
    main()
