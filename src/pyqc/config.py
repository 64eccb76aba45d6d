"""Configuration of a QC run."""

import logging
from collections import namedtuple
from pathlib import Path

from pyqc.errors import ConfigError
from pyqc.external import util as shell

DEFAULT_ADAPTERS = Path('adapters') / 'TruSeq3-PE-both.fa'

_FIELDS = [
    'trimmomatic', 'adapters_path', 'flash', 'bowtie2', 'fix_pairs', 'fq2fa',
    'compressor', 'bowtie_index', 'threads', 'seed_mismatches',
    'palindrome_clip_threshold', 'simple_clip_threshold', 'window_size',
    'quality', 'min_length', 'max_overlap'
]


class QcConfig(namedtuple('QcConfig', _FIELDS)):
    """Tool locations and thresholds used by the pipeline stages.

    Parameters
    ----------
    trimmomatic : Tuple[str]
        Command prefix used to start Trimmomatic, either a wrapper
        executable or ``('java', '-jar', <jar path>)``.
    adapters_path : Path
        Fasta file with the adapter sequences to clip.
    flash : str
        FLASH executable.
    bowtie2 : str
        bowtie2 executable. Only used when screening.
    fix_pairs : str
        FixPairs executable. Only used when screening.
    fq2fa : str
        fq2fa executable, or None to skip the fasta conversion.
    compressor : str
        pigz or gzip executable, or None to skip compression.
    bowtie_index : Path
        Bowtie2 index of the genome to screen reads against. Screening is
        skipped if no index is given.
    threads : int
        Number of threads passed to tools that accept it.

    """

    __slots__ = ()

    def __new__(cls,
                trimmomatic=('trimmomatic', ),
                adapters_path=None,
                flash='flash',
                bowtie2='bowtie2',
                fix_pairs='FixPairs',
                fq2fa=None,
                compressor=None,
                bowtie_index=None,
                threads=10,
                seed_mismatches=2,
                palindrome_clip_threshold=30,
                simple_clip_threshold=10,
                window_size=4,
                quality=15,
                min_length=50,
                max_overlap=250):

        if bowtie_index is not None:
            bowtie_index = Path(bowtie_index)

        if adapters_path is not None:
            adapters_path = Path(adapters_path)

        return super().__new__(
            cls,
            trimmomatic=tuple(str(part) for part in trimmomatic),
            adapters_path=adapters_path,
            flash=flash,
            bowtie2=bowtie2,
            fix_pairs=fix_pairs,
            fq2fa=fq2fa,
            compressor=compressor,
            bowtie_index=bowtie_index,
            threads=threads,
            seed_mismatches=seed_mismatches,
            palindrome_clip_threshold=palindrome_clip_threshold,
            simple_clip_threshold=simple_clip_threshold,
            window_size=window_size,
            quality=quality,
            min_length=min_length,
            max_overlap=max_overlap)

    @property
    def screen(self):
        """Whether reads are screened against a reference genome."""
        return self.bowtie_index is not None

    @classmethod
    def from_args(cls, args, screen=False):
        """Builds a configuration from parsed command line arguments."""

        logger = logging.getLogger()

        # Trimmomatic is either started from its jar or from a wrapper.
        if args.trimmomatic_jar is not None:
            trimmomatic = ('java', '-jar', str(args.trimmomatic_jar))
            default_adapters = args.trimmomatic_jar.parent / DEFAULT_ADAPTERS
        else:
            trimmomatic = (str(args.trimmomatic), )
            default_adapters = None

        adapters_path = args.adapters or default_adapters
        if adapters_path is None:
            raise ConfigError('No adapter file given (use --adapters)')

        # Optional tools are dropped with a warning if missing.
        fq2fa = None
        if screen:
            fq2fa = shell.which(args.fq2fa)
            if fq2fa is None:
                logger.warning('Cannot locate %s program. No IDBA files '
                               'will be made', args.fq2fa)

        compressor = None
        if not args.no_compress:
            compressor = shell.which('pigz') or shell.which('gzip')
            if compressor is None:
                logger.warning('Cannot locate pigz or gzip. Output files '
                               'will not be zipped')

        return cls(
            trimmomatic=trimmomatic,
            adapters_path=adapters_path,
            flash=args.flash,
            bowtie2=getattr(args, 'bowtie2', 'bowtie2'),
            fix_pairs=getattr(args, 'fix_pairs', 'FixPairs'),
            fq2fa=fq2fa,
            compressor=compressor,
            bowtie_index=getattr(args, 'bowtie_idx', None),
            threads=args.threads)

    def check_tools(self):
        """Checks that all mandatory tools and resources are available."""

        shell.require_executable(self.trimmomatic[0])

        if self.trimmomatic[1:2] == ('-jar', ):
            jar_path = Path(self.trimmomatic[2])
            if not jar_path.exists():
                raise ConfigError(
                    'Trimmomatic jar {} does not exist'.format(jar_path))

        if self.adapters_path is None or not self.adapters_path.exists():
            raise ConfigError(
                'Adapter file {} does not exist'.format(self.adapters_path))

        shell.require_executable(self.flash)

        if self.screen:
            shell.require_executable(self.bowtie2)
            shell.require_executable(self.fix_pairs)
