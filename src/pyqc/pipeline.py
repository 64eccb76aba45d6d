"""Module containing the QC pipeline driver."""

import datetime
import logging
from pathlib import Path

import toolz

from pyqc import stages
from pyqc.errors import ConfigError, QcError
from pyqc.model import Frontier, PipelineState, ReadSet, Role, TRANSITIONS
from pyqc.util.staging import (check_files, concatenate_files, delete_files,
                               make_directory, move_file)

HITS_DIR = 'those_that_hit_the_genome'
HITS_NAME = 'reads_that_hit_genome.U.fq'
FASTA_DIR = 'for_idba'


class QcPipeline(object):
    """QC pipeline for paired-end Illumina reads.

    The pipeline essentially performs the following steps:

        - Adapters are clipped from the read pairs.
        - Reads that lost their mate are quality trimmed.
        - Overlapping mates are merged using FLASH.
        - Merged reads and unmerged mates are quality trimmed.
        - Surviving reads are consolidated into ``reads.1.fq``,
          ``reads.2.fq`` and ``reads.U.fq``.
        - Optionally, reads are screened against a reference genome.
          Reads that hit the genome are collected in a separate directory
          and mate pairs of the remaining reads are repaired using
          FixPairs. The final reads are also converted to fasta for IDBA.
        - Outputs are compressed.

    Each stage deletes the intermediate files it consumed, so that after
    a failure only the outputs of the last successful stage remain.

    Parameters
    ----------
    config : QcConfig
        Tool locations and thresholds.

    """

    def __init__(self, config, logger=None):
        self._config = config
        self._logger = logger or logging.getLogger()

        self._state = None
        self._frontier = None
        self._log_path = None
        self._hits_path = None
        self._fasta_paths = ()

    @property
    def state(self):
        """Current state of the run."""
        return self._state

    @property
    def frontier(self):
        """Latest surviving version of the paired and unpaired reads."""
        return self._frontier

    @property
    def log_path(self):
        """Log file receiving the output of all external tools."""
        return self._log_path

    @property
    def hits_path(self):
        """File containing reads that hit the screened genome."""
        return self._hits_path

    @property
    def fasta_paths(self):
        """Fasta files produced for IDBA."""
        return self._fasta_paths

    def run(self, forward_path, reverse_path, output_dir):
        """Runs the pipeline on the given read pair.

        Raises a ConfigError if the output directory already exists, in
        which case it is left untouched. Any error raised by one of the
        stages aborts the run, leaving the state as FAILED.
        """

        output_dir = Path(output_dir)

        self._validate(forward_path, reverse_path)
        self._setup_output_dir(output_dir)

        self._state = PipelineState.INIT

        try:
            self._run_stages(
                ReadSet(forward_path, Role.PAIRED_FORWARD),
                ReadSet(reverse_path, Role.PAIRED_REVERSE), output_dir)
        except QcError:
            self._logger.debug('QC failed after reaching state %s',
                               self._state.name)
            self._state = PipelineState.FAILED
            raise

        return self._frontier

    def _validate(self, forward_path, reverse_path):
        check_files(forward_path, reverse_path)
        self._config.check_tools()

    def _setup_output_dir(self, output_dir):
        # Exclusive creation doubles as the check for an existing outdir.
        try:
            output_dir.mkdir(parents=True)
        except FileExistsError as err:
            raise ConfigError(
                'Outdir {} already exists!'.format(output_dir)) from err
        except OSError as err:
            raise ConfigError('Cannot create outdir {}: {}'.format(
                output_dir, err)) from err

        timestamp = datetime.datetime.now().strftime('%Y%m%d%H%M%S%f')[:-3]
        self._log_path = output_dir / 'qc_log.{}.txt'.format(timestamp)

    def _transition(self, state):
        if state not in TRANSITIONS[self._state]:
            raise RuntimeError('Invalid transition from {} to {}'.format(
                self._state, state))

        self._logger.debug('State %s -> %s', self._state, state)
        self._state = state

    def _run_stages(self, forward, reverse, output_dir):
        config = self._config
        log_path = self._log_path

        kws = {'log_path': log_path, 'logger': self._logger}

        # Trim adapters.
        trimmed = stages.adapter_trim(
            config, forward, reverse,
            baseout=output_dir / 'reads.adapter_trimmed', **kws)
        self._transition(PipelineState.ADAPTER_TRIMMED)

        # Quality trim reads that lost their mate.
        unpaired1 = stages.qual_trim_se(
            config, trimmed.unpaired1,
            _suffixed(trimmed.unpaired1.path, '.qual_trimmed'), **kws)
        unpaired2 = stages.qual_trim_se(
            config, trimmed.unpaired2,
            _suffixed(trimmed.unpaired2.path, '.qual_trimmed'), **kws)
        self._transition(PipelineState.QUALITY_TRIMMED)

        # Merge overlapping mates.
        merged = stages.merge_overlap(
            config, trimmed.paired1, trimmed.paired2,
            output_dir=output_dir / 'flash', **kws)
        self._transition(PipelineState.MERGED)

        # Quality trim merged and unmerged reads, then consolidate.
        combined = stages.qual_trim_se(
            config, merged.combined,
            _suffixed(merged.combined.path, '.qual_trimmed'), **kws)

        not_combined = stages.qual_trim_pe(
            config, merged.not_combined1, merged.not_combined2,
            baseout=output_dir /
            'reads.adapter_trimmed.flash_notcombined.qual_trimmed', **kws)

        self._frontier = self._consolidate(
            output_dir,
            paired1=not_combined.paired1,
            paired2=not_combined.paired2,
            unpaired=[combined, not_combined.unpaired1,
                      not_combined.unpaired2, unpaired1, unpaired2])
        self._transition(PipelineState.CONSOLIDATED)

        if config.screen:
            screened = self._screen(output_dir, **kws)
            self._transition(PipelineState.SCREENED)

            self._frontier = self._repair(output_dir, screened, **kws)
            self._transition(PipelineState.REPAIRED)

        self._finalize(output_dir, **kws)
        self._transition(PipelineState.FINALIZED)

        self._logger.info('QC finished')
        self._logger.info('Output directory: %s', output_dir)

    def _consolidate(self, output_dir, paired1, paired2, unpaired):
        """Moves surviving reads to the canonical output names."""

        self._logger.info('- Consolidating reads')

        check_files(paired1.path, paired2.path,
                    *(read_set.path for read_set in unpaired))

        out_paired1 = move_file(paired1.path, output_dir / 'reads.1.fq')
        out_paired2 = move_file(paired2.path, output_dir / 'reads.2.fq')

        unpaired_paths = [read_set.path for read_set in unpaired]
        out_unpaired = concatenate_files(unpaired_paths,
                                         output_dir / 'reads.U.fq')
        delete_files(*unpaired_paths)

        return Frontier(
            forward=ReadSet(out_paired1, Role.PAIRED_FORWARD),
            reverse=ReadSet(out_paired2, Role.PAIRED_REVERSE),
            unpaired=ReadSet(out_unpaired, Role.UNPAIRED))

    def _screen(self, output_dir, **kws):
        """Screens the frontier reads, collecting reads that hit the genome."""

        screened = [
            stages.screen(self._config, read_set, **kws)
            for read_set in self._frontier
        ]

        hits_dir = make_directory(output_dir / HITS_DIR)

        hit_paths = [result.hit.path for result in screened]
        self._hits_path = concatenate_files(hit_paths, hits_dir / HITS_NAME)
        delete_files(*hit_paths)

        return Frontier(*(result.keep for result in screened))

    def _repair(self, output_dir, screened, **kws):
        """Repairs mate pairs of the screened reads."""

        repaired = stages.fix_pairs(
            self._config, screened.forward, screened.reverse,
            output_dir=output_dir, **kws)

        # Add reads that lost their mate to the other unpaired reads.
        tmp_unpaired = output_dir / 'reads.U.fq.tmp'
        unpaired_paths = [screened.unpaired.path, repaired.unpaired.path]

        concatenate_files(unpaired_paths, tmp_unpaired)
        delete_files(*unpaired_paths)

        out_unpaired = move_file(tmp_unpaired, output_dir / 'reads.U.fq')
        out_paired1 = move_file(repaired.paired1.path,
                                output_dir / 'reads.1.fq')
        out_paired2 = move_file(repaired.paired2.path,
                                output_dir / 'reads.2.fq')

        return Frontier(
            forward=repaired.paired1.with_path(out_paired1),
            reverse=repaired.paired2.with_path(out_paired2),
            unpaired=repaired.unpaired.with_path(out_unpaired))

    def _finalize(self, output_dir, **kws):
        """Converts outputs to fasta (if screening) and compresses them."""

        config = self._config

        if config.screen and config.fq2fa is not None:
            self._fasta_paths = stages.fasta_convert(
                config, self._frontier, output_dir / FASTA_DIR, **kws)

        if config.compressor is None:
            self._logger.warning('No compressor available, output files '
                                 'will not be zipped')
            return

        hit_paths = [] if self._hits_path is None else [self._hits_path]
        groups = [self._frontier.paths, self._fasta_paths, hit_paths]

        compressed = iter(
            stages.compress_outputs(
                config, list(toolz.concat(groups)), **kws))

        frontier_paths, fasta_paths, hit_paths = [
            tuple(toolz.take(len(group), compressed)) for group in groups
        ]

        self._frontier = Frontier(*(
            read_set.with_path(path)
            for read_set, path in zip(self._frontier, frontier_paths)))

        self._fasta_paths = fasta_paths

        if hit_paths:
            self._hits_path = hit_paths[0]


def _suffixed(file_path, suffix):
    return Path(str(file_path) + suffix)
