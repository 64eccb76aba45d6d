"""Stage functions of the QC pipeline.

Each stage invokes one or more external tools, checks that the expected
outputs exist, renames outputs into the naming scheme expected by the next
stage and deletes the inputs it fully consumed. Read files are passed in
and out as ReadSet handles.
"""

import logging
from collections import namedtuple
from pathlib import Path

from pyqc.external.bowtie2 import bowtie2_screen
from pyqc.external.compress import compress
from pyqc.external.fix_pairs import fix_pairs as run_fix_pairs
from pyqc.external.flash import flash
from pyqc.external.fq2fa import fq2fa
from pyqc.external.trimmomatic import (trimmomatic_pe, trimmomatic_se,
                                       illumina_clip, sliding_window, min_len)
from pyqc.model import ReadSet, Role
from pyqc.util.file import read_count
from pyqc.util.staging import (check_files, delete_files, make_directory,
                               move_file, remove_directory, touch)

PairedReads = namedtuple('PairedReads',
                         ['paired1', 'unpaired1', 'paired2', 'unpaired2'])

MergedReads = namedtuple('MergedReads',
                         ['combined', 'not_combined1', 'not_combined2'])

ScreenedReads = namedtuple('ScreenedReads', ['keep', 'hit'])

RepairedReads = namedtuple('RepairedReads', ['paired1', 'paired2', 'unpaired'])

COMBINED_NAME = 'reads.adapter_trimmed.flash_combined'
NOT_COMBINED_NAMES = ('reads.adapter_trimmed.flash_notcombined_1P',
                      'reads.adapter_trimmed.flash_notcombined_2P')


def adapter_trim(config, forward, reverse, baseout, log_path=None,
                 logger=None):
    """Clips adapter sequences from paired reads.

    Inputs are left in place, as these are the original input files.
    """

    logger = logger or logging.getLogger()
    logger.info('- Trimming adapters')

    clip_step = illumina_clip(
        config.adapters_path,
        seed_mismatches=config.seed_mismatches,
        palindrome_clip_threshold=config.palindrome_clip_threshold,
        simple_clip_threshold=config.simple_clip_threshold)

    outputs = trimmomatic_pe(
        in1_path=forward.path,
        in2_path=reverse.path,
        baseout=baseout,
        steps=[clip_step],
        threads=config.threads,
        log_path=log_path,
        command=config.trimmomatic)

    check_files(*outputs)

    return _paired_reads(outputs)


def qual_trim_se(config, reads, output_path, log_path=None, logger=None):
    """Quality trims single-end reads.

    If the input contains no reads, Trimmomatic is not run and an empty
    placeholder is written to output_path instead. The input is deleted
    in both cases.
    """

    logger = logger or logging.getLogger()

    if read_count(reads.path) >= 1:
        logger.info('- Quality trimming %s', reads.path.name)

        trimmomatic_se(
            input_path=reads.path,
            output_path=output_path,
            steps=_quality_steps(config),
            threads=config.threads,
            log_path=log_path,
            command=config.trimmomatic)
    else:
        logger.warning('No reads in %s, not running quality trimming',
                       reads.path)
        touch(output_path)
        logger.info('Made placeholder file %s', output_path)

    delete_files(reads.path, check=False)
    check_files(output_path)

    return reads.with_path(output_path)


def qual_trim_pe(config, reads1, reads2, baseout, log_path=None,
                 logger=None):
    """Quality trims paired reads, deleting the inputs afterwards."""

    logger = logger or logging.getLogger()
    logger.info('- Quality trimming %s and %s', reads1.path.name,
                reads2.path.name)

    outputs = trimmomatic_pe(
        in1_path=reads1.path,
        in2_path=reads2.path,
        baseout=baseout,
        steps=_quality_steps(config),
        threads=config.threads,
        log_path=log_path,
        command=config.trimmomatic)

    delete_files(reads1.path, reads2.path, check=False)
    check_files(*outputs)

    return _paired_reads(outputs)


def merge_overlap(config, reads1, reads2, output_dir, log_path=None,
                  logger=None):
    """Merges overlapping mates using FLASH.

    FLASH outputs are moved from output_dir into its parent directory,
    under the names given by COMBINED_NAME and NOT_COMBINED_NAMES, after
    which output_dir is removed.
    """

    logger = logger or logging.getLogger()
    logger.info('- Merging overlapping mates')

    output_dir = make_directory(output_dir)

    outputs = flash(
        in1_path=reads1.path,
        in2_path=reads2.path,
        output_dir=output_dir,
        max_overlap=config.max_overlap,
        threads=config.threads,
        log_path=log_path,
        command=config.flash)

    delete_files(reads1.path, reads2.path, check=False)
    check_files(*outputs)

    # Move outputs to canonical names one level up.
    parent_dir = output_dir.parent

    combined = move_file(outputs.combined, parent_dir / COMBINED_NAME)
    not_combined1 = move_file(outputs.not_combined1,
                              parent_dir / NOT_COMBINED_NAMES[0])
    not_combined2 = move_file(outputs.not_combined2,
                              parent_dir / NOT_COMBINED_NAMES[1])

    remove_directory(output_dir, check=False)

    return MergedReads(
        combined=ReadSet(combined, Role.UNPAIRED),
        not_combined1=reads1.with_path(not_combined1),
        not_combined2=reads2.with_path(not_combined2))


def screen(config, reads, log_path=None, logger=None):
    """Screens reads against the configured reference genome.

    Reads that did not align are kept, reads that did align are flagged
    as genome hits. The input file is deleted afterwards.
    """

    logger = logger or logging.getLogger()
    logger.info('- Screening %s against %s', reads.path.name,
                config.bowtie_index)

    base = str(reads.path)

    outputs = bowtie2_screen(
        read_path=reads.path,
        index_path=config.bowtie_index,
        unaligned_path=Path(base + '.did_not_align.fq'),
        aligned_path=Path(base + '.did_align.fq'),
        threads=config.threads,
        log_path=log_path,
        command=config.bowtie2)

    check_files(*outputs)
    delete_files(reads.path, check=False)

    return ScreenedReads(
        keep=ReadSet(outputs.unaligned, Role.SCREENED_GOOD),
        hit=ReadSet(outputs.aligned, Role.SCREENED_BAD))


def fix_pairs(config, reads1, reads2, output_dir, log_path=None,
              logger=None):
    """Restores mate pairing after independent filtering of the mates."""

    logger = logger or logging.getLogger()
    logger.info('- Fixing mate pairs')

    outputs = run_fix_pairs(
        in1_path=reads1.path,
        in2_path=reads2.path,
        basename=Path(output_dir) / 'reads.fix_pairs',
        log_path=log_path,
        command=config.fix_pairs)

    delete_files(reads1.path, reads2.path, check=False)
    check_files(*outputs)

    return RepairedReads(
        paired1=ReadSet(outputs.paired1, Role.PAIRED_FORWARD),
        paired2=ReadSet(outputs.paired2, Role.PAIRED_REVERSE),
        unpaired=ReadSet(outputs.unpaired, Role.UNPAIRED))


def fasta_convert(config, frontier, output_dir, log_path=None, logger=None):
    """Converts the frontier reads to fasta files for IDBA.

    Returns the paths of the interleaved (paired) and unpaired fasta files.
    Original fastq files are left in place.
    """

    logger = logger or logging.getLogger()
    logger.info('- Converting reads to fasta')

    output_dir = make_directory(output_dir)

    interleaved_path = output_dir / 'reads.1_and_2_interleaved.fa'
    unpaired_path = output_dir / 'reads.U.fa'

    fq2fa([frontier.forward.path, frontier.reverse.path],
          interleaved_path,
          log_path=log_path,
          command=config.fq2fa)

    fq2fa([frontier.unpaired.path],
          unpaired_path,
          log_path=log_path,
          command=config.fq2fa)

    check_files(interleaved_path, unpaired_path)

    return interleaved_path, unpaired_path


def compress_outputs(config, file_paths, log_path=None, logger=None):
    """Compresses the given files.

    Compression is non-strict: if the compressor fails, a warning is
    logged and the uncompressed paths are returned for any files that
    were not compressed.
    """

    logger = logger or logging.getLogger()
    logger.info('- Compressing outputs')

    compressed = compress(
        file_paths,
        threads=config.threads,
        log_path=log_path,
        command=config.compressor,
        check=False)

    return [
        gz_path if gz_path.exists() else Path(orig_path)
        for orig_path, gz_path in zip(file_paths, compressed)
    ]


def _quality_steps(config):
    return [
        sliding_window(config.window_size, config.quality),
        min_len(config.min_length)
    ]


def _paired_reads(outputs):
    return PairedReads(
        paired1=ReadSet(outputs.paired1, Role.PAIRED_FORWARD),
        unpaired1=ReadSet(outputs.unpaired1, Role.UNPAIRED),
        paired2=ReadSet(outputs.paired2, Role.PAIRED_REVERSE),
        unpaired2=ReadSet(outputs.unpaired2, Role.UNPAIRED))
