"""Handles for the read files that flow between pipeline stages."""

from collections import namedtuple
from enum import Enum
from pathlib import Path


class Role(Enum):
    """Role of a read file within the pipeline."""

    PAIRED_FORWARD = 'paired-forward'
    PAIRED_REVERSE = 'paired-reverse'
    UNPAIRED = 'unpaired'
    SCREENED_GOOD = 'screened-good'
    SCREENED_BAD = 'screened-bad'


class ReadSet(namedtuple('ReadSet', ['path', 'role'])):
    """Path to a read file, tagged with its role.

    A handle is owned by the stage that currently holds it. Stages return
    new handles for their outputs and delete the files behind the handles
    they consumed, so a handle is never shared by two live stages.
    """

    __slots__ = ()

    def __new__(cls, path, role):
        return super().__new__(cls, Path(path), role)

    def with_path(self, path):
        """Returns a handle with the same role, pointing to path."""
        return self.__class__(path, self.role)

    def __str__(self):
        return str(self.path)


class Frontier(namedtuple('Frontier', ['forward', 'reverse', 'unpaired'])):
    """Latest surviving version of each read set."""

    __slots__ = ()

    @property
    def paths(self):
        """Paths of the frontier read sets."""
        return tuple(read_set.path for read_set in self)


class PipelineState(Enum):
    """States of a pipeline run."""

    INIT = 'init'
    ADAPTER_TRIMMED = 'adapter-trimmed'
    QUALITY_TRIMMED = 'quality-trimmed'
    MERGED = 'merged'
    CONSOLIDATED = 'consolidated'
    SCREENED = 'screened'
    REPAIRED = 'repaired'
    FINALIZED = 'finalized'
    FAILED = 'failed'


TRANSITIONS = {
    PipelineState.INIT: {PipelineState.ADAPTER_TRIMMED},
    PipelineState.ADAPTER_TRIMMED: {PipelineState.QUALITY_TRIMMED},
    PipelineState.QUALITY_TRIMMED: {PipelineState.MERGED},
    PipelineState.MERGED: {PipelineState.CONSOLIDATED},
    PipelineState.CONSOLIDATED: {PipelineState.SCREENED,
                                 PipelineState.FINALIZED},
    PipelineState.SCREENED: {PipelineState.REPAIRED},
    PipelineState.REPAIRED: {PipelineState.FINALIZED},
    PipelineState.FINALIZED: set(),
    PipelineState.FAILED: set()
} # yapf: disable
