"""
SRS stage classification.

WaniKani tracks every assignment with an SRS stage from 0 (lesson not yet
taken) to 9 (burned). The menu only shows the five named groups, so stages
are folded into buckets here and counted per unique subject.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Assignment

MIN_STAGE = 0
MAX_STAGE = 9


class InvalidStageError(ValueError):
    """Raised for an SRS stage outside 0-9."""

    def __init__(self, srs_stage: int):
        super().__init__(f"unexpected srs_stage {srs_stage!r} (expected {MIN_STAGE}-{MAX_STAGE})")
        self.srs_stage = srs_stage


class StageBucket(str, Enum):
    """Named SRS groups, in display order."""

    APPRENTICE = "apprentice"
    GURU = "guru"
    MASTER = "master"
    ENLIGHTENED = "enlightened"
    BURNED = "burned"


_STAGE_TO_BUCKET: dict[int, StageBucket] = {
    1: StageBucket.APPRENTICE,
    2: StageBucket.APPRENTICE,
    3: StageBucket.APPRENTICE,
    4: StageBucket.APPRENTICE,
    5: StageBucket.GURU,
    6: StageBucket.GURU,
    7: StageBucket.MASTER,
    8: StageBucket.ENLIGHTENED,
    9: StageBucket.BURNED,
}


def classify_stage(srs_stage: int) -> StageBucket | None:
    """
    Map a raw SRS stage to its bucket.

    Args:
        srs_stage: Stage value reported by the API (0-9)

    Returns:
        The bucket, or None for stage 0 (not started)

    Raises:
        InvalidStageError: If the stage is negative or greater than 9
    """
    if srs_stage < MIN_STAGE or srs_stage > MAX_STAGE:
        raise InvalidStageError(srs_stage)
    if srs_stage == MIN_STAGE:
        return None
    return _STAGE_TO_BUCKET[srs_stage]


@dataclass(frozen=True)
class StageDistribution:
    """Finalized subject ids per bucket."""

    buckets: Mapping[StageBucket, frozenset[int]] = field(
        default_factory=lambda: MappingProxyType({b: frozenset() for b in StageBucket})
    )

    @classmethod
    def from_assignments(cls, assignments: Iterable[Assignment]) -> StageDistribution:
        tally = StageTally()
        for assignment in assignments:
            tally.add(assignment.srs_stage, assignment.subject_id)
        return tally.build()

    def subjects(self, bucket: StageBucket) -> frozenset[int]:
        return self.buckets.get(bucket, frozenset())

    def count(self, bucket: StageBucket) -> int:
        return len(self.subjects(bucket))

    @property
    def total(self) -> int:
        """Number of subjects past their lesson (every bucket combined)."""
        return sum(len(ids) for ids in self.buckets.values())


class StageTally:
    """
    Builder for StageDistribution.

    Adding the same subject twice is a no-op; a subject re-added with a
    different stage moves to the new bucket, so it is never counted twice.
    """

    def __init__(self) -> None:
        self._bucket_by_subject: dict[int, StageBucket] = {}

    def add(self, srs_stage: int, subject_id: int) -> StageBucket | None:
        bucket = classify_stage(srs_stage)
        if bucket is None:
            return None
        self._bucket_by_subject[subject_id] = bucket
        return bucket

    def __len__(self) -> int:
        return len(self._bucket_by_subject)

    def build(self) -> StageDistribution:
        grouped: dict[StageBucket, set[int]] = {bucket: set() for bucket in StageBucket}
        for subject_id, bucket in self._bucket_by_subject.items():
            grouped[bucket].add(subject_id)
        return StageDistribution(
            buckets=MappingProxyType({bucket: frozenset(ids) for bucket, ids in grouped.items()})
        )
