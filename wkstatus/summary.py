"""
Review and lesson counts from the /summary endpoint.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .models import ReviewBatch


def count_due_reviews(batches: Sequence[ReviewBatch], now: datetime) -> int:
    """
    Count subjects whose review is already available.

    A batch is due only when ``available_at`` is strictly before ``now``;
    a batch scheduled exactly at ``now`` is left for the next run.
    """
    return sum(batch.size for batch in batches if batch.available_at < now)


def count_pending_lessons(batches: Sequence[ReviewBatch]) -> int:
    """Size of the first lessons entry (the API reports one batch)."""
    if not batches:
        return 0
    return batches[0].size


@dataclass(frozen=True)
class Summary:
    """Due reviews and pending lessons at a given moment."""

    reviews: int
    lessons: int

    @classmethod
    def from_resource(cls, resource: dict[str, Any], now: datetime) -> Summary:
        data = resource["data"]
        reviews = [ReviewBatch.model_validate(item) for item in data.get("reviews", [])]
        lessons = [ReviewBatch.model_validate(item) for item in data.get("lessons", [])]
        return cls(
            reviews=count_due_reviews(reviews, now),
            lessons=count_pending_lessons(lessons),
        )
