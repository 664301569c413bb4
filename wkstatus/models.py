"""
WaniKani API resource models.

Every v2 resource wraps its fields in a ``data`` object next to metadata
(``object``, ``url``, ``data_updated_at``). The models below keep only the
fields the status line needs and are frozen once parsed.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Assignment(BaseModel):
    """One learner/subject pair with its current SRS stage."""

    model_config = ConfigDict(frozen=True)

    subject_id: int
    srs_stage: int

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> Assignment:
        return cls.model_validate(resource["data"])


class UserProfile(BaseModel):
    """Snapshot of the /user endpoint."""

    model_config = ConfigDict(frozen=True)

    username: str
    subscription_type: str
    level: int
    max_level_granted: int

    @classmethod
    def from_resource(cls, resource: dict[str, Any]) -> UserProfile:
        data = resource["data"]
        subscription = data.get("subscription") or {}
        return cls(
            username=data["username"],
            subscription_type=subscription.get("type") or "",
            level=data["level"],
            max_level_granted=subscription.get("max_level_granted", data["level"]),
        )


class ReviewBatch(BaseModel):
    """Subjects that become available at the same hour."""

    model_config = ConfigDict(frozen=True)

    available_at: datetime
    subject_ids: tuple[int, ...] = Field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.subject_ids)
