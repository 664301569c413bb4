"""
Status pass: fetch, aggregate, render.

One invocation walks the pipeline once:
credential check -> assignments -> stage tally -> user -> summary -> lines.
The first failed request short-circuits the pass and its failure is
rendered instead of the report.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from loguru import logger

from .client import ApiResult, WaniKaniClient
from .config import Settings
from .models import Assignment, UserProfile
from .render import Line, render_failure, render_report, render_unconfigured
from .stages import StageDistribution
from .summary import Summary


@dataclass(frozen=True)
class StatusReport:
    """Everything the menu shows after a successful pass."""

    summary: Summary
    stages: StageDistribution
    user: UserProfile


def collect_status(client: WaniKaniClient, now: datetime) -> ApiResult:
    """
    Fetch and aggregate the three endpoints.

    Args:
        client: Open WaniKani client
        now: Reference time for deciding which reviews are due

    Returns:
        ApiResult with a StatusReport, or the first failure encountered
    """
    assignments = client.fetch_assignments()
    if not assignments.success:
        return assignments
    stages = StageDistribution.from_assignments(
        Assignment.from_resource(resource) for resource in assignments.data
    )
    logger.debug("Classified {} subjects from {} assignments", stages.total, len(assignments.data))

    user = client.fetch_user()
    if not user.success:
        return user
    profile = UserProfile.from_resource(user.data)

    summary = client.fetch_summary()
    if not summary.success:
        return summary

    return ApiResult.ok(
        StatusReport(
            summary=Summary.from_resource(summary.data, now),
            stages=stages,
            user=profile,
        )
    )


def run_once(settings: Settings, now: datetime) -> list[Line]:
    """Produce the menu lines for one invocation."""
    if not settings.is_configured:
        logger.warning("VAR_API_TOKEN is not set")
        return render_unconfigured()

    with WaniKaniClient(
        settings.api_token,
        base_url=settings.api_base_url,
        timeout=settings.request_timeout,
        max_pages=settings.max_pages,
    ) as client:
        result = collect_status(client, now)

    if not result.success:
        return render_failure(result.failure)
    return render_report(result.data, settings)
