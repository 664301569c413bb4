"""
Menu-bar line rendering.

xbar/SwiftBar read one item per stdout line. Anything after `` | `` is
parsed as display parameters (colour, click target, shortcut). The first
line is the title shown in the menu bar; ``---`` opens the dropdown and
separates groups inside it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .client import ApiFailure, FailureKind
from .config import Settings
from .stages import StageBucket, StageDistribution

if TYPE_CHECKING:
    from .status import StatusReport

REVIEW_URL = "https://wanikani.com/review/start"
LESSON_URL = "https://wanikani.com/lesson/start"

ERROR_COLOR = "red"

STAGE_COLORS: dict[StageBucket, str] = {
    StageBucket.APPRENTICE: "#dd0093",
    StageBucket.GURU: "#882d9e",
    StageBucket.MASTER: "#294ddb",
    StageBucket.ENLIGHTENED: "#0093dd",
    StageBucket.BURNED: "#fbc042",
}


@dataclass(frozen=True)
class Line:
    """One menu item: text plus ordered display parameters."""

    text: str
    params: tuple[tuple[str, str], ...] = ()

    @classmethod
    def of(cls, text: object, **params: str) -> Line:
        return cls(text=str(text), params=tuple(params.items()))

    def __str__(self) -> str:
        if not self.params:
            return self.text
        rendered = ", ".join(f"{key}={value}" for key, value in self.params)
        return f"{self.text} | {rendered}"


SEPARATOR = Line("---")
ERROR_BADGE = Line.of("!WK!", color=ERROR_COLOR)

UNCONFIGURED_MESSAGE = "Please set your WaniKani API token in the xbar application."


# =============================================================================
# Error output
# =============================================================================


def render_unconfigured() -> list[Line]:
    return [ERROR_BADGE, SEPARATOR, Line.of(UNCONFIGURED_MESSAGE, color=ERROR_COLOR)]


def render_failure(failure: ApiFailure) -> list[Line]:
    """Badge plus one line explaining the failed request."""
    if failure.kind is FailureKind.UNAUTHORIZED:
        detail = Line.of(f"{failure.message}, please check your API token", color=ERROR_COLOR)
    elif failure.kind in (FailureKind.SERVER_ERROR, FailureKind.CONNECTION):
        detail = Line.of(f"{failure.message}, please try again later?", color=ERROR_COLOR)
    else:
        detail = Line(failure.message)
    return [ERROR_BADGE, SEPARATOR, detail]


# =============================================================================
# Status output
# =============================================================================


def render_stages(stages: StageDistribution) -> list[Line]:
    return [SEPARATOR] + [
        Line.of(f"{bucket.value} {stages.count(bucket)}", color=STAGE_COLORS[bucket])
        for bucket in StageBucket
    ]


def render_level(report: StatusReport) -> list[Line]:
    learned = report.stages.total
    return [
        SEPARATOR,
        Line(f"total items {learned}/{learned + report.summary.lessons}"),
        Line(f"level {report.user.level}/{report.user.max_level_granted}"),
    ]


def render_user_info(report: StatusReport) -> list[Line]:
    return [
        SEPARATOR,
        Line(f"username {report.user.username}"),
        Line(f"subscription {report.user.subscription_type}"),
    ]


def render_report(report: StatusReport, settings: Settings) -> list[Line]:
    """
    Render a successful pass.

    The due review count is the menu-bar title; the optional sections are
    appended in a fixed order, each one gated by its own setting.
    """
    summary = report.summary
    lines = [
        Line.of(summary.reviews),
        SEPARATOR,
        Line.of(f"reviews {summary.reviews}", href=REVIEW_URL, key="shift+r"),
        Line.of(f"lessons {summary.lessons}", href=LESSON_URL, key="shift+l"),
    ]
    if settings.show_stages:
        lines.extend(render_stages(report.stages))
    if settings.show_level:
        lines.extend(render_level(report))
    if settings.show_user_info:
        lines.extend(render_user_info(report))
    return lines
