"""
Compliance check aggregation by rule category.

Groups check outcomes by the category of the rule they were evaluated
against and turns the tallies into pass-rate summaries. A category with
no checks counts as fully compliant.
"""

from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from covenant.config import settings
from covenant.models import ComplianceCheck, ComplianceStatus
from covenant.risk.score import round_half_up

DEFAULT_RULE_CATEGORY = "General"
VACUOUS_COMPLIANCE = 100


class ComplianceBand(str, Enum):
    """Display band for a compliance percentage."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class CategoryTally:
    """Running counts for one rule category."""

    total: int = 0
    compliant: int = 0

    def record(self, status: ComplianceStatus) -> "CategoryTally":
        """Return the tally with one more check counted."""
        return replace(
            self,
            total=self.total + 1,
            compliant=self.compliant + (1 if status == ComplianceStatus.COMPLIANT else 0),
        )


@dataclass(frozen=True)
class ComplianceCategorySummary:
    """Pass rate of one rule category."""

    name: str
    compliant_count: int
    total_count: int
    percentage: int  # 0 to 100

    @property
    def band(self) -> ComplianceBand:
        return classify_compliance_band(self.percentage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.name,
            "percentage": self.percentage,
            "compliant": self.compliant_count,
            "total": self.total_count,
            "band": self.band.value,
        }


def compliance_percentage(compliant: int, total: int, places: int = 0) -> float:
    """
    Percentage of compliant checks, rounded half-up.

    Args:
        compliant: Number of compliant checks
        total: Number of checks
        places: Decimal places to keep

    Returns:
        Rounded percentage, or 100 when there are no checks
    """
    if total <= 0:
        return float(VACUOUS_COMPLIANCE)
    ratio = Decimal(compliant) / Decimal(total) * 100
    return float(round_half_up(ratio, Decimal(1).scaleb(-places)))


def classify_compliance_band(
    percentage: float,
    good_threshold: Optional[float] = None,
    warning_threshold: Optional[float] = None,
) -> ComplianceBand:
    """
    Classify a compliance percentage into a display band.

    Args:
        percentage: Compliance percentage (0-100)
        good_threshold: Minimum for GOOD (defaults to settings)
        warning_threshold: Minimum for WARNING (defaults to settings)
    """
    if good_threshold is None:
        good_threshold = settings.compliance_good_threshold
    if warning_threshold is None:
        warning_threshold = settings.compliance_warning_threshold

    if percentage >= good_threshold:
        return ComplianceBand.GOOD
    if percentage >= warning_threshold:
        return ComplianceBand.WARNING
    return ComplianceBand.CRITICAL


def group_by_category(checks: Iterable[ComplianceCheck]) -> dict[str, CategoryTally]:
    """
    Tally checks per rule category in first-seen order.

    Checks without a category are grouped under "General". Every check
    counts toward the total; only compliant checks count as compliant.
    """
    groups: dict[str, CategoryTally] = {}
    for check in checks:
        key = check.rule_category or DEFAULT_RULE_CATEGORY
        groups[key] = groups.get(key, CategoryTally()).record(check.status)
    return groups


def to_summaries(groups: Mapping[str, CategoryTally]) -> list[ComplianceCategorySummary]:
    """Convert category tallies into summaries, keeping mapping order."""
    return [
        ComplianceCategorySummary(
            name=name,
            compliant_count=tally.compliant,
            total_count=tally.total,
            percentage=int(compliance_percentage(tally.compliant, tally.total)),
        )
        for name, tally in groups.items()
    ]


def summarize_compliance(
    checks: Iterable[ComplianceCheck],
    sort_by_name: bool = False,
) -> list[ComplianceCategorySummary]:
    """
    Summarize compliance checks per rule category.

    Args:
        checks: Compliance checks joined with their rule category
        sort_by_name: Order by category name instead of first appearance

    Returns:
        One summary per category
    """
    summaries = to_summaries(group_by_category(checks))
    if sort_by_name:
        summaries.sort(key=lambda s: s.name)
    return summaries
