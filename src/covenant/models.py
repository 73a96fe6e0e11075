"""
Domain records consumed by the risk and compliance engine.

Contracts and compliance checks arrive from the storage collaborator as
immutable snapshots; the engine never mutates them.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

if TYPE_CHECKING:
    from covenant.risk.engine import RiskAssessmentResult


class ContractStatus(str, Enum):
    """Lifecycle status of a contract."""

    DRAFT = "draft"
    UNDER_REVIEW = "under_review"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class RiskLevel(str, Enum):
    """Overall risk level classification."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def severity(self) -> int:
        """Rank of the level, 0 for low up to 3 for critical."""
        return _RISK_LEVEL_RANK[self]


_RISK_LEVEL_RANK = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
    RiskLevel.CRITICAL: 3,
}


class ComplianceStatus(str, Enum):
    """Outcome of evaluating one contract against one compliance rule."""

    COMPLIANT = "compliant"
    NON_COMPLIANT = "non_compliant"
    PENDING_REVIEW = "pending_review"
    NEEDS_ATTENTION = "needs_attention"


Timestamp = Union[datetime, date]


@dataclass(frozen=True)
class Contract:
    """Contract snapshot as supplied for risk scoring."""

    value: Decimal
    vendor: str
    status: ContractStatus = ContractStatus.DRAFT
    currency: str = "EUR"  # Informational only, never converted
    category: Optional[str] = None
    start_date: Optional[Timestamp] = None
    end_date: Optional[Timestamp] = None
    id: Optional[str] = None

    # Persisted risk columns, owned by the storage layer
    risk_score: Optional[float] = None
    risk_level: Optional[RiskLevel] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Contract":
        """
        Build a contract from a plain mapping (e.g. a database row).

        Only coerces enums and the numeric value; input validation
        belongs to the caller.
        """
        risk_level = data.get("risk_level")
        risk_score = data.get("risk_score")
        return cls(
            value=Decimal(str(data["value"])),
            vendor=data.get("vendor", ""),
            status=ContractStatus(data.get("status", ContractStatus.DRAFT)),
            currency=data.get("currency", "EUR"),
            category=data.get("category"),
            start_date=_parse_timestamp(data.get("start_date")),
            end_date=_parse_timestamp(data.get("end_date")),
            id=str(data["id"]) if data.get("id") is not None else None,
            risk_score=float(risk_score) if risk_score is not None else None,
            risk_level=RiskLevel(risk_level) if risk_level else None,
        )

    def with_assessment(self, result: "RiskAssessmentResult") -> "Contract":
        """Return a copy carrying the score and level of an assessment."""
        return replace(self, risk_score=result.score, risk_level=result.level)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "value": str(self.value),
            "currency": self.currency,
            "vendor": self.vendor,
            "category": self.category,
            "status": ContractStatus(self.status).value,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "risk_score": self.risk_score,
            "risk_level": RiskLevel(self.risk_level).value if self.risk_level else None,
        }


@dataclass(frozen=True)
class ComplianceCheck:
    """Compliance check joined with its rule's category."""

    status: ComplianceStatus
    rule_category: Optional[str] = None
    contract_id: Optional[str] = None
    rule_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ComplianceCheck":
        """Build a compliance check from a plain mapping."""
        contract_id = data.get("contract_id")
        return cls(
            status=ComplianceStatus(data["status"]),
            rule_category=data.get("rule_category"),
            contract_id=str(contract_id) if contract_id is not None else None,
            rule_name=data.get("rule_name"),
        )


def _parse_timestamp(value: Any) -> Optional[Timestamp]:
    """Accept datetime/date objects or ISO 8601 strings."""
    if value is None or value == "":
        return None
    if isinstance(value, (datetime, date)):
        return value
    return datetime.fromisoformat(str(value))
