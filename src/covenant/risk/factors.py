"""
Risk factor calculation for contracts.

Each contract yields an ordered list of weighted factors:
- Contract Value (always)
- Contract Duration (only when both dates are known)
- Vendor Risk (always)
- Category Risk (always)
- Compliance Risk (always)

Factor values are on a 0-10 scale. Lookup tables and thresholds are
plain module constants so they can move to external configuration
without touching the assessment functions.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, time, timezone
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Optional

from covenant.models import Contract, ContractStatus, Timestamp

logger = logging.getLogger(__name__)


# Factor names, in evaluation order
CONTRACT_VALUE = "Contract Value"
CONTRACT_DURATION = "Contract Duration"
VENDOR_RISK = "Vendor Risk"
CATEGORY_RISK = "Category Risk"
COMPLIANCE_RISK = "Compliance Risk"

FACTOR_WEIGHTS = MappingProxyType({
    CONTRACT_VALUE: Decimal("0.25"),
    CONTRACT_DURATION: Decimal("0.15"),
    VENDOR_RISK: Decimal("0.20"),
    CATEGORY_RISK: Decimal("0.15"),
    COMPLIANCE_RISK: Decimal("0.25"),
})

# (minimum contract value, risk) from the top band down
VALUE_RISK_BANDS = (
    (Decimal("1000000"), 8),
    (Decimal("500000"), 6),
    (Decimal("100000"), 4),
    (Decimal("50000"), 3),
)
VALUE_RISK_FLOOR = 2

# (minimum duration in months, risk) from the top band down
DURATION_RISK_BANDS = (
    (36, 7),
    (24, 5),
    (12, 3),
)
DURATION_RISK_FLOOR = 2
DAYS_PER_MONTH = 30

RELIABLE_VENDORS = ("Microsoft", "IBM", "Oracle", "SAP")
RELIABLE_VENDOR_RISK = 2
UNKNOWN_VENDOR_RISK = 5

CATEGORY_RISK_TABLE = MappingProxyType({
    "IT Infrastructure": 6,
    "Software License": 4,
    "Construction": 8,
    "Consulting": 5,
    "Office Supplies": 2,
    "Maintenance": 4,
    "Security": 7,
    "General": 3,
})
DEFAULT_CATEGORY = "General"
UNLISTED_CATEGORY_RISK = 5

COMPLIANCE_BASE_RISK = 3
DRAFT_STATUS_PENALTY = 2
MISSING_DATES_PENALTY = 1
MISSING_CATEGORY_PENALTY = 1
COMPLIANCE_RISK_CAP = 8


@dataclass(frozen=True)
class RiskFactor:
    """Individual weighted contributor to a contract's risk score."""

    name: str
    weight: Decimal  # In (0, 1]
    value: int  # 0 to 10
    description: str

    @property
    def weighted_value(self) -> Decimal:
        return self.value * self.weight

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "weight": float(self.weight),
            "value": self.value,
            "description": self.description,
        }


def _step(measure, bands, floor: int) -> int:
    """Return the risk of the first band whose minimum the measure reaches."""
    for minimum, risk in bands:
        if measure >= minimum:
            return risk
    return floor


def _as_datetime(value: Timestamp) -> datetime:
    """Normalize to an aware UTC datetime; naive values and dates count as UTC."""
    if not isinstance(value, datetime):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def assess_value_risk(value) -> int:
    """Higher contract values carry higher risk."""
    return _step(Decimal(str(value)), VALUE_RISK_BANDS, VALUE_RISK_FLOOR)


def contract_duration_months(start_date: Timestamp, end_date: Timestamp) -> float:
    """Contract length in 30-day months, including fractional days."""
    delta = _as_datetime(end_date) - _as_datetime(start_date)
    return delta.total_seconds() / 86400 / DAYS_PER_MONTH


def assess_duration_risk(start_date: Timestamp, end_date: Timestamp) -> int:
    """Longer contracts carry higher risk."""
    months = contract_duration_months(start_date, end_date)
    return _step(months, DURATION_RISK_BANDS, DURATION_RISK_FLOOR)


def assess_vendor_risk(vendor: Optional[str]) -> int:
    """
    Vendor risk from the reliable-vendor allow-list.

    Matching is a case-insensitive substring test, so "IBM Svenska AB"
    counts as IBM.
    """
    name = (vendor or "").lower()
    if any(known.lower() in name for known in RELIABLE_VENDORS):
        return RELIABLE_VENDOR_RISK
    return UNKNOWN_VENDOR_RISK


def assess_category_risk(category: Optional[str]) -> int:
    """
    Category risk from the category table.

    An unset category is looked up as "General"; a category that is set
    but not listed gets UNLISTED_CATEGORY_RISK instead.
    """
    return CATEGORY_RISK_TABLE.get(category or DEFAULT_CATEGORY, UNLISTED_CATEGORY_RISK)


def assess_compliance_risk(contract: Contract) -> int:
    """Risk from contract status and missing information."""
    risk = COMPLIANCE_BASE_RISK
    if contract.status == ContractStatus.DRAFT:
        risk += DRAFT_STATUS_PENALTY
    if not contract.start_date or not contract.end_date:
        risk += MISSING_DATES_PENALTY
    if not contract.category:
        risk += MISSING_CATEGORY_PENALTY
    return min(risk, COMPLIANCE_RISK_CAP)


def compute_factors(contract: Contract) -> list[RiskFactor]:
    """
    Compute the ordered risk factors for a contract.

    Args:
        contract: Contract snapshot to assess

    Returns:
        Factors in evaluation order: value, duration (if both dates
        are present), vendor, category, compliance
    """
    factors = [
        RiskFactor(
            name=CONTRACT_VALUE,
            weight=FACTOR_WEIGHTS[CONTRACT_VALUE],
            value=assess_value_risk(contract.value),
            description=f"Contract value of {contract.value} {contract.currency}",
        )
    ]

    if contract.start_date and contract.end_date:
        factors.append(RiskFactor(
            name=CONTRACT_DURATION,
            weight=FACTOR_WEIGHTS[CONTRACT_DURATION],
            value=assess_duration_risk(contract.start_date, contract.end_date),
            description="Risk based on contract duration",
        ))

    factors.append(RiskFactor(
        name=VENDOR_RISK,
        weight=FACTOR_WEIGHTS[VENDOR_RISK],
        value=assess_vendor_risk(contract.vendor),
        description=f"Vendor: {contract.vendor}",
    ))

    factors.append(RiskFactor(
        name=CATEGORY_RISK,
        weight=FACTOR_WEIGHTS[CATEGORY_RISK],
        value=assess_category_risk(contract.category),
        description=f"Category: {contract.category or DEFAULT_CATEGORY}",
    ))

    factors.append(RiskFactor(
        name=COMPLIANCE_RISK,
        weight=FACTOR_WEIGHTS[COMPLIANCE_RISK],
        value=assess_compliance_risk(contract),
        description="Risk based on compliance requirements",
    ))

    logger.debug(f"Computed {len(factors)} risk factors for contract {contract.id or '<unsaved>'}")
    return factors
