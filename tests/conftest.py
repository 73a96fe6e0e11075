"""
Pytest configuration and shared fixtures for Covenant tests.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from covenant.models import (
    ComplianceCheck,
    ComplianceStatus,
    Contract,
    ContractStatus,
    RiskLevel,
)


@pytest.fixture
def construction_contract() -> Contract:
    """Large, long-running construction contract with an unlisted vendor."""
    return Contract(
        id="c-1",
        value=Decimal("1200000"),
        vendor="Initech",
        category="Construction",
        status=ContractStatus.ACTIVE,
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2027, 1, 1),
    )


@pytest.fixture
def incomplete_draft_contract() -> Contract:
    """Small draft contract with no category and no dates."""
    return Contract(
        id="c-2",
        value=Decimal("10000"),
        vendor="Initech",
        status=ContractStatus.DRAFT,
    )


@pytest.fixture
def reliable_vendor_contract() -> Contract:
    """Modest software license from a reliable vendor."""
    return Contract(
        id="c-3",
        value=Decimal("75000"),
        vendor="Microsoft Sverige AB",
        category="Software License",
        status=ContractStatus.ACTIVE,
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 7, 1),
    )


@pytest.fixture
def security_checks() -> list[ComplianceCheck]:
    """Two Security checks (one failing) and one Docs check."""
    return [
        ComplianceCheck(status=ComplianceStatus.COMPLIANT, rule_category="Security"),
        ComplianceCheck(status=ComplianceStatus.NON_COMPLIANT, rule_category="Security"),
        ComplianceCheck(status=ComplianceStatus.COMPLIANT, rule_category="Docs"),
    ]


@pytest.fixture
def stored_portfolio() -> list[Contract]:
    """Contracts carrying stored risk columns from earlier assessments."""
    return [
        Contract(id="p-1", value=Decimal("100"), vendor="A", status=ContractStatus.ACTIVE,
                 risk_score=5.5, risk_level=RiskLevel.HIGH),
        Contract(id="p-2", value=Decimal("100"), vendor="B", status=ContractStatus.ACTIVE,
                 risk_score=8.1, risk_level=RiskLevel.CRITICAL),
        Contract(id="p-3", value=Decimal("100"), vendor="C", status=ContractStatus.UNDER_REVIEW,
                 risk_score=6.7, risk_level=RiskLevel.HIGH),
        Contract(id="p-4", value=Decimal("100"), vendor="D", status=ContractStatus.DRAFT,
                 risk_score=2.0, risk_level=RiskLevel.LOW),
        Contract(id="p-5", value=Decimal("100"), vendor="E", status=ContractStatus.UNDER_REVIEW,
                 risk_level=RiskLevel.HIGH),
    ]
