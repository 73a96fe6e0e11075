"""
Tests for contract and compliance check records.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from covenant.models import (
    ComplianceCheck,
    ComplianceStatus,
    Contract,
    ContractStatus,
    RiskLevel,
)


class TestContract:
    """Tests for the contract snapshot."""

    def test_from_dict(self):
        contract = Contract.from_dict({
            "id": 42,
            "value": "1200000.00",
            "vendor": "Initech",
            "category": "Construction",
            "status": "active",
            "start_date": "2024-01-01",
            "end_date": "2027-01-01T00:00:00",
            "risk_score": "6.0",
            "risk_level": "high",
        })

        assert contract.id == "42"
        assert contract.value == Decimal("1200000.00")
        assert contract.status == ContractStatus.ACTIVE
        assert contract.start_date == datetime(2024, 1, 1)
        assert contract.end_date == datetime(2027, 1, 1)
        assert contract.risk_score == 6.0
        assert contract.risk_level == RiskLevel.HIGH

    def test_from_dict_defaults(self):
        contract = Contract.from_dict({"value": 10, "vendor": "X", "start_date": ""})

        assert contract.status == ContractStatus.DRAFT
        assert contract.currency == "EUR"
        assert contract.start_date is None
        assert contract.risk_level is None

    def test_to_dict(self):
        contract = Contract(
            id="c-1",
            value=Decimal("500"),
            vendor="X",
            status=ContractStatus.UNDER_REVIEW,
            start_date=date(2024, 3, 1),
        )
        data = contract.to_dict()

        assert data["value"] == "500"
        assert data["status"] == "under_review"
        assert data["start_date"] == "2024-03-01"
        assert data["end_date"] is None

    def test_frozen(self):
        contract = Contract(value=Decimal("1"), vendor="X")
        with pytest.raises(AttributeError):
            contract.vendor = "Y"


class TestRiskLevel:
    def test_severity_order(self):
        levels = sorted(RiskLevel, key=lambda lvl: lvl.severity)
        assert levels == [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH, RiskLevel.CRITICAL]


class TestComplianceCheck:
    def test_from_dict(self):
        check = ComplianceCheck.from_dict({
            "status": "non_compliant",
            "rule_category": "Security",
            "contract_id": 7,
        })

        assert check.status == ComplianceStatus.NON_COMPLIANT
        assert check.rule_category == "Security"
        assert check.contract_id == "7"
        assert check.rule_name is None
