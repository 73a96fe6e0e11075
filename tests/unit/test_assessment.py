"""
Tests for the full contract risk assessment.

Tests:
- End-to-end scores and levels for reference contracts
- Recommendations attached to an assessment
- Determinism across calls and threads
- Result serialization and stamping onto contracts
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from datetime import date, datetime, timezone
from decimal import Decimal

from covenant.models import Contract, ContractStatus, RiskLevel
from covenant.risk import RiskAssessmentResult, assess_contract, assess_contracts
from covenant.risk.recommendations import (
    BASELINE_RECOMMENDATIONS,
    ESCALATION_RECOMMENDATIONS,
    FACTOR_RECOMMENDATIONS,
)
from covenant.risk.factors import CATEGORY_RISK, CONTRACT_VALUE, VENDOR_RISK


class TestAssessContract:
    """Tests for assess_contract."""

    def test_construction_contract_is_high(self, construction_contract):
        """8*.25 + 7*.15 + 5*.20 + 8*.15 + 3*.25 = 6.0"""
        result = assess_contract(construction_contract)

        assert result.score == 6.0
        assert result.level == RiskLevel.HIGH
        assert len(result.factors) == 5
        assert result.requires_escalation

    def test_construction_contract_recommendations(self, construction_contract):
        result = assess_contract(construction_contract)

        assert result.recommendations == (
            *FACTOR_RECOMMENDATIONS[CONTRACT_VALUE],
            *FACTOR_RECOMMENDATIONS[CATEGORY_RISK],
            *ESCALATION_RECOMMENDATIONS,
        )
        for text in FACTOR_RECOMMENDATIONS[VENDOR_RISK]:
            assert text not in result.recommendations

    def test_incomplete_draft_is_medium(self, incomplete_draft_contract):
        """3.70 / 0.85 rounds up to 4.4."""
        result = assess_contract(incomplete_draft_contract)

        assert result.score == 4.4
        assert result.level == RiskLevel.MEDIUM
        assert len(result.factors) == 4
        assert result.recommendations == BASELINE_RECOMMENDATIONS
        assert not result.requires_escalation

    def test_reliable_vendor_is_low(self, reliable_vendor_contract):
        """3*.25 + 2*.15 + 2*.20 + 4*.15 + 3*.25 = 2.8"""
        result = assess_contract(reliable_vendor_contract)

        assert result.score == 2.8
        assert result.level == RiskLevel.LOW

    def test_mixed_timezone_dates(self, construction_contract):
        """An aware start date next to a naive end date still scores."""
        contract = replace(
            construction_contract,
            start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            end_date=datetime(2027, 1, 1),
        )
        result = assess_contract(contract)

        assert result.score == 6.0
        assert result.level == RiskLevel.HIGH

    def test_level_follows_rounded_score(self):
        """8*.25 + 7*.15 + 2*.20 + 5*.15 + 3*.25 = 4.95, reported as 5.0 high."""
        contract = Contract(
            value=Decimal("1200000"),
            vendor="IBM",
            category="Consulting",
            status=ContractStatus.ACTIVE,
            start_date=date(2024, 1, 1),
            end_date=date(2027, 1, 1),
        )
        result = assess_contract(contract)

        assert result.score == 5.0
        assert result.level == RiskLevel.HIGH
        assert result.recommendations == (
            *FACTOR_RECOMMENDATIONS[CONTRACT_VALUE],
            *ESCALATION_RECOMMENDATIONS,
        )

    def test_score_within_bounds(self):
        contract = Contract(
            value=Decimal("5000000"),
            vendor="Unknown",
            category="Construction",
            status=ContractStatus.DRAFT,
            start_date=date(2020, 1, 1),
            end_date=date(2030, 1, 1),
        )
        result = assess_contract(contract)

        assert 0.0 <= result.score <= 10.0
        assert result.score <= max(f.value for f in result.factors)

    def test_same_input_same_result(self, construction_contract):
        assert assess_contract(construction_contract) == assess_contract(construction_contract)

    def test_concurrent_assessments_agree(self, construction_contract):
        expected = assess_contract(construction_contract)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(assess_contract, [construction_contract] * 50))

        assert all(r == expected for r in results)

    def test_input_not_mutated(self, incomplete_draft_contract):
        before = incomplete_draft_contract.to_dict()
        assess_contract(incomplete_draft_contract)

        assert incomplete_draft_contract.to_dict() == before


class TestAssessContracts:
    def test_preserves_order(self, construction_contract, incomplete_draft_contract):
        results = assess_contracts([incomplete_draft_contract, construction_contract])

        assert [r.level for r in results] == [RiskLevel.MEDIUM, RiskLevel.HIGH]

    def test_empty(self):
        assert assess_contracts([]) == []


class TestRiskAssessmentResult:
    """Tests for serialization and stamping."""

    def test_to_dict(self, incomplete_draft_contract):
        data = assess_contract(incomplete_draft_contract).to_dict()

        assert data["score"] == 4.4
        assert data["level"] == "medium"
        assert [f["name"] for f in data["factors"]] == [
            "Contract Value",
            "Vendor Risk",
            "Category Risk",
            "Compliance Risk",
        ]
        assert data["recommendations"] == list(BASELINE_RECOMMENDATIONS)

    def test_with_assessment(self, construction_contract):
        result = assess_contract(construction_contract)
        stamped = construction_contract.with_assessment(result)

        assert stamped.risk_score == 6.0
        assert stamped.risk_level == RiskLevel.HIGH
        assert construction_contract.risk_score is None
        assert stamped.value == construction_contract.value

    def test_result_is_immutable(self, construction_contract):
        result = assess_contract(construction_contract)

        assert isinstance(result, RiskAssessmentResult)
        assert isinstance(result.factors, tuple)
        assert isinstance(result.recommendations, tuple)
