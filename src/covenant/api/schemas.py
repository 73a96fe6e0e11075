"""
Request and response models for the Covenant API.

Request models are the validation layer in front of the engine; the
engine itself trusts its inputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from covenant.compliance import ComplianceCategorySummary, DashboardStats
from covenant.models import (
    ComplianceCheck,
    ComplianceStatus,
    Contract,
    ContractStatus,
    RiskLevel,
)
from covenant.risk import RiskAssessmentResult


class ContractIn(BaseModel):
    """Contract snapshot supplied by the caller."""

    id: Optional[str] = Field(None, description="Contract identifier")
    value: Decimal = Field(..., description="Contract value in its own currency")
    currency: str = Field("EUR", description="Currency tag (not converted)")
    vendor: str = Field(..., description="Vendor name")
    category: Optional[str] = Field(None, description="Contract category")
    status: ContractStatus = Field(ContractStatus.DRAFT, description="Lifecycle status")
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    risk_score: Optional[float] = Field(None, ge=0.0, le=10.0, description="Stored risk score")
    risk_level: Optional[RiskLevel] = Field(None, description="Stored risk level")

    def to_contract(self) -> Contract:
        return Contract(
            id=self.id,
            value=self.value,
            currency=self.currency,
            vendor=self.vendor,
            category=self.category,
            status=self.status,
            start_date=self.start_date,
            end_date=self.end_date,
            risk_score=self.risk_score,
            risk_level=self.risk_level,
        )


class ComplianceCheckIn(BaseModel):
    """Compliance check joined with its rule category."""

    status: ComplianceStatus
    rule_category: Optional[str] = Field(None, description="Category of the evaluated rule")
    contract_id: Optional[str] = None
    rule_name: Optional[str] = None

    def to_check(self) -> ComplianceCheck:
        return ComplianceCheck(
            status=self.status,
            rule_category=self.rule_category,
            contract_id=self.contract_id,
            rule_name=self.rule_name,
        )


class RiskFactorOut(BaseModel):
    """Single weighted risk factor."""

    name: str
    weight: float
    value: int
    description: str


class RiskAssessmentResponse(BaseModel):
    """Risk assessment of one contract."""

    model_config = ConfigDict(protected_namespaces=())

    contract_id: Optional[str] = None
    score: float
    level: RiskLevel
    factors: list[RiskFactorOut]
    recommendations: list[str]
    model_version: str

    @classmethod
    def from_result(
        cls,
        result: RiskAssessmentResult,
        contract_id: Optional[str],
        model_version: str,
    ) -> "RiskAssessmentResponse":
        data = result.to_dict()
        return cls(contract_id=contract_id, model_version=model_version, **data)


class ComplianceSummaryRequest(BaseModel):
    """Compliance checks to summarize."""

    checks: list[ComplianceCheckIn] = Field(default_factory=list)
    sort_by_name: bool = Field(False, description="Order categories alphabetically")


class ComplianceCategoryOut(BaseModel):
    """Pass rate of one rule category."""

    category: str
    percentage: int
    compliant: int
    total: int
    band: str

    @classmethod
    def from_summary(cls, summary: ComplianceCategorySummary) -> "ComplianceCategoryOut":
        return cls(**summary.to_dict())


class DashboardStatsRequest(BaseModel):
    """Contract and compliance snapshots for the dashboard."""

    contracts: list[ContractIn] = Field(default_factory=list)
    compliance_checks: list[ComplianceCheckIn] = Field(default_factory=list)


class DashboardStatsResponse(BaseModel):
    """Dashboard statistics response."""

    total_contracts: int = 0
    active_contracts: int = 0
    high_risk_contracts: int = 0
    pending_reviews: int = 0
    compliance_score: float = 100.0

    @classmethod
    def from_stats(cls, stats: DashboardStats) -> "DashboardStatsResponse":
        return cls(**stats.to_dict())
