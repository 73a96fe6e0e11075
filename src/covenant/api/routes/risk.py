"""
Risk assessment API routes.

Provides endpoints for:
- Assessing a single contract
- Assessing a batch of contracts
"""

import logging

from fastapi import APIRouter

from covenant.api.schemas import ContractIn, RiskAssessmentResponse
from covenant.config import settings
from covenant.risk import assess_contract

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/assess", response_model=RiskAssessmentResponse)
def assess(contract: ContractIn) -> RiskAssessmentResponse:
    """
    Assess the risk of one contract.

    Returns score, level, contributing factors and recommendations.
    """
    result = assess_contract(contract.to_contract())
    logger.info(f"Contract {contract.id or '<unsaved>'} assessed as {result.level.value}")
    return RiskAssessmentResponse.from_result(result, contract.id, settings.model_version)


@router.post("/assess/batch", response_model=list[RiskAssessmentResponse])
def assess_batch(contracts: list[ContractIn]) -> list[RiskAssessmentResponse]:
    """
    Assess several contracts independently.

    Results are returned in request order.
    """
    return [
        RiskAssessmentResponse.from_result(
            assess_contract(contract.to_contract()),
            contract.id,
            settings.model_version,
        )
        for contract in contracts
    ]
