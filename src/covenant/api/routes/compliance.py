"""
Compliance API routes.
"""

from fastapi import APIRouter

from covenant.api.schemas import ComplianceCategoryOut, ComplianceSummaryRequest
from covenant.compliance import summarize_compliance

router = APIRouter()


@router.post("/summary", response_model=list[ComplianceCategoryOut])
def compliance_summary(request: ComplianceSummaryRequest) -> list[ComplianceCategoryOut]:
    """
    Summarize compliance checks per rule category.

    Checks without a rule category are reported under "General".
    """
    summaries = summarize_compliance(
        (check.to_check() for check in request.checks),
        sort_by_name=request.sort_by_name,
    )
    return [ComplianceCategoryOut.from_summary(s) for s in summaries]
