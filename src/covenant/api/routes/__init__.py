"""
API route modules.
"""

from covenant.api.routes.risk import router as risk_router
from covenant.api.routes.compliance import router as compliance_router
from covenant.api.routes.dashboard import router as dashboard_router

__all__ = [
    "risk_router",
    "compliance_router",
    "dashboard_router",
]
