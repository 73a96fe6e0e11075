"""
API module for Covenant.

Provides REST API routes for:
- Contract risk assessment
- Compliance summaries by rule category
- Dashboard statistics
"""
