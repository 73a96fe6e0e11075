"""
Covenant - Contract Risk and Compliance Engine

Rule-governed analytics for public-sector contract management:
- Scores each contract from weighted risk factors
- Classifies scores into low/medium/high/critical risk levels
- Derives reviewer recommendations from the assessment
- Aggregates compliance checks by rule category and into dashboard KPIs
"""

__version__ = "0.1.0"
