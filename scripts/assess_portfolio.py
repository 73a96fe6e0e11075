#!/usr/bin/env python3
"""
Run risk assessment over an exported contract portfolio.

Reads a JSON export with "contracts" and "compliance_checks" arrays,
assesses every contract and writes a report containing:
- Per-contract assessments
- Compliance summaries per rule category
- Dashboard statistics computed from the freshly assessed levels
"""

import json
import sys
from collections import Counter
from datetime import datetime, timezone
from pathlib import Path

from covenant.compliance import (
    compute_dashboard_stats,
    select_high_risk_contracts,
    summarize_compliance,
)
from covenant.models import ComplianceCheck, Contract, RiskLevel
from covenant.risk import assess_contract

DEFAULT_INPUT = Path("data/portfolio.json")
DEFAULT_OUTPUT = Path("data/portfolio_assessment.json")


def load_portfolio(path: Path) -> tuple[list[Contract], list[ComplianceCheck]]:
    """Load contracts and compliance checks from a JSON export."""
    with open(path) as f:
        data = json.load(f)
    contracts = [Contract.from_dict(c) for c in data.get("contracts", [])]
    checks = [ComplianceCheck.from_dict(c) for c in data.get("compliance_checks", [])]
    return contracts, checks


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Assess risk for a contract portfolio")
    parser.add_argument(
        "--input", "-i",
        type=Path,
        default=DEFAULT_INPUT,
        help="Portfolio export (JSON with contracts and compliance_checks)"
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Output file for the assessment report"
    )
    args = parser.parse_args()

    print("=" * 60)
    print("CONTRACT PORTFOLIO RISK ASSESSMENT")
    print("=" * 60)

    if not args.input.exists():
        print(f"Error: Portfolio not found at {args.input}")
        return 1

    contracts, checks = load_portfolio(args.input)
    print(f"Loaded {len(contracts)} contracts and {len(checks)} compliance checks")

    print("\nAssessing contracts...")
    assessed = []
    assessments = []
    level_counts = Counter()

    for contract in contracts:
        result = assess_contract(contract)
        assessed.append(contract.with_assessment(result))
        assessments.append({"contract_id": contract.id, **result.to_dict()})
        level_counts[result.level] += 1

    summaries = summarize_compliance(checks, sort_by_name=True)
    stats = compute_dashboard_stats(assessed, checks)

    # Summary
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)

    print("\nRisk level distribution:")
    for level in sorted(RiskLevel, key=lambda lvl: -lvl.severity):
        count = level_counts[level]
        pct = 100 * count / len(contracts) if contracts else 0.0
        print(f"  {level.value}: {count:,} ({pct:.1f}%)")

    print("\nCompliance by category:")
    for summary in summaries:
        print(
            f"  {summary.name}: {summary.percentage}% "
            f"({summary.compliant_count}/{summary.total_count}) [{summary.band.value}]"
        )

    print("\nDashboard:")
    for key, value in stats.to_dict().items():
        print(f"  {key}: {value}")

    high_risk = select_high_risk_contracts(assessed)
    print("\nTop 20 high-risk contracts:")
    for contract in high_risk[:20]:
        print(f"  {contract.risk_score:.1f}: {contract.id or '-'} {contract.vendor[:40]}")

    output = {
        "analysis_date": datetime.now(timezone.utc).isoformat(),
        "total_contracts": len(contracts),
        "level_distribution": {level.value: count for level, count in level_counts.items()},
        "assessments": assessments,
        "compliance_by_category": [s.to_dict() for s in summaries],
        "dashboard": stats.to_dict(),
    }

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with open(args.output, "w") as f:
        json.dump(output, f, indent=2, ensure_ascii=False)

    print(f"\nResults saved to: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
