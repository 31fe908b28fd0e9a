"""Run the reference expression catalog and emit a categorized report."""

from __future__ import annotations

import argparse
from collections import Counter
import json
from pathlib import Path

from math_parser import infix_to_postfix, try_evaluate
from math_parser.errors import MathParserError
from math_parser.reference_cases import CATALOG, ReferenceCase


def observed_outcome(case: ReferenceCase) -> tuple[str, str | None]:
    """Return ``(outcome kind, formatted value or None)`` for one case."""
    outcome = try_evaluate(case.expr)
    if isinstance(outcome, MathParserError):
        return outcome.kind, None
    return "value", outcome.text


def case_passes(case: ReferenceCase) -> bool:
    kind, text = observed_outcome(case)
    if kind != case.outcome:
        return False
    if case.expected is not None and text != case.expected:
        return False
    if case.postfix is not None:
        try:
            return infix_to_postfix(case.expr) == case.postfix
        except MathParserError:
            return False
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--json-out",
        default="",
        help="optional path for a machine-readable summary",
    )
    args = parser.parse_args(argv)

    by_group = Counter(case.group for case in CATALOG)
    by_outcome = Counter(case.outcome for case in CATALOG)
    failing = [case for case in CATALOG if not case_passes(case)]

    print("Reference expression catalog")
    print("----------------------------")
    print(f"total cases: {len(CATALOG)}")
    print("groups:")
    for key in sorted(by_group):
        print(f"  - {key}: {by_group[key]}")
    print("expected outcomes:")
    for key in sorted(by_outcome):
        print(f"  - {key}: {by_outcome[key]}")
    print(f"passing: {len(CATALOG) - len(failing)}/{len(CATALOG)}")
    for case in failing:
        kind, text = observed_outcome(case)
        print(f"  FAIL {case.id}: {case.expr!r} -> {kind} {text or ''}".rstrip())

    if args.json_out:
        outpath = Path(args.json_out)
        outpath.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "total_cases": len(CATALOG),
            "by_group": dict(sorted(by_group.items())),
            "by_expected_outcome": dict(sorted(by_outcome.items())),
            "failing": [case.id for case in failing],
            "cases": [case.__dict__ for case in CATALOG],
        }
        outpath.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote JSON: {outpath}")
    return 1 if failing else 0


if __name__ == "__main__":
    raise SystemExit(main())
