"""Validation reports.

Public API::

    from prowl.report import validate

    result = validate(raw_routes)
    print(result.to_json())
"""

from prowl.report.reporter import build_report, health_score, report_for, validate
from prowl.report.result import DepthWarning, Finding, ValidationResult, ValidationSummary

__all__ = [
    "DepthWarning",
    "Finding",
    "ValidationResult",
    "ValidationSummary",
    "build_report",
    "health_score",
    "report_for",
    "validate",
]
