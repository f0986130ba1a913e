"""
intake/validator.py — Structural and enumerated-domain checks.

Runs against a decoded, already-normalized AnalysisData. All violations are
collected so the client sees every bad field at once; any violation fails the
whole report. Inputs are never modified and no defaults are substituted.
"""
import logging
import re
from datetime import datetime, timedelta
from typing import List, Optional

from intake import enums
from intake.errors import ValidationFailure, Violation
from models.analysis import Analysis, AnalysisData
from models.vulnerability import Vulnerability

logger = logging.getLogger(__name__)

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

ANALYSIS_STATUSES = enums.values(enums.AnalysisStatus)
TOOLS = enums.values(enums.Tool)
CONFIDENCES = enums.values(enums.Confidence)
LANGUAGES = enums.values(enums.Language)
SEVERITIES = enums.values(enums.Severity)
VULNERABILITY_TYPES = enums.values(enums.VulnerabilityType)


def validate(data: Optional[AnalysisData]) -> AnalysisData:
    """Return `data` unchanged if valid, else raise ValidationFailure."""
    violations = collect_violations(data)
    if violations:
        raise ValidationFailure(violations)
    return data


def collect_violations(data: Optional[AnalysisData]) -> List[Violation]:
    if data is None:
        return [_required("analysisData")]
    if data.analysis is None:
        return [_required("analysis")]
    return _check_analysis(data.analysis)


def _check_analysis(analysis: Analysis) -> List[Violation]:
    violations: List[Violation] = []

    if not analysis.id:
        violations.append(_required("analysis.id"))
    elif not _UUID_PATTERN.match(analysis.id):
        violations.append(Violation("analysis.id", "uuid", "must be a valid UUID"))

    _check_in(violations, "analysis.status", analysis.status, ANALYSIS_STATUSES)

    if _is_empty_time(analysis.created_at):
        violations.append(_required("analysis.createdAt"))
    if _is_empty_time(analysis.finished_at):
        violations.append(_required("analysis.finishedAt"))

    for index, item in enumerate(analysis.analysis_vulnerabilities):
        prefix = f"analysis.analysisVulnerabilities[{index}].vulnerability"
        violations.extend(_check_vulnerability(prefix, item.vulnerability))

    return violations


def _check_vulnerability(prefix: str, vuln: Vulnerability) -> List[Violation]:
    violations: List[Violation] = []
    _check_in(violations, f"{prefix}.securityTool", vuln.security_tool, TOOLS)
    if not vuln.vuln_hash:
        violations.append(_required(f"{prefix}.vulnHash"))
    _check_in(violations, f"{prefix}.confidence", vuln.confidence, CONFIDENCES)
    _check_in(violations, f"{prefix}.language", vuln.language, LANGUAGES)
    _check_in(violations, f"{prefix}.severity", vuln.severity, SEVERITIES)
    _check_in(violations, f"{prefix}.type", vuln.type, VULNERABILITY_TYPES)
    return violations


def _check_in(violations: List[Violation], field: str, value: str, allowed) -> None:
    if not value:
        violations.append(_required(field))
    elif value not in allowed:
        violations.append(Violation(field, "in", f"must be one of: {', '.join(sorted(allowed))}"))


def _is_empty_time(value: Optional[datetime]) -> bool:
    # 0001-01-01T00:00:00Z is the zero timestamp older clients send for "unset"
    if value is None:
        return True
    offset = value.utcoffset()
    return value.replace(tzinfo=None) == datetime.min and offset in (None, timedelta(0))


def _required(field: str) -> Violation:
    return Violation(field, "required", "cannot be blank")
