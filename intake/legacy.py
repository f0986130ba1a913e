"""
intake/legacy.py — v1 → v2 payload adapter.

A pure mapping: nothing in the v1 records is mutated or kept. Fields the v1
shape lacks get a fixed default; mandatory values that are missing stay
missing so the validator rejects them instead of passing them vacuously.
"""
from models.analysis import Analysis, AnalysisData
from models.analysis_v1 import AnalysisDataV1, AnalysisV1, AnalysisVulnerabilityV1, VulnerabilityV1
from models.vulnerability import AnalysisVulnerability, Vulnerability

LEGACY_PAYLOAD_VERSION = "v1"


def parse_v1_to_v2(data: AnalysisDataV1) -> AnalysisData:
    """Map a decoded v1 envelope onto the current envelope."""
    return AnalysisData(
        version=LEGACY_PAYLOAD_VERSION,
        repository_name=data.repository_name,
        analysis=_analysis(data.analysis) if data.analysis is not None else None,
    )


def _analysis(analysis: AnalysisV1) -> Analysis:
    return Analysis(
        id=analysis.id,
        workspace_id=analysis.company_id,
        workspace_name=analysis.company_name,
        repository_id=analysis.repository_id,
        repository_name=analysis.repository_name,
        status=analysis.status,
        errors=analysis.errors,
        created_at=analysis.created_at,
        finished_at=analysis.finished_at,
        analysis_vulnerabilities=tuple(
            _analysis_vulnerability(item) for item in analysis.analysis_vulnerabilities
        ),
    )


def _analysis_vulnerability(item: AnalysisVulnerabilityV1) -> AnalysisVulnerability:
    return AnalysisVulnerability(
        vulnerability_id=item.vulnerability_id,
        analysis_id=item.analysis_id,
        created_at=item.created_at,
        vulnerability=_vulnerability(item.vulnerability),
    )


def _vulnerability(vuln: VulnerabilityV1) -> Vulnerability:
    return Vulnerability(
        vulnerability_id=vuln.vulnerability_id,
        line=vuln.line,
        column=vuln.column,
        confidence=vuln.confidence,
        file=vuln.file,
        code=vuln.code,
        details=vuln.details,
        security_tool=vuln.security_tool,
        language=vuln.language,
        severity=vuln.severity,
        type=vuln.type,
        vuln_hash=vuln.vuln_hash,
        commit_author=vuln.commit_author,
        commit_email=vuln.commit_email,
        commit_hash=vuln.commit_hash,
        commit_message=vuln.commit_message,
        commit_date=vuln.commit_date,
        # not present in v1
        rule_id="",
        deprecated_hashes=(),
    )
