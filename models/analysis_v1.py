"""
models/analysis_v1.py — Payload shape sent by v1 CLI releases.

Only decoded, never stored; `intake.legacy.parse_v1_to_v2` turns it into the
current records.
"""
from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from models.base import WireModel


class VulnerabilityV1(WireModel):
    vulnerability_id: Optional[str] = Field(None, alias="vulnerabilityID")
    line: str = ""
    column: str = ""
    confidence: str = ""
    file: str = ""
    code: str = ""
    details: str = ""
    security_tool: str = Field("", alias="securityTool")
    language: str = ""
    severity: str = ""
    type: str = ""
    vuln_hash: str = Field("", alias="vulnHash")
    commit_author: str = Field("", alias="commitAuthor")
    commit_email: str = Field("", alias="commitEmail")
    commit_hash: str = Field("", alias="commitHash")
    commit_message: str = Field("", alias="commitMessage")
    commit_date: str = Field("", alias="commitDate")


class AnalysisVulnerabilityV1(WireModel):
    vulnerability_id: Optional[str] = Field(None, alias="vulnerabilityID")
    analysis_id: Optional[str] = Field(None, alias="analysisID")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    vulnerability: VulnerabilityV1 = Field(default_factory=VulnerabilityV1)


class AnalysisV1(WireModel):
    id: Optional[str] = None
    company_id: Optional[str] = Field(None, alias="companyID")
    company_name: str = Field("", alias="companyName")
    repository_id: Optional[str] = Field(None, alias="repositoryID")
    repository_name: str = Field("", alias="repositoryName")
    status: str = ""
    errors: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    finished_at: Optional[datetime] = Field(None, alias="finishedAt")
    analysis_vulnerabilities: Tuple[AnalysisVulnerabilityV1, ...] = Field(
        (), alias="analysisVulnerabilities"
    )


class AnalysisDataV1(WireModel):
    repository_name: str = Field("", alias="repositoryName")
    analysis: Optional[AnalysisV1] = None
