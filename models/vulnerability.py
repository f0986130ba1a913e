"""models/vulnerability.py — Current (v2) vulnerability records."""
from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from models.base import WireModel


class Vulnerability(WireModel):
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
    rule_id: str = Field("", alias="ruleID")
    commit_author: str = Field("", alias="commitAuthor")
    commit_email: str = Field("", alias="commitEmail")
    commit_hash: str = Field("", alias="commitHash")
    commit_message: str = Field("", alias="commitMessage")
    commit_date: str = Field("", alias="commitDate")
    deprecated_hashes: Tuple[str, ...] = Field((), alias="deprecatedHashes")


class AnalysisVulnerability(WireModel):
    """Join record placing one vulnerability inside an analysis."""
    vulnerability_id: Optional[str] = Field(None, alias="vulnerabilityID")
    analysis_id: Optional[str] = Field(None, alias="analysisID")
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    vulnerability: Vulnerability = Field(default_factory=Vulnerability)
