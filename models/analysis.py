"""models/analysis.py — Current (v2) analysis report and request envelope."""
from datetime import datetime
from typing import Optional, Tuple

from pydantic import Field

from models.base import WireModel
from models.vulnerability import AnalysisVulnerability


class Analysis(WireModel):
    id: Optional[str] = None
    workspace_id: Optional[str] = Field(None, alias="workspaceID")
    workspace_name: str = Field("", alias="workspaceName")
    repository_id: Optional[str] = Field(None, alias="repositoryID")
    repository_name: str = Field("", alias="repositoryName")
    status: str = ""
    errors: str = ""
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    finished_at: Optional[datetime] = Field(None, alias="finishedAt")
    analysis_vulnerabilities: Tuple[AnalysisVulnerability, ...] = Field(
        (), alias="analysisVulnerabilities"
    )


class AnalysisData(WireModel):
    """Body sent by the CLI when it finishes an analysis."""
    version: str = ""
    repository_name: str = Field("", alias="repositoryName")
    analysis: Optional[Analysis] = None

    def to_summary(self) -> dict:
        analysis = self.analysis
        return {
            "analysis_id": analysis.id if analysis else None,
            "status": analysis.status if analysis else None,
            "version": self.version,
            "repository_name": self.repository_name,
            "vulnerabilities": len(analysis.analysis_vulnerabilities) if analysis else 0,
        }
