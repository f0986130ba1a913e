"""
tests/conftest.py — pytest fixtures for the analysis intake service
"""
import copy
import json

import pytest
from app import create_app

ANALYSIS_ID = "a8b3c1d2-4e5f-4a6b-8c7d-9e0f1a2b3c4d"
REPOSITORY_ID = "0f9e8d7c-6b5a-4c3d-9e1f-2a3b4c5d6e7f"


@pytest.fixture(scope="session")
def app():
    """Create a test Flask application."""
    return create_app("testing")


@pytest.fixture()
def client(app):
    """Test client for API integration tests."""
    return app.test_client()


# ── Payload fixtures ─────────────────────────────────────────────────────────

_VULNERABILITY = {
    "vulnerabilityID": "5b0c7d3e-1a2f-4b6c-9d8e-7f6a5b4c3d2e",
    "line": "12",
    "column": "4",
    "confidence": "HIGH",
    "file": "cmd/server/main.go",
    "code": "password := \"hunter2\"",
    "details": "Hardcoded credentials",
    "securityTool": "GoSec",
    "language": "Go",
    "severity": "CRITICAL",
    "type": "Vulnerability",
    "vulnHash": "abc123",
    "commitAuthor": "dev",
    "commitEmail": "dev@acme.io",
    "commitHash": "9fceb02",
    "commitMessage": "initial",
    "commitDate": "2021-06-01",
}

_ANALYSIS = {
    "id": ANALYSIS_ID,
    "repositoryID": REPOSITORY_ID,
    "repositoryName": "payments",
    "status": "success",
    "errors": "",
    "createdAt": "2021-06-01T10:00:00Z",
    "finishedAt": "2021-06-01T10:05:00Z",
}


def make_current_payload(**vulnerability_overrides) -> dict:
    vulnerability = dict(_VULNERABILITY, ruleID="G101", deprecatedHashes=[])
    vulnerability.update(vulnerability_overrides)
    analysis = dict(
        _ANALYSIS,
        workspaceID="3c2b1a0f-9e8d-4c7b-a6f5-e4d3c2b1a0f9",
        workspaceName="acme",
        analysisVulnerabilities=[{
            "vulnerabilityID": vulnerability["vulnerabilityID"],
            "analysisID": ANALYSIS_ID,
            "createdAt": "2021-06-01T10:05:00Z",
            "vulnerability": vulnerability,
        }],
    )
    return {"version": "v2.0.0", "repositoryName": "payments", "analysis": analysis}


def make_legacy_payload(**vulnerability_overrides) -> dict:
    vulnerability = copy.deepcopy(_VULNERABILITY)
    vulnerability.update(vulnerability_overrides)
    analysis = dict(
        _ANALYSIS,
        companyID="3c2b1a0f-9e8d-4c7b-a6f5-e4d3c2b1a0f9",
        companyName="acme",
        analysisVulnerabilities=[{
            "vulnerabilityID": vulnerability["vulnerabilityID"],
            "analysisID": ANALYSIS_ID,
            "createdAt": "2021-06-01T10:05:00Z",
            "vulnerability": vulnerability,
        }],
    )
    return {"repositoryName": "payments", "analysis": analysis}


@pytest.fixture()
def current_payload():
    return make_current_payload()


@pytest.fixture()
def legacy_payload():
    return make_legacy_payload()


@pytest.fixture()
def current_body(current_payload):
    return json.dumps(current_payload).encode("utf-8")


@pytest.fixture()
def legacy_body(legacy_payload):
    return json.dumps(legacy_payload).encode("utf-8")
