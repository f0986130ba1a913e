"""tests/test_validator.py — Unit tests for analysis validation"""
import json

import pytest

from intake import decode_and_validate
from intake.decoder import decode
from intake.errors import ValidationFailure
from intake.validator import collect_violations, validate

from conftest import make_current_payload, make_legacy_payload

VULN = "analysis.analysisVulnerabilities[0].vulnerability"


def _decode(payload):
    return decode(json.dumps(payload), legacy=False)


def _fields(payload):
    return [v.field for v in collect_violations(_decode(payload))]


def test_valid_report_returned_unchanged(current_payload):
    data = _decode(current_payload)
    assert validate(data) is data


def test_validation_is_idempotent(current_payload):
    data = _decode(current_payload)
    before = data.model_dump()
    validate(data)
    validate(data)
    assert data.model_dump() == before


def test_none_report():
    violations = collect_violations(None)
    assert [(v.field, v.rule) for v in violations] == [("analysisData", "required")]


def test_null_analysis():
    with pytest.raises(ValidationFailure) as exc:
        decode_and_validate(b'{"analysis": null}', "")
    assert exc.value.fields == ["analysis"]
    assert exc.value.violations[0].rule == "required"


@pytest.mark.parametrize("key, field", [
    ("id", "analysis.id"),
    ("status", "analysis.status"),
    ("createdAt", "analysis.createdAt"),
    ("finishedAt", "analysis.finishedAt"),
])
def test_missing_mandatory_analysis_field(current_payload, key, field):
    del current_payload["analysis"][key]
    assert _fields(current_payload) == [field]


@pytest.mark.parametrize("bad_id", [
    "not-a-uuid", "a8b3c1d24e5f4a6b8c7d9e0f1a2b3c4d", "{a8b3c1d2-4e5f-4a6b-8c7d-9e0f1a2b3c4d}",
])
def test_invalid_uuid(current_payload, bad_id):
    current_payload["analysis"]["id"] = bad_id
    violations = collect_violations(_decode(current_payload))
    assert [(v.field, v.rule) for v in violations] == [("analysis.id", "uuid")]


def test_uppercase_uuid_accepted(current_payload):
    current_payload["analysis"]["id"] = current_payload["analysis"]["id"].upper()
    assert _fields(current_payload) == []


def test_unknown_status(current_payload):
    current_payload["analysis"]["status"] = "finished"
    violations = collect_violations(_decode(current_payload))
    assert [(v.field, v.rule) for v in violations] == [("analysis.status", "in")]


def test_zero_timestamp_is_empty(current_payload):
    current_payload["analysis"]["finishedAt"] = "0001-01-01T00:00:00Z"
    assert _fields(current_payload) == ["analysis.finishedAt"]


@pytest.mark.parametrize("key, value", [
    ("securityTool", "Trivy"),
    ("confidence", "high"),
    ("language", "Cobol"),
    ("severity", "SEVERE"),
    ("type", "Maybe"),
])
def test_unknown_enumeration_value(key, value):
    payload = make_current_payload(**{key: value})
    violations = collect_violations(_decode(payload))
    assert [(v.field, v.rule) for v in violations] == [(f"{VULN}.{key}", "in")]


def test_empty_hash():
    with pytest.raises(ValidationFailure) as exc:
        decode_and_validate(json.dumps(make_current_payload(vulnHash="")), "")
    assert exc.value.fields == [f"{VULN}.vulnHash"]


def test_all_violations_collected(current_payload):
    current_payload["analysis"]["id"] = "nope"
    current_payload["analysis"]["status"] = ""
    vuln = current_payload["analysis"]["analysisVulnerabilities"][0]["vulnerability"]
    vuln["securityTool"] = "Unknown"
    vuln["severity"] = ""
    current_payload["analysis"]["analysisVulnerabilities"].append(
        {"vulnerability": dict(vuln, vulnHash="", language="Go", severity="LOW", securityTool="Bandit")}
    )
    fields = _fields(current_payload)
    assert fields == [
        "analysis.id",
        "analysis.status",
        f"{VULN}.securityTool",
        f"{VULN}.severity",
        "analysis.analysisVulnerabilities[1].vulnerability.vulnHash",
    ]


def test_every_disposition_accepted():
    for disposition in ("Vulnerability", "Risk Accepted", "False Positive", "Corrected"):
        assert _fields(make_current_payload(type=disposition)) == []


def test_report_without_vulnerabilities_is_valid(current_payload):
    current_payload["analysis"]["analysisVulnerabilities"] = []
    assert _fields(current_payload) == []


# ── Explicit nulls ────────────────────────────────────────────────────────────

def test_null_status(current_payload):
    current_payload["analysis"]["status"] = None
    with pytest.raises(ValidationFailure) as exc:
        decode_and_validate(json.dumps(current_payload), "")
    assert [(v.field, v.rule) for v in exc.value.violations] == [("analysis.status", "required")]


@pytest.mark.parametrize("key", [
    "vulnHash", "securityTool", "confidence", "language", "severity", "type",
])
def test_null_vulnerability_field(key):
    with pytest.raises(ValidationFailure) as exc:
        decode_and_validate(json.dumps(make_current_payload(**{key: None})), "")
    assert [(v.field, v.rule) for v in exc.value.violations] == [(f"{VULN}.{key}", "required")]


def test_null_vulnerability_record(current_payload):
    current_payload["analysis"]["analysisVulnerabilities"][0]["vulnerability"] = None
    fields = _fields(current_payload)
    assert fields == [
        f"{VULN}.securityTool",
        f"{VULN}.vulnHash",
        f"{VULN}.confidence",
        f"{VULN}.language",
        f"{VULN}.severity",
        f"{VULN}.type",
    ]


def test_null_legacy_fields_fail_validation():
    payload = make_legacy_payload(vulnHash=None)
    payload["analysis"]["status"] = None
    with pytest.raises(ValidationFailure) as exc:
        decode_and_validate(json.dumps(payload), "v1.8.2")
    assert exc.value.fields == ["analysis.status", f"{VULN}.vulnHash"]


# ── Zero timestamps ───────────────────────────────────────────────────────────

def test_zero_timestamp_with_offset_is_not_empty(current_payload):
    current_payload["analysis"]["createdAt"] = "0001-01-01T00:00:00+05:00"
    assert _fields(current_payload) == []


def test_naive_zero_timestamp_is_empty(current_payload):
    current_payload["analysis"]["createdAt"] = "0001-01-01T00:00:00"
    assert _fields(current_payload) == ["analysis.createdAt"]
