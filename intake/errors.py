"""
intake/errors.py — Typed failures raised by the intake pipeline.

Every error is terminal for the request that produced it.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Violation:
    """One failed constraint, addressed by its dotted field path."""
    field: str
    rule: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "rule": self.rule, "message": self.message}


class IntakeError(Exception):
    code = "intake_error"

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.code, "message": str(self)}


class MalformedPayload(IntakeError):
    """The body could not be parsed into the expected shape."""
    code = "malformed_payload"

    def __init__(self, message: str, details: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.details = details or []

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["details"] = self.details
        return payload


class EmptyBody(MalformedPayload):
    code = "empty_body"

    def __init__(self, message: str = "request body is empty"):
        super().__init__(message)


class ValidationFailure(IntakeError):
    """One or more field constraints were violated."""
    code = "validation_failure"

    def __init__(self, violations: List[Violation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"{len(self.violations)} invalid field(s): {fields}")

    @property
    def fields(self) -> List[str]:
        return [v.field for v in self.violations]

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["violations"] = [v.to_dict() for v in self.violations]
        return payload
