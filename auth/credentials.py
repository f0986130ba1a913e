"""
auth/credentials.py — Username/password pair submitted at login.
"""
import json
from dataclasses import asdict, dataclass, field
from typing import List

from email_validator import EmailNotValidError, validate_email

from auth.passwords import check_password_hash
from intake.errors import ValidationFailure, Violation

MAX_FIELD_LENGTH = 255


@dataclass(frozen=True)
class LoginCredentials:
    username: str
    password: str = field(repr=False)

    def validate(self) -> None:
        """Raise ValidationFailure unless both fields are set and at most 255 chars."""
        violations: List[Violation] = []
        for name in ("username", "password"):
            value = getattr(self, name)
            if not value:
                violations.append(Violation(name, "required", "cannot be blank"))
            elif len(value) > MAX_FIELD_LENGTH:
                violations.append(Violation(
                    name, "length", f"the length must be no more than {MAX_FIELD_LENGTH}"
                ))
        if violations:
            raise ValidationFailure(violations)

    def is_invalid_username_email(self) -> bool:
        try:
            validate_email(self.username, check_deliverability=False)
        except EmailNotValidError:
            return True
        return False

    def check_invalid_password(self, stored_hash: str) -> bool:
        return not check_password_hash(self.password, stored_hash)

    def to_bytes(self) -> bytes:
        return json.dumps(asdict(self)).encode("utf-8")
