"""
intake/__init__.py — AnalysisIntake orchestrator.

Detects the client's payload version, decodes (adapting v1 bodies), and
validates the result. Holds no per-request state, so one instance serves
concurrent requests.
"""
import logging
from typing import Iterable, Optional

from intake.decoder import Body, decode
from intake.errors import IntakeError
from intake.validator import validate
from intake.versions import LEGACY_VERSIONS, is_legacy
from models.analysis import AnalysisData

logger = logging.getLogger(__name__)


class AnalysisIntake:
    """Entry point for analysis submissions sent by the CLI."""

    def __init__(self, legacy_versions: Iterable[str] = LEGACY_VERSIONS):
        self.legacy_versions = tuple(legacy_versions)

    def decode_and_validate(self, body: Body, declared_version: Optional[str]) -> AnalysisData:
        """
        Decode `body` and validate it.

        Raises EmptyBody, MalformedPayload or ValidationFailure; on success
        the returned AnalysisData is always in the current shape.
        """
        legacy = is_legacy(declared_version, self.legacy_versions)
        logger.debug("Client version %r → %s payload", declared_version,
                     "v1" if legacy else "current")
        try:
            return validate(decode(body, legacy))
        except IntakeError as exc:
            logger.warning("Rejected analysis payload [%s]: %s", exc.code, exc)
            raise


_default = AnalysisIntake()


def decode_and_validate(body: Body, declared_version: Optional[str]) -> AnalysisData:
    return _default.decode_and_validate(body, declared_version)
