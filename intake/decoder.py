"""
intake/decoder.py — Raw request body → AnalysisData.

Structural problems (bad JSON, wrong types, unparseable timestamps) surface
here as MalformedPayload. Domain checks are left to the validator.
"""
import logging
from typing import IO, Any, Dict, List, Union

from pydantic import ValidationError

from intake.errors import EmptyBody, MalformedPayload
from intake.legacy import parse_v1_to_v2
from models.analysis import AnalysisData
from models.analysis_v1 import AnalysisDataV1

logger = logging.getLogger(__name__)

Body = Union[bytes, bytearray, str, IO[bytes], None]


def decode(body: Body, legacy: bool) -> AnalysisData:
    """
    Parse `body` as the v1 shape when `legacy`, else as the current shape.

    v1 payloads are adapted before returning, so callers always receive an
    AnalysisData.
    """
    raw = _read(body)
    if legacy:
        data_v1 = _parse(AnalysisDataV1, raw)
        logger.info("Decoded v1 analysis payload; adapting to current shape")
        return parse_v1_to_v2(data_v1)
    return _parse(AnalysisData, raw)


def _read(body: Body) -> Union[bytes, str]:
    if body is None:
        raise EmptyBody()
    if hasattr(body, "read"):
        body = body.read()
    if isinstance(body, bytearray):
        body = bytes(body)
    if not isinstance(body, (bytes, str)):
        raise MalformedPayload(f"unsupported body type: {type(body).__name__}")
    if not body.strip():
        raise EmptyBody()
    return body


def _parse(model, raw: Union[bytes, str]):
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise MalformedPayload(
            f"body does not match {model.__name__}", _error_details(exc)
        ) from exc


def _error_details(exc: ValidationError) -> List[Dict[str, Any]]:
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "type": err["type"],
            "message": err["msg"],
        }
        for err in exc.errors(include_url=False, include_input=False)
    ]
