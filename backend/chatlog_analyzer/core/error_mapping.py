"""Shared error code mapping for analysis failures."""
from typing import Any

from ..services.llm.base import ErrorKind
from .result import AnalysisErr

ANALYSIS_ERROR_CODE_CONFIGURATION = "API_KEY_NOT_CONFIGURED"
ANALYSIS_ERROR_CODE_EMPTY = "LLM_EMPTY_RESPONSE"
ANALYSIS_ERROR_CODE_INVALID_JSON = "LLM_INVALID_JSON"
ANALYSIS_ERROR_CODE_TRANSMISSION = "LLM_TRANSMISSION_FAILED"
ANALYSIS_ERROR_CODE_GENERIC = "ANALYSIS_FAILED"

_ERROR_CODES: dict[ErrorKind, str] = {
    ErrorKind.CONFIGURATION: ANALYSIS_ERROR_CODE_CONFIGURATION,
    ErrorKind.EMPTY_RESPONSE: ANALYSIS_ERROR_CODE_EMPTY,
    ErrorKind.MALFORMED_RESPONSE: ANALYSIS_ERROR_CODE_INVALID_JSON,
    ErrorKind.TRANSMISSION: ANALYSIS_ERROR_CODE_TRANSMISSION,
    ErrorKind.UNKNOWN: ANALYSIS_ERROR_CODE_GENERIC,
}


def classify_analysis_error_code(kind: ErrorKind) -> str:
    """Map an error kind onto its stable error code."""
    return _ERROR_CODES[kind]


def build_analysis_error_payload(error: AnalysisErr) -> dict[str, Any]:
    """Build standardized error payload from a failed analysis result."""
    payload: dict[str, Any] = {
        "code": classify_analysis_error_code(error.kind),
        "message": error.message,
    }
    if error.detail:
        payload["details"] = error.detail
    return payload
