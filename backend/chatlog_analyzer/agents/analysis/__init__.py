"""Chat log analysis agent module."""
from .schema import RESPONSE_SCHEMA, load_response_schema
from .workflows import (
    analyze_chat_log,
    build_analysis_prompt,
    parse_report_payload,
    run_chat_log_analysis,
)

__all__ = [
    "analyze_chat_log",
    "run_chat_log_analysis",
    "build_analysis_prompt",
    "parse_report_payload",
    "RESPONSE_SCHEMA",
    "load_response_schema",
]
