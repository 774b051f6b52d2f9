"""
Chat Log Analyzer Package.

Sends a session chat transcript to Google Gemini and returns a structured
JSON analysis report. Messages from the named instructors/hosts are ignored.

Main entry points:
    analyze_chat_log: Analyze a chat log, raising a typed error on failure
    run_chat_log_analysis: Same call, returning an AnalysisOk/AnalysisErr result

Core components:
    - core: Result types, schemas, error mapping and structured logging
    - services: Hosted LLM clients (Gemini)
    - agents: Prompt, response schema and analysis workflow
    - config: Environment-backed settings
"""

# Main workflow (primary public API)
from .agents.analysis import analyze_chat_log, run_chat_log_analysis

# Result types and errors
from .core import AnalysisErr, AnalysisOk, AnalysisResult
from .services.llm import (
    ChatLogAnalysisError,
    ConfigurationError,
    EmptyResponseError,
    ErrorKind,
    MalformedResponseError,
    TransmissionFailure,
    UnknownAnalysisError,
    create_gemini_client,
)

__all__ = [
    # Workflow
    "analyze_chat_log",
    "run_chat_log_analysis",
    # Results
    "AnalysisOk",
    "AnalysisErr",
    "AnalysisResult",
    # Errors
    "ErrorKind",
    "ChatLogAnalysisError",
    "ConfigurationError",
    "EmptyResponseError",
    "MalformedResponseError",
    "TransmissionFailure",
    "UnknownAnalysisError",
    # Clients
    "create_gemini_client",
]

__version__ = "1.0.0"
