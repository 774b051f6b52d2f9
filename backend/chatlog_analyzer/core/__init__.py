"""Core abstractions and types for the chat log analyzer."""
from .types import AnalysisReportData, JSONSchema
from .result import AnalysisErr, AnalysisOk, AnalysisResult
from .schemas import AnalysisReportResponse, AnalysisRequest, StatusResponse

__all__ = [
    # Types
    "AnalysisReportData",
    "JSONSchema",
    # Results
    "AnalysisOk",
    "AnalysisErr",
    "AnalysisResult",
    # Schemas
    "AnalysisRequest",
    "AnalysisReportResponse",
    "StatusResponse",
]
