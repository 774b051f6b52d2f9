"""API request and response schemas for the chat log analyzer."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============= Request Schemas =============

class AnalysisRequest(BaseModel):
    """Request schema for the /analyze endpoint.

    No length limits are enforced here; oversized input is left for the
    model service to reject.
    """
    chat_log: str = Field(..., description="Raw chat transcript to analyze")
    instructor_names: str = Field(
        default="",
        description="Instructor/host names whose messages the model should ignore",
    )
    model_config = ConfigDict(extra="forbid")


# ============= Response Schemas =============

class AnalysisReportResponse(BaseModel):
    """Envelope response from /analyze endpoint."""

    success: bool = Field(..., description="Whether the analysis succeeded")
    data: Any = Field(
        default_factory=dict,
        description="Structured analysis report payload",
    )
    error: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Error metadata when success is false",
    )
    model_config = ConfigDict(extra="forbid")


class StatusResponse(BaseModel):
    """Generic status response for health check endpoints."""
    status: str = Field(..., description="Service status")
    system: Optional[str] = Field(None, description="System identifier")
    api_key_configured: bool = Field(
        default=False,
        description="Whether an API key is visible to the server",
    )
