import uuid

from fastapi import APIRouter
from chatlog_analyzer.agents.analysis import run_chat_log_analysis
from chatlog_analyzer.config import is_api_key_configured
from chatlog_analyzer.core import (
    AnalysisErr,
    AnalysisReportResponse,
    AnalysisRequest,
    StatusResponse,
)
from chatlog_analyzer.core.error_mapping import build_analysis_error_payload
from chatlog_analyzer.core.logging_utils import clear_log_context, set_request_id

router = APIRouter()


@router.get("/", response_model=StatusResponse)
def read_root():
    return {
        "status": "online",
        "system": "ChatLog Analyzer",
        "api_key_configured": is_api_key_configured(),
    }


@router.post("/analyze", response_model=AnalysisReportResponse)
async def analyze_chat(request: AnalysisRequest):
    set_request_id(uuid.uuid4().hex)
    try:
        result = await run_chat_log_analysis(
            request.chat_log,
            request.instructor_names,
        )
    finally:
        clear_log_context()

    if isinstance(result, AnalysisErr):
        return {
            "success": False,
            "data": {},
            "error": build_analysis_error_payload(result),
        }
    return {"success": True, "data": result.report, "error": None}
