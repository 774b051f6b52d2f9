"""Chat log analysis workflow functions."""

import json
import time
from typing import Callable

from ...config.settings import RESPONSE_MIME_TYPE, THINKING_BUDGET, resolve_api_key
from ...core.logging_utils import log_event, log_latency_event, text_fingerprint
from ...core.result import AnalysisErr, AnalysisOk, AnalysisResult
from ...core.types import AnalysisReportData
from ...services.llm import (
    BaseLLMClient,
    ChatLogAnalysisError,
    ConfigurationError,
    EmptyResponseError,
    GenerationOptions,
    MalformedResponseError,
    TransmissionFailure,
    UnknownAnalysisError,
    create_gemini_client,
)
from .prompts import ANALYSIS_PROMPT_TEMPLATE, SYSTEM_INSTRUCTION
from .schema import load_response_schema

ClientFactory = Callable[[str], BaseLLMClient]

MISSING_API_KEY_MESSAGE = (
    "API key is not configured. Set API_KEY in the environment and redeploy."
)
EMPTY_RESPONSE_MESSAGE = (
    "The AI returned an empty response. The input might be too complex "
    "or contain restricted content."
)
MALFORMED_RESPONSE_MESSAGE = (
    "The AI returned incomplete or malformed data. This can happen with very "
    "complex requests or a service interruption. Please try again."
)
UNKNOWN_RESPONSE_MESSAGE = (
    "An unknown error occurred while processing the AI response."
)


def build_analysis_prompt(chat_log: str, instructor_names: str) -> str:
    """Interpolate the transcript and instructor names into the user prompt."""
    return ANALYSIS_PROMPT_TEMPLATE.format(
        chat_log=chat_log,
        instructor_names=instructor_names,
    )


def build_generation_options() -> GenerationOptions:
    try:
        response_schema = load_response_schema()
    except (OSError, ValueError) as err:
        raise ConfigurationError(
            f"Response schema could not be loaded: {err}"
        ) from err
    return GenerationOptions(
        system_instruction=SYSTEM_INSTRUCTION,
        response_mime_type=RESPONSE_MIME_TYPE,
        response_schema=response_schema,
        thinking_budget=THINKING_BUDGET,
    )


def parse_report_payload(payload: object) -> AnalysisReportData:
    """
    Turn raw model output into the report value.

    :param payload: Text returned by the client (None when nothing was generated)
    :return: Parsed JSON value, not checked against the schema
    """
    if payload is None:
        payload = ""
    if not isinstance(payload, str):
        raise UnknownAnalysisError(UNKNOWN_RESPONSE_MESSAGE)

    json_text = payload.strip()
    if not json_text:
        raise EmptyResponseError(EMPTY_RESPONSE_MESSAGE)

    try:
        return json.loads(json_text)
    except (ValueError, RecursionError) as err:
        # JSONDecodeError, oversized integer literals and runaway nesting.
        raise MalformedResponseError(MALFORMED_RESPONSE_MESSAGE) from err


async def _request_report(
    chat_log: str,
    instructor_names: str,
    client_factory: ClientFactory,
) -> AnalysisReportData:
    api_key = resolve_api_key()
    if api_key is None:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    options = build_generation_options()
    prompt = build_analysis_prompt(chat_log, instructor_names)

    try:
        client = client_factory(api_key)
        payload = await client.generate(prompt, options=options)
    except ChatLogAnalysisError:
        raise
    except Exception as err:
        raise TransmissionFailure(str(err) or repr(err)) from err

    return parse_report_payload(payload)


async def run_chat_log_analysis(
    chat_log: str,
    instructor_names: str,
    *,
    client_factory: ClientFactory | None = None,
) -> AnalysisResult:
    """
    Analyze one chat log and return an explicit result.

    Classified failures come back as AnalysisErr; nothing is retried.

    :param chat_log: Raw chat transcript
    :param instructor_names: Names whose messages the model should ignore
    :param client_factory: Builds the per-call client from the API key
    :return: AnalysisOk with the report, or AnalysisErr with the error kind
    """
    factory = client_factory or create_gemini_client
    log_event(
        component="analysis_workflow",
        event="analysis_started",
        details={
            "chat_log": text_fingerprint(chat_log),
            "instructor_names_chars": len(instructor_names),
        },
    )
    started_at = time.perf_counter()

    try:
        report = await _request_report(chat_log, instructor_names, factory)
    except ChatLogAnalysisError as err:
        result = AnalysisErr.from_exception(err)
        log_event(
            component="analysis_workflow",
            event="analysis_failed",
            level="ERROR",
            details={
                "kind": result.kind.value,
                "error": result.message,
                "cause": result.detail,
            },
        )
        log_latency_event(
            component="analysis_workflow",
            event="analysis_latency",
            stage="analysis",
            duration_s=time.perf_counter() - started_at,
            status=result.kind.value,
            level="ERROR",
        )
        return result

    log_latency_event(
        component="analysis_workflow",
        event="analysis_latency",
        stage="analysis",
        duration_s=time.perf_counter() - started_at,
        status="completed",
    )
    return AnalysisOk(report=report)


async def analyze_chat_log(
    chat_log: str,
    instructor_names: str,
    *,
    client_factory: ClientFactory | None = None,
) -> AnalysisReportData:
    """Analyze one chat log, raising a ChatLogAnalysisError subclass on failure."""
    result = await run_chat_log_analysis(
        chat_log,
        instructor_names,
        client_factory=client_factory,
    )
    return result.unwrap()
