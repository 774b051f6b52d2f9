"""Common type definitions for the chat log analyzer."""
from typing import Any, Dict

# Parsed model output; shape is governed by RESPONSE_SCHEMA, not re-validated.
AnalysisReportData = Any
JSONSchema = Dict[str, Any]
