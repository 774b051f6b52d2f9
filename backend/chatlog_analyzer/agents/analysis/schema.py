"""Response schema sent to the model for structured analysis output."""

import json
from typing import Any

from ...config.settings import get_response_schema_path
from ...core.types import JSONSchema

# Default report contract in Gemini's OpenAPI-subset dialect (upper-case type
# names). Deployments with their own report shape point
# CHATLOG_RESPONSE_SCHEMA_PATH at a JSON file; see load_response_schema().
RESPONSE_SCHEMA: JSONSchema = {
    "type": "OBJECT",
    "required": [
        "session_summary",
        "overall_sentiment",
        "participant_count",
        "key_themes",
        "questions",
        "notable_feedback",
        "recommendations",
    ],
    "properties": {
        "session_summary": {
            "type": "STRING",
            "description": "Short narrative summary of the participant conversation.",
        },
        "overall_sentiment": {
            "type": "STRING",
            "enum": ["positive", "neutral", "negative", "mixed"],
        },
        "participant_count": {
            "type": "INTEGER",
            "description": "Distinct participants who wrote at least one message, instructors excluded.",
        },
        "key_themes": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "required": ["theme", "description", "mention_count"],
                "properties": {
                    "theme": {"type": "STRING"},
                    "description": {"type": "STRING"},
                    "mention_count": {"type": "INTEGER"},
                },
            },
        },
        "questions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "required": ["question", "asked_by", "answered"],
                "properties": {
                    "question": {"type": "STRING"},
                    "asked_by": {"type": "STRING"},
                    "answered": {"type": "BOOLEAN"},
                },
            },
        },
        "notable_feedback": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "required": ["participant", "comment", "sentiment"],
                "properties": {
                    "participant": {"type": "STRING"},
                    "comment": {"type": "STRING"},
                    "sentiment": {
                        "type": "STRING",
                        "enum": ["positive", "neutral", "negative"],
                    },
                },
            },
        },
        "recommendations": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        },
    },
}


def load_response_schema() -> JSONSchema:
    """Return the configured response schema, or the built-in default."""
    schema_path = get_response_schema_path()
    if schema_path is None:
        return RESPONSE_SCHEMA

    with open(schema_path, "r", encoding="utf-8") as f:
        loaded: Any = json.load(f)
    if not isinstance(loaded, dict):
        raise ValueError(f"Response schema at {schema_path} is not a JSON object")
    return loaded
