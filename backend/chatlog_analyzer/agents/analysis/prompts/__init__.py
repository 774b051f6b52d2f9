"""Prompts for the chat log analysis agent."""
from .analysis import ANALYSIS_PROMPT_TEMPLATE
from .system import SYSTEM_INSTRUCTION

__all__ = [
    "ANALYSIS_PROMPT_TEMPLATE",
    "SYSTEM_INSTRUCTION",
]
