"""User prompt template for chat log analysis."""

ANALYSIS_PROMPT_TEMPLATE = """
Here is the chat log. Please analyze it.
The instructor(s)/host(s) for this session are: {instructor_names}. Please ignore their messages as per the instructions.

--- CHAT LOG START ---
{chat_log}
--- CHAT LOG END ---
"""
