"""Agents built on top of the LLM services."""
