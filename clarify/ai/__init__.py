"""Clarify AI - suggestions for criteria and pros/cons from a text-generation backend."""

from clarify.ai.generator import SuggestionGenerator
from clarify.ai.http import CircuitOpenError, CompletionAPIError, CompletionClient
from clarify.ai.parser import SuggestionParseError, extract_json_block, parse_suggestion

__all__ = [
    "CircuitOpenError",
    "CompletionAPIError",
    "CompletionClient",
    "SuggestionGenerator",
    "SuggestionParseError",
    "extract_json_block",
    "parse_suggestion",
]
