"""Utilitários de IA."""

from ai.utils._json_extractor import extract_json_from_response, parse_json_object

__all__ = [
    "extract_json_from_response",
    "parse_json_object",
]
