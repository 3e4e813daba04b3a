"""Verse service modules."""

from .build_prompt import build_verse_prompt
from .parse_verse import (
    REFERENCE_UNAVAILABLE,
    Verse,
    parse_embedded,
    parse_raw_text,
    parse_strict,
    recover_verse,
)
from .generate_verse import generate_verse

__all__ = [
    "build_verse_prompt",
    "REFERENCE_UNAVAILABLE",
    "Verse",
    "parse_embedded",
    "parse_raw_text",
    "parse_strict",
    "recover_verse",
    "generate_verse",
]
