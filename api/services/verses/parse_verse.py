"""
Shape recovery for model output.

Gemini is asked for strict JSON but does not always comply. The raw text goes
through an ordered chain of parsers, each returning a Verse or None; the first
hit wins.
"""
import json
import logging
import re
from typing import Any, Callable, Optional, Tuple
from pydantic import BaseModel

logger = logging.getLogger(__name__)

REFERENCE_UNAVAILABLE = "Reference unavailable"

# Greedy: first "{" through last "}"
_EMBEDDED_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class Verse(BaseModel):
    text: str
    reference: str


def _load_object(candidate: str) -> Optional[dict]:
    try:
        data = json.loads(candidate)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _non_empty(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def parse_strict(raw: str) -> Optional[Verse]:
    """The whole raw string is a JSON object with both text and reference."""
    data = _load_object(raw)
    if data is None:
        return None

    text = _non_empty(data.get("text"))
    reference = _non_empty(data.get("reference"))
    if text is None or reference is None:
        return None
    return Verse(text=text, reference=reference)


def parse_embedded(raw: str) -> Optional[Verse]:
    """A JSON object with a text field sits somewhere inside surrounding prose."""
    match = _EMBEDDED_OBJECT.search(raw)
    if match is None:
        return None

    data = _load_object(match.group(0))
    if data is None:
        return None

    text = _non_empty(data.get("text"))
    if text is None:
        return None
    reference = _non_empty(data.get("reference")) or REFERENCE_UNAVAILABLE
    return Verse(text=text, reference=reference)


def parse_raw_text(raw: str) -> Optional[Verse]:
    """Use whatever the model wrote as the verse text."""
    text = raw.strip()
    if not text:
        return None
    return Verse(text=text, reference=REFERENCE_UNAVAILABLE)


RECOVERY_CHAIN: Tuple[Tuple[str, Callable[[str], Optional[Verse]]], ...] = (
    ("strict", parse_strict),
    ("embedded", parse_embedded),
    ("raw_text", parse_raw_text),
)


def recover_verse(raw: str) -> Optional[Verse]:
    """
    Run the recovery chain over raw model output.

    Args:
        raw: Concatenated text returned by the model

    Returns:
        The first Verse any stage produces, or None when the output is empty
    """
    for stage, parse in RECOVERY_CHAIN:
        verse = parse(raw)
        if verse is None:
            continue
        if stage == "raw_text":
            logger.warning(f"⚠️ Model output was not JSON, returning raw text ({len(raw)} chars)")
        else:
            logger.info(f"✅ Parsed verse via {stage} stage: {verse.reference}")
        return verse
    return None
