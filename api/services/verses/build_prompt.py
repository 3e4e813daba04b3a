"""Verse prompt construction."""

from api.config import DEFAULT_VERSE_PROMPT


def build_verse_prompt(feeling: str, template: str = DEFAULT_VERSE_PROMPT) -> str:
    """
    Build the prompt sent to Gemini for a feeling.

    The feeling is inserted verbatim wherever "{feeling}" appears in the
    template. Other braces in the template are left alone, so the JSON example
    in the default prompt needs no escaping.

    Args:
        feeling: The caller's trimmed feeling text
        template: Prompt template containing a "{feeling}" placeholder

    Returns:
        The prompt text
    """
    return template.replace("{feeling}", feeling)
