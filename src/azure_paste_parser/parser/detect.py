"""Decide whether pasted text is worth running through the parser."""

PARSE_MARKERS = ("/openai/deployments/", "api-version=")


def should_parse(text: str) -> bool:
    """Return True when the input looks like more than a plain hostname.

    A bare endpoint typed by hand is left alone; a deployments path, an
    api-version marker or a multi-token paste triggers parsing.
    """
    lower = text.lower()
    if any(marker in lower for marker in PARSE_MARKERS):
        return True
    return " " in text or "\n" in text or "\r" in text
