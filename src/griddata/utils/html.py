# src/griddata/utils/html.py
import re

# Non-greedy match of a single tag, e.g. "<p>", "</b>" or "<img src='x'>"
TAG_PATTERN = re.compile(r"<.*?>", re.DOTALL)

# Only paragraph tags are ignored when deciding whether HTML holds content
PARAGRAPH_PATTERN = re.compile(r"<(p|/p)>", re.IGNORECASE)

WHITESPACE_PATTERN = re.compile(r"\s+")


def replace_tags(html: str) -> str:
    """Replaces every tag in `html` by a single space."""
    if not html:
        return ""
    return TAG_PATTERN.sub(" ", html)


def strip_paragraphs(html: str) -> str:
    """Removes <p> and </p> tags, leaving any other markup in place."""
    if not html:
        return ""
    return PARAGRAPH_PATTERN.sub("", html)


def normalize_whitespace(text: str) -> str:
    """Collapses runs of whitespace into single spaces and trims the result."""
    return WHITESPACE_PATTERN.sub(" ", text or "").strip()
