"""Text processing utilities."""

import re

CITATION_RE = re.compile(r"\[\d+\]")
BLANK_RUN_RE = re.compile(r"\n\s*\n")


def strip_citations(text: str) -> str:
    """Remove bracketed numeric citation markers such as ``[12]``.

    Args:
        text: Text possibly containing citation markers

    Returns:
        Text without citation markers
    """
    # Removing "[2]" from "[1[2]]" leaves "[1]" behind
    count = 1
    while count:
        text, count = CITATION_RE.subn("", text)
    return text


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of blank or whitespace-only lines into one blank line.

    Args:
        text: Text with arbitrary line breaks

    Returns:
        Text where paragraphs are separated by exactly one empty line
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return BLANK_RUN_RE.sub("\n\n", text)


def normalize_article_text(title: str, raw_text: str) -> str:
    """Clean a raw article extract for display.

    Strips citation markers, collapses blank line runs, trims the text and
    drops the first line while the text begins with the title. Applying
    it to its own output returns the output unchanged.

    Args:
        title: Article title
        raw_text: Plain-text extract as returned by the API

    Returns:
        Cleaned article text
    """
    text = collapse_blank_lines(strip_citations(raw_text or "")).strip()

    title = title.strip()
    if not title:
        return text

    # Output never begins with the title while further lines follow
    while text.startswith(title) and "\n" in text:
        text = text.split("\n", 1)[1].strip()

    return text
