"""Tooltip text formatting for sentence labels."""

import re

import config

_WHITESPACE_RE = re.compile(r"\s\s+")
_WORD_RE = re.compile(r"[\w']+")


def clean_label(text: str) -> str:
    """Collapse repeated whitespace and trim."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def segment_label(text: str, window: int = config.TOOLTIP_WINDOW_WORDS) -> list[str]:
    """
    Split a sentence into overlapping word windows for a multi-line tooltip.

    One window starts at every word and holds up to ``window`` words, so a
    sentence of n words yields n lines, the last ones shorter.
    Punctuation is dropped.

    Args:
        text: Sentence label
        window: Maximum words per line

    Returns:
        List of tooltip lines
    """
    if window < 1:
        raise ValueError(f"window must be positive, got {window}")

    words = _WORD_RE.findall(clean_label(text))
    return [" ".join(words[i:i + window]) for i in range(len(words))]


def format_tooltip(text: str, window: int = config.TOOLTIP_WINDOW_WORDS) -> str:
    """Join the tooltip lines with Plotly line breaks."""
    return "<br>".join(segment_label(text, window))
