"""Extract display terms from search syntax queries.

A query such as ``t=faith AND "the ark" -hate in (Gen, Exo)`` is never executed
here. We only recover the words and phrases a person typed so they can be
highlighted in the rendered results.
"""
import re
import logging
from typing import Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)

PLUS_MARKER = "#plus#"

# Matched on a single quoted span. Phrase terms keep their inner whitespace.
QUOTED_PHRASE = re.compile(r'"[^"]*"')


def _substitute(pattern: str, replacement: str, flags: int = 0) -> Callable[[str], str]:
    compiled = re.compile(pattern, flags)
    return lambda text: compiled.sub(replacement, text)


# Order matters: exclusions and ranges must be gone before phrases are collected,
# and "=>" must become a space so neighbouring words are not glued together.
SYNTAX_STRIPPING_STEPS: List[Tuple[str, Callable[[str], str]]] = [
    ("plus marker", lambda text: text.replace(PLUS_MARKER, "")),
    ("inclusion clauses", _substitute(r"in \([^)]+\)", "", re.IGNORECASE)),
    ("relation marker", lambda text: text.replace("=>", " ")),
    ("range restrictions", _substitute(r"[+-]\[[^\]]*]", "")),
    ("excluded words", _substitute(r"-[a-zA-Z]+", "")),
    ("excluded phrases", _substitute(r'-"[^"]+"', "")),
    ("proximity operators", _substitute(r"~[0-9]+", "")),
    ("parentheses", _substitute(r"[()]", "")),
    ("AND connectives", lambda text: text.replace(" AND ", " ")),
    ("plus signs", lambda text: text.replace("+", "")),
]


def term_bearing_portion(query: str) -> str:
    """Drop a ``mode=`` prefix, up to and including the first ``=``."""
    return query[query.find("=") + 1:]


def strip_syntax(text: str) -> str:
    """
    Remove every known syntax marker from the term-bearing text.

    Args:
        text: Query text without its mode prefix

    Returns:
        Text holding only quoted phrases and plain words
    """
    for name, step in SYNTAX_STRIPPING_STEPS:
        stripped = step(text)
        if stripped != text:
            logger.debug(f"Stripped {name}: '{text}' -> '{stripped}'")
        text = stripped
    return text


def extract_terms(query: Optional[str]) -> List[str]:
    """
    Extract highlightable terms from a search syntax query.

    Phrases come first, in order of appearance, followed by single words.
    Only the first quoted phrase is removed before splitting into words, so a
    second phrase is also reported word by word. Blank quoted phrases (``""``)
    are dropped rather than returned as empty terms; highlighting would skip
    them anyway. Malformed syntax never raises; whatever survives the
    stripping is returned.

    Args:
        query: Raw query, optionally prefixed with a search mode (``t=...``)

    Returns:
        List of phrase and word terms (duplicates preserved)
    """
    if not query:
        return []

    text = strip_syntax(term_bearing_portion(query))

    phrases = [match[1:-1] for match in QUOTED_PHRASE.findall(text) if match[1:-1].strip()]
    text = QUOTED_PHRASE.sub("", text, count=1)

    words = []
    for piece in text.split():
        word = piece.strip().strip('"')
        if word:
            words.append(word)

    terms = phrases + words
    logger.debug(f"Extracted {len(terms)} terms from '{query[:50]}': {terms}")
    return terms
