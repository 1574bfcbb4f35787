"""Mark search matches inside rendered result markup."""
import re
import logging
from typing import Optional, Sequence, Union

from bs4 import Tag

from app.config import settings
from app.utils.result_tree import ResultTree

logger = logging.getLogger(__name__)

TreeLike = Union[ResultTree, Tag]


def _as_tree(root: Optional[TreeLike]) -> Optional[ResultTree]:
    if root is None or isinstance(root, ResultTree):
        return root
    return ResultTree(root)


def term_pattern(term: str) -> "re.Pattern[str]":
    """Whole-word, case-insensitive pattern for a word or phrase."""
    return re.compile(r'\b' + re.escape(term) + r'\b', re.IGNORECASE)


def highlight_terms(
    root: Optional[TreeLike],
    terms: Optional[Sequence[str]],
    css_class: Optional[str] = None
) -> int:
    """
    Wrap every whole-word occurrence of each term in a highlight span.

    Terms are applied one pass at a time. Text already inside a highlighted
    element is left alone, so earlier marks are never split and reapplying
    the same terms changes nothing.

    Args:
        root: Result tree (or element) to decorate in place
        terms: Words and phrases, e.g. from ``extract_terms``
        css_class: Marker class (default from config)

    Returns:
        Number of text ranges wrapped
    """
    tree = _as_tree(root)
    if tree is None or not terms:
        return 0

    if css_class is None:
        css_class = settings.HIGHLIGHT_CLASS

    wrapped = 0
    for term in terms:
        if not term or not term.strip():
            continue

        pattern = term_pattern(term)
        term_matches = 0

        for run in tree.text_runs(skip_class=css_class):
            ranges = [match.span() for match in pattern.finditer(str(run)) if match.end() > match.start()]
            if ranges:
                tree.wrap_ranges(run, ranges, css_class)
                term_matches += len(ranges)

        logger.debug(f"Term '{term}' highlighted {term_matches} times")
        wrapped += term_matches

    return wrapped


def highlight_by_tag(
    root: Optional[TreeLike],
    tag_ids: Optional[Sequence[str]],
    css_class: Optional[str] = None,
    attribute: Optional[str] = None
) -> int:
    """
    Add the highlight class to every element tagged with one of ``tag_ids``.

    Args:
        root: Result tree (or element) to decorate in place
        tag_ids: Opaque identifiers such as Strong's numbers
        css_class: Marker class (default from config)
        attribute: Element attribute holding the ids (default from config)

    Returns:
        Number of elements newly marked
    """
    tree = _as_tree(root)
    if tree is None or not tag_ids:
        return 0

    if css_class is None:
        css_class = settings.HIGHLIGHT_CLASS

    marked = 0
    for tag_id in tag_ids:
        if not tag_id or not tag_id.strip():
            continue
        for element in tree.find_tagged(tag_id.strip(), attribute):
            if tree.mark(element, css_class):
                marked += 1

    logger.debug(f"Marked {marked} elements for {len(tag_ids)} tag ids")
    return marked
