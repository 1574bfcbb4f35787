"""Mutable view over a rendered page of search results."""
import logging
from typing import List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import CData, Comment, Declaration, Doctype, ProcessingInstruction

from app.config import settings

logger = logging.getLogger(__name__)

# Text under these elements is never decorated
SKIPPED_ELEMENTS = {"script", "style", "textarea", "template"}
NON_TEXT_STRINGS = (Comment, CData, Declaration, Doctype, ProcessingInstruction)


def class_list(element: Tag) -> List[str]:
    """Return the CSS classes of an element as a list."""
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


class ResultTree:
    """
    Addressable nodes of an HTML result document.

    The tree is owned by the caller. This class only finds text runs and tagged
    elements, wraps text ranges and adds marker classes, all in place.
    """

    def __init__(self, root: Tag):
        """
        Args:
            root: BeautifulSoup document or any element inside one
        """
        self.root = root

        document = root
        while document.parent is not None:
            document = document.parent
        # Detached elements still need a factory for new tags
        if isinstance(document, BeautifulSoup):
            self._factory = document
        else:
            self._factory = BeautifulSoup("", settings.HTML_PARSER)

    @classmethod
    def from_html(cls, html: str, parser: Optional[str] = None) -> "ResultTree":
        """Parse an HTML fragment into a new tree."""
        return cls(BeautifulSoup(html or "", parser or settings.HTML_PARSER))

    def to_html(self) -> str:
        return str(self.root)

    def text_runs(self, skip_class: Optional[str] = None) -> List[NavigableString]:
        """
        Collect the visible text runs under the root.

        Args:
            skip_class: Ignore text inside any element carrying this class

        Returns:
            Snapshot list of text nodes, safe to mutate while iterating
        """
        runs = []
        for run in self.root.find_all(string=True):
            if isinstance(run, NON_TEXT_STRINGS) or not run:
                continue
            if self._is_excluded(run, skip_class):
                continue
            runs.append(run)
        return runs

    def _is_excluded(self, run: NavigableString, skip_class: Optional[str]) -> bool:
        for ancestor in run.parents:
            if ancestor.name in SKIPPED_ELEMENTS:
                return True
            if skip_class and skip_class in class_list(ancestor):
                return True
            if ancestor is self.root:
                break
        return False

    def wrap_ranges(self, run: NavigableString, ranges: Sequence[Tuple[int, int]], css_class: str) -> None:
        """
        Wrap character ranges of a text run in ``<span class=css_class>``.

        Ranges must be sorted and non-overlapping, as produced by ``finditer``.
        Text outside the ranges is kept as plain strings in the same place.
        """
        text = str(run)
        pieces: List[Union[NavigableString, Tag]] = []
        cursor = 0

        for start, end in ranges:
            if start > cursor:
                pieces.append(NavigableString(text[cursor:start]))
            span = self.new_tag("span", css_class=css_class)
            span.string = text[start:end]
            pieces.append(span)
            cursor = end

        if cursor < len(text):
            pieces.append(NavigableString(text[cursor:]))

        run.replace_with(*pieces)

    def new_tag(self, name: str, css_class: Optional[str] = None, attrs: Optional[dict] = None) -> Tag:
        """Create a detached element owned by this tree's document."""
        tag = self._factory.new_tag(name, attrs=dict(attrs or {}))
        if css_class:
            tag["class"] = [css_class]
        return tag

    def append_fragment(self, parent: Tag, html: str, parser: Optional[str] = None) -> None:
        """Parse an HTML fragment and move its top-level nodes under ``parent``."""
        fragment = BeautifulSoup(html or "", parser or settings.HTML_PARSER)
        for node in list(fragment.contents):
            parent.append(node.extract())

    def find_tagged(self, tag_id: str, attribute: Optional[str] = None) -> List[Tag]:
        """
        Find elements whose tag attribute lists ``tag_id``.

        Matches like the CSS ``[attribute~='tag_id']`` selector: the attribute is
        a whitespace-separated list and one entry must equal the id exactly.
        """
        attribute = attribute or settings.TAG_ATTRIBUTE
        found = []
        for element in self.root.find_all(attrs={attribute: True}):
            values = element.get(attribute)
            if isinstance(values, str):
                values = values.split()
            if tag_id in values:
                found.append(element)
        return found

    def find_by_class(self, css_class: str) -> List[Tag]:
        return self.root.find_all(class_=css_class)

    @staticmethod
    def mark(element: Tag, css_class: str) -> bool:
        """Add a class to an element. Returns False if it was already there."""
        classes = class_list(element)
        if css_class in classes:
            return False
        element["class"] = classes + [css_class]
        return True
