"""Render one page of search results with highlights and a window label."""
import re
import logging
from typing import Optional

from app.config import settings
from app.models.schemas import SearchQueryResults, SearchDisplayResponse
from app.services.highlighting import highlight_by_tag, highlight_terms
from app.services.pagination import compute_window
from app.services.term_extraction import extract_terms
from app.utils.result_tree import ResultTree

logger = logging.getLogger(__name__)

CONTENT_HOLDER_CLASS = "passageContentHolder"
UNICODE_FONT_CLASS = "unicodeFont"
HEBREW_FONT_CLASS = "hbFont"

# Anything past Latin-1 needs the unicode font
NON_LATIN = re.compile(r'[^\x00-\xff]')
HEBREW = re.compile(r'[\u0590-\u05ff]')


def apply_font_classes(tree: ResultTree) -> int:
    """
    Flag content holders whose text needs a unicode (or Hebrew) font.

    Returns:
        Number of holders flagged
    """
    flagged = 0
    for holder in tree.find_by_class(CONTENT_HOLDER_CLASS):
        text = holder.get_text()
        if not NON_LATIN.search(text):
            continue
        tree.mark(holder, UNICODE_FONT_CLASS)
        if HEBREW.search(text):
            tree.mark(holder, HEBREW_FONT_CLASS)
        flagged += 1
    return flagged


def render_results(results: SearchQueryResults) -> ResultTree:
    """Build the result list markup around each rendered preview."""
    tree = ResultTree.from_html("")
    container = tree.new_tag("div", css_class="searchResults")
    tree.root.append(container)

    for result in results.results:
        row = tree.new_tag("div", css_class="searchResultRow", attrs={"data-key": result.key})
        holder = tree.new_tag("div", css_class=CONTENT_HOLDER_CLASS)
        tree.append_fragment(holder, result.preview)
        row.append(holder)
        container.append(row)

    return tree


def render_message(message: str, css_class: Optional[str] = None) -> str:
    """Markup for a plain message, optionally wrapped in a classed span."""
    tree = ResultTree.from_html("")
    container = tree.new_tag("div")
    tree.root.append(container)

    if css_class:
        notice = tree.new_tag("span", css_class=css_class)
        notice.string = message
        container.append(notice)
    else:
        container.string = message
    return tree.to_html()


def display_search_results(
    results: SearchQueryResults,
    page_number: int = 1,
    paged: bool = True,
    page_size: Optional[int] = None
) -> SearchDisplayResponse:
    """
    Produce the decorated page for a results payload.

    Steps:
    1. Compute the "showing X to Y of Z" window
    2. Short-circuit on no results or too many results
    3. Highlight by tag ids when the payload has them, otherwise by query terms
    4. Flag content that needs a unicode font

    Args:
        results: Search backend payload
        page_number: 1-based page being shown
        paged: When False the whole result set is one page
        page_size: Override the configured page size

    Returns:
        SearchDisplayResponse with HTML, label and extracted terms
    """
    if page_size is None:
        page_size = settings.PAGE_SIZE if paged else settings.UNPAGED_PAGE_SIZE

    start, end = compute_window(results.total, page_number, page_size)
    label = settings.WINDOW_LABEL.format(start=start, end=end, total=results.total)
    terms = extract_terms(results.query)

    if results.total == 0 or not results.results:
        logger.info(f"No results for '{results.query[:50]}'")
        html = render_message(settings.NO_RESULTS_MESSAGE)
        mode = "none"
        matches = 0
    elif results.max_reached:
        logger.info(f"Too many results for '{results.query[:50]}' ({results.total})")
        html = render_message(settings.TOO_MANY_RESULTS_MESSAGE, css_class="notApplicable")
        mode = "none"
        matches = 0
    else:
        tree = render_results(results)
        if results.strong_highlights:
            matches = highlight_by_tag(tree, results.strong_highlights)
            mode = "tags"
        else:
            matches = highlight_terms(tree, terms)
            mode = "terms"
        apply_font_classes(tree)
        html = tree.to_html()

    return SearchDisplayResponse(
        html=html,
        label=label,
        start=start,
        end=end,
        total=results.total,
        terms=terms,
        mode=mode,
        matches=matches
    )
