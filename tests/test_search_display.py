"""Tests for rendering a decorated page of search results."""
from app.config import settings
from app.models.schemas import SearchQueryResults, SearchResult
from app.services.search_display import apply_font_classes, display_search_results, render_message
from app.utils.result_tree import ResultTree, class_list


def test_no_results():
    response = display_search_results(SearchQueryResults(query="t=love", total=0))

    assert settings.NO_RESULTS_MESSAGE in response.html
    assert response.mode == "none"
    assert (response.start, response.end) == (0, 0)
    assert response.terms == ["love"]


def test_too_many_results():
    results = SearchQueryResults(
        query="t=the",
        total=5000,
        results=[SearchResult(key="Gen.1.1", preview="<p>In the beginning</p>")],
        max_reached=True
    )
    response = display_search_results(results)

    assert "notApplicable" in response.html
    assert response.mode == "none"
    assert response.label == "Showing 1 to 50 of 5000 results"


def test_term_highlighting_mode():
    results = SearchQueryResults(
        query="t=love",
        total=1,
        results=[SearchResult(key="1Jn.4.8", preview="<p>God is love, and he loved us</p>")]
    )
    response = display_search_results(results)

    assert response.mode == "terms"
    assert response.matches == 1
    assert '<span class="secondaryBackground">love</span>' in response.html
    assert 'data-key="1Jn.4.8"' in response.html
    assert response.label == "Showing 1 to 1 of 1 results"


def test_tag_highlighting_mode():
    results = SearchQueryResults(
        query="strong=G0026",
        total=1,
        results=[SearchResult(key="Joh.3.16", preview='<span strong="G0026">loved</span> the world')],
        strong_highlights=["G0026"]
    )
    response = display_search_results(results)

    assert response.mode == "tags"
    assert response.matches == 1
    tree = ResultTree.from_html(response.html)
    assert settings.HIGHLIGHT_CLASS in class_list(tree.find_tagged("G0026")[0])


def test_unpaged_shows_everything():
    results = SearchQueryResults(
        query="t=love",
        total=120,
        results=[SearchResult(key="1Jn.4.8", preview="<p>God is love</p>")]
    )
    response = display_search_results(results, page_number=1, paged=False)

    assert (response.start, response.end) == (1, 120)


def test_second_page_window():
    results = SearchQueryResults(
        query="t=love",
        total=120,
        results=[SearchResult(key="1Jn.4.8", preview="<p>God is love</p>")]
    )
    response = display_search_results(results, page_number=2)

    assert (response.start, response.end) == (51, 100)


def test_font_classes():
    tree = ResultTree.from_html(
        '<div class="passageContentHolder">plain text</div>'
        '<div class="passageContentHolder">ἀγάπη</div>'
        '<div class="passageContentHolder">אהבה</div>'
    )

    assert apply_font_classes(tree) == 2
    holders = tree.find_by_class("passageContentHolder")
    assert class_list(holders[0]) == ["passageContentHolder"]
    assert class_list(holders[1]) == ["passageContentHolder", "unicodeFont"]
    assert class_list(holders[2]) == ["passageContentHolder", "unicodeFont", "hbFont"]


def test_result_rows_keep_preview_markup_and_quote_keys():
    """Keys are attribute-safe and previews are nested unchanged in their holder."""
    results = SearchQueryResults(
        query="t=grace",
        total=1,
        results=[SearchResult(key='Gen "1" <2>', preview="<p>Noah found <b>grace</b></p> tail")]
    )
    response = display_search_results(results)

    tree = ResultTree.from_html(response.html)
    row = tree.find_by_class("searchResultRow")[0]
    assert row["data-key"] == 'Gen "1" <2>'
    holder = row.find(class_="passageContentHolder")
    assert holder.p.b.span.get_text() == "grace"
    assert holder.get_text() == "Noah found grace tail"


def test_messages_are_text_not_markup():
    assert render_message("a < b & c") == "<div>a &lt; b &amp; c</div>"
    assert render_message("Too many", css_class="notApplicable") == (
        '<div><span class="notApplicable">Too many</span></div>'
    )
