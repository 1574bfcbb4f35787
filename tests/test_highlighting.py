"""Tests for term and tag highlighting on result markup."""
from bs4 import BeautifulSoup

from app.services.highlighting import highlight_terms, highlight_by_tag
from app.utils.result_tree import ResultTree, class_list

MARK = "secondaryBackground"


def marked_texts(tree: ResultTree):
    return [span.get_text() for span in tree.find_by_class(MARK)]


def test_whole_word_match_only():
    """'cat' must not match inside 'concatenate'."""
    tree = ResultTree.from_html("<p>The cat can concatenate.</p>")

    assert highlight_terms(tree, ["cat"]) == 1
    assert tree.to_html() == '<p>The <span class="secondaryBackground">cat</span> can concatenate.</p>'


def test_case_insensitive():
    tree = ResultTree.from_html("<p>Love is patient, love is kind.</p>")

    assert highlight_terms(tree, ["LOVE"]) == 2
    assert marked_texts(tree) == ["Love", "love"]


def test_phrase_matches_contiguously():
    tree = ResultTree.from_html("<p>Noah built the Ark; the big ark floated.</p>")

    assert highlight_terms(tree, ["the ark"]) == 1
    assert marked_texts(tree) == ["the Ark"]


def test_reapplying_same_terms_is_idempotent():
    tree = ResultTree.from_html("<div><p>grace and peace</p><p>Grace upon grace</p></div>")
    highlight_terms(tree, ["grace", "peace"])
    first_pass = tree.to_html()

    assert highlight_terms(tree, ["grace", "peace"]) == 0
    assert tree.to_html() == first_pass


def test_overlapping_terms_keep_earlier_marks():
    """A later word inside an earlier phrase mark is left alone."""
    tree = ResultTree.from_html("<p>the ark of the covenant</p>")

    assert highlight_terms(tree, ["the ark", "ark"]) == 1
    assert marked_texts(tree) == ["the ark"]


def test_disjoint_second_pass_preserves_text():
    tree = ResultTree.from_html("<p>the ark of the covenant</p>")
    original_text = tree.root.get_text()

    highlight_terms(tree, ["ark"])
    highlight_terms(tree, ["covenant"])

    assert tree.root.get_text() == original_text
    assert marked_texts(tree) == ["ark", "covenant"]


def test_nested_markup_and_scripts():
    tree = ResultTree.from_html(
        "<div><p>love <b>grace</b></p><script>var grace = 1;</script></div>"
    )

    assert highlight_terms(tree, ["grace"]) == 1
    assert tree.root.b.span is not None
    assert tree.root.script.string == "var grace = 1;"


def test_regex_characters_are_literal():
    tree = ResultTree.from_html("<p>axb a.b</p>")

    assert highlight_terms(tree, ["a.b"]) == 1
    assert marked_texts(tree) == ["a.b"]


def test_empty_inputs_are_noops():
    html = "<p>love</p>"
    tree = ResultTree.from_html(html)

    assert highlight_terms(None, ["love"]) == 0
    assert highlight_terms(tree, []) == 0
    assert highlight_terms(tree, None) == 0
    assert highlight_terms(tree, ["", "   "]) == 0
    assert tree.to_html() == html


def test_accepts_beautifulsoup_element():
    """Highlighting a sub-element mutates the owning document."""
    soup = BeautifulSoup("<p>love</p><p>love</p>", "html.parser")

    assert highlight_terms(soup.p, ["love"]) == 1
    assert len(soup.find_all("span", class_=MARK)) == 1


def test_custom_marker_class():
    tree = ResultTree.from_html("<p>love</p>")
    highlight_terms(tree, ["love"], css_class="hit")
    assert tree.find_by_class("hit")[0].get_text() == "love"


def test_tag_highlighting():
    tree = ResultTree.from_html(
        '<span strong="G0026 G3588">love</span>'
        '<span strong="G5368">fond</span>'
        '<span>plain</span>'
    )

    assert highlight_by_tag(tree, ["G0026"]) == 1
    spans = tree.root.find_all("span")
    assert MARK in class_list(spans[0])
    assert MARK not in class_list(spans[1])
    assert MARK not in class_list(spans[2])


def test_tag_must_match_exactly():
    """Ids match as whole list entries, like [strong~='id']."""
    tree = ResultTree.from_html('<span strong="G0026">love</span>')
    assert highlight_by_tag(tree, ["G002"]) == 0


def test_tag_highlighting_multiple_ids_and_repeats():
    tree = ResultTree.from_html(
        '<span class="verse" strong="G0026">love</span><span strong="G5368">fond</span>'
    )

    assert highlight_by_tag(tree, ["G0026", "G5368"]) == 2
    assert highlight_by_tag(tree, ["G0026"]) == 0
    assert class_list(tree.root.span) == ["verse", MARK]


def test_empty_tag_ids_leave_tree_untouched():
    html = '<span strong="G0026">love</span>'
    tree = ResultTree.from_html(html)

    assert highlight_by_tag(tree, []) == 0
    assert highlight_by_tag(tree, None) == 0
    assert highlight_by_tag(None, ["G0026"]) == 0
    assert tree.to_html() == html


def test_custom_tag_attribute():
    tree = ResultTree.from_html('<span morph="V-PAI-3S">loves</span>')
    assert highlight_by_tag(tree, ["V-PAI-3S"], attribute="morph") == 1
