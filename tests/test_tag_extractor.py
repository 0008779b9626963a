"""Tests for tag -> field extraction and the auto-generated link filter."""

import pytest

from indexable_content.services.tag_extractor import (
    TagFieldExtractor,
    get_tag_content,
    is_auto_link,
)


def test_heading_maps_to_field_and_other_tags_ignored():
    assert get_tag_content("<h1>Title</h1><p>Body</p>") == {"tagsH1": " Title"}


def test_tags_sharing_a_field_accumulate_in_document_order():
    assert get_tag_content("<h2>X</h2><h3>Y</h3>") == {"tagsH2H3": " X Y"}


def test_uppercase_tags_match_like_lowercase():
    assert get_tag_content("<H1>Title</H1>") == get_tag_content("<h1>Title</h1>")


def test_mixed_case_closing_tag():
    assert get_tag_content("<H1>Title</h1>") == {"tagsH1": " Title"}


def test_human_link_text_kept():
    assert get_tag_content("<a href='x'>Read more</a>") == {"tagsA": " Read more"}


def test_auto_link_text_dropped():
    assert get_tag_content("<a href='x'>http://auto.link</a>") == {}


def test_no_matches_returns_empty_mapping():
    assert get_tag_content("<p>Just a paragraph</p>") == {}
    assert get_tag_content("") == {}
    assert get_tag_content(None) == {}


def test_all_fields():
    html = (
        "<h1>One</h1><h4>Four</h4><h6>Six</h6>"
        "<p><u>u</u> <b>b</b> <strong>s</strong> <i>i</i> <em>e</em></p>"
        "<a href='/x'>Docs</a>"
    )
    assert get_tag_content(html) == {
        "tagsH1": " One",
        "tagsH4H5H6": " Four Six",
        "tagsInline": " u b s i e",
        "tagsA": " Docs",
    }


def test_attributes_in_opening_tag_tolerated():
    html = '<h2 class="title" id="main" data-x=\'1\'>Heading</h2>'
    assert get_tag_content(html) == {"tagsH2H3": " Heading"}


def test_inner_text_spanning_lines():
    html = "<a href='/about'>\n  About\n  us\n</a>"
    assert get_tag_content(html) == {"tagsA": " About us"}


def test_ungreedy_match_stops_at_first_closing_tag():
    html = "<b>first</b> plain <b>second</b>"
    assert get_tag_content(html) == {"tagsInline": " first second"}


def test_nested_mapped_tag_text_is_flattened():
    html = "<a href='/x'><b>Read</b> more</a>"
    assert get_tag_content(html) == {"tagsA": " Read more"}


def test_unmapped_inner_tags_are_stripped():
    html = "<h1><span class='x'>Big</span> <img src='t.png'>News</h1>"
    assert get_tag_content(html) == {"tagsH1": " Big News"}


def test_br_is_not_mistaken_for_b():
    assert get_tag_content("line<br>break<br/>") == {}


def test_script_and_style_contents_never_extracted():
    html = "<script>var s = '<h1>fake</h1>';</script><style>b{}</style><h1>real</h1>"
    assert get_tag_content(html) == {"tagsH1": " real"}


def test_empty_tags_contribute_nothing():
    assert get_tag_content("<b> </b><em></em>") == {}


def test_unclosed_tag_is_ignored():
    assert get_tag_content("<h1>never closed <p>text</p>") == {}


@pytest.mark.parametrize(
    "text",
    [
        "http://example.com",
        "https://example.com/path",
        "HTTPS://EXAMPLE.COM",
        "ftp://files",
        "mailto:someone@example.com",
        "smb://share",
        "afp://share",
        "file://tmp",
        "gopher://hole",
        "news://group",
        "ssl://host",
        "sslv2://host",
        "sslv3://host",
        "tls://host",
        "tcp://host",
        "udp://host",
        "www.example.com",
        "see www.example.com",
    ],
)
def test_is_auto_link_true(text):
    assert is_auto_link(text)


@pytest.mark.parametrize(
    "text",
    ["Read more", "http://", "www.", "http:// spaced", "Contact us", "", "wwwexample"],
)
def test_is_auto_link_false(text):
    assert not is_auto_link(text)


def test_auto_link_filter_only_applies_to_anchors():
    html = "<b>http://example.com</b><a href='x'>www.example.com</a>"
    assert get_tag_content(html) == {"tagsInline": " http://example.com"}


class TestTagFieldExtractorConfiguration:
    def test_custom_mapping(self):
        extractor = TagFieldExtractor(tag_field_mapping={"TITLE": "tagsTitle", "a": "tagsA"})
        assert extractor.tag_field_mapping == {"title": "tagsTitle", "a": "tagsA"}
        result = extractor.get_tag_content("<title>Page</title><h1>Ignored</h1><a>Go</a>")
        assert result == {"tagsTitle": " Page", "tagsA": " Go"}

    def test_extra_auto_link_prefix(self):
        extractor = TagFieldExtractor(auto_link_prefixes=("https://", "ipfs://"))
        assert extractor.get_tag_content("<a href='x'>ipfs://bafy</a>") == {}
        # Prefixes not listed are treated as human text
        assert extractor.get_tag_content("<a href='x'>ftp://files</a>") == {"tagsA": " ftp://files"}

    def test_no_auto_link_prefixes_keeps_every_link(self):
        extractor = TagFieldExtractor(auto_link_prefixes=())
        assert extractor.get_tag_content("<a>http://x.org</a>") == {"tagsA": " http://x.org"}

    def test_partially_clean_keeps_only_mapped_tags(self):
        extractor = TagFieldExtractor()
        result = extractor.partially_clean("<div><h1>T</h1><script>x()</script><span>s</span></div>")
        assert "<h1>" in result and "</h1>" in result
        assert "div" not in result and "span" not in result
        assert "x()" not in result
        assert result.split() == ["<h1>", "T", "</h1>", "s"]
