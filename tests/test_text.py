"""Tests for extraction.blocks and extraction.text: block-aware text."""

from extraction.blocks import (
    BLOCK_TAGS,
    MEDIA_TAGS,
    compile_block_pattern,
    mark_blocks,
    mark_line_breaks,
    strip_tags,
)
from extraction.text import extract_text
from models.options import BlankLinePolicy, TextOptions


def test_catalogue_contents():
    assert len(BLOCK_TAGS) == len(set(BLOCK_TAGS))
    for tag in ("address", "div", "h1", "h6", "li", "p", "pre", "q", "section", "textarea"):
        assert tag in BLOCK_TAGS
    assert "span" not in BLOCK_TAGS
    assert MEDIA_TAGS == ("img", "map", "audio", "canvas")


def test_mark_blocks_matches_whole_tag_names_only():
    markup = "<pre>x</pre><param><p class='a'>y</p><PARAM>"
    assert mark_blocks(markup) == "\n<pre>x</pre><param>\n<p class='a'>y</p><PARAM>"


def test_mark_blocks_ignores_case_and_closing_tags():
    assert mark_blocks("<DIV id=1>x</DIV>") == "\n<DIV id=1>x</DIV>"


def test_mark_blocks_with_custom_catalogue():
    assert mark_blocks("<p>a</p><span>b</span>", ["span"]) == "<p>a</p>\n<span>b</span>"
    assert compile_block_pattern(["td"]).search("<td>") is not None


def test_mark_line_breaks_variants():
    assert mark_line_breaks("a<br>b<BR/>c<br />d<br class='x'>e</br>f") == "a\nb\nc\nd\ne\nf"


def test_mark_line_breaks_leaves_other_b_tags():
    assert mark_line_breaks("<b>x</b><bdi>y</bdi>") == "<b>x</b><bdi>y</bdi>"


def test_strip_tags():
    assert strip_tags('<p class="a">x<b>y</b></p>') == "xy"


def test_sibling_divs_become_two_lines(parse):
    assert extract_text(parse("<div>A</div><div>B</div>")) == "A\nB"


def test_block_attributes_do_not_matter(parse):
    soup = parse('<div class="x" id="y">A</div><div data-k="1" style="c:d">B</div>')
    assert extract_text(soup) == "A\nB"


def test_br_becomes_line_break(parse):
    soup = parse("<p>one<br>two<br/>three<br />four</p>")
    assert extract_text(soup) == "one\ntwo\nthree\nfour"


def test_headings_and_paragraphs(parse):
    soup = parse("<h1>Title</h1><p>Body   text</p><ul><li>a</li><li>b</li></ul>")
    # the opening <ul> and the first <li> each start a line
    assert extract_text(soup) == "Title\nBody text\n\na\nb"


def test_inline_elements_do_not_break(parse):
    soup = parse("<p>Hello <b>bold</b> and <i>italic</i> world</p>")
    assert extract_text(soup) == "Hello bold and italic world"


def test_entities_are_decoded(parse):
    assert extract_text(parse("<p>Fish &amp; chips &lt; 5</p>")) == "Fish & chips < 5"


def test_escaped_markup_survives_as_text(parse):
    assert extract_text(parse("<p>use &lt;b&gt; for bold</p>")) == "use <b> for bold"


def test_media_elements_are_removed(parse):
    soup = parse('<p>Hi<canvas>Fallback</canvas><img src="x.png" alt="pic"></p>')
    assert extract_text(soup) == "Hi"
    assert soup.find("canvas") is None
    assert soup.find("img") is None


def test_blank_lines_preserved_by_default(parse):
    soup = parse("<div>A</div>\n<div>B</div>", parser="html.parser")
    assert extract_text(soup) == "A\n\nB"


def test_blank_lines_can_be_dropped(parse):
    soup = parse("<div>A</div>\n<div>B</div>", parser="html.parser")
    assert extract_text(soup, TextOptions(blank_lines=BlankLinePolicy.DROP)) == "A\nB"


def test_custom_line_break(parse):
    soup = parse("<p>a</p><p>b</p>")
    assert extract_text(soup, TextOptions(line_break="\r\n")) == "a\r\nb"


def test_extract_from_element(parse):
    soup = parse("<p>outside</p><section><p>one</p><p>two</p></section>")
    assert extract_text(soup.find("section")) == "one\ntwo"


def test_strip_tags_removes_whole_comments():
    assert strip_tags("a<!-- x > y -->b<!--\n<p>-->c") == "abc"


def test_kept_comment_with_angle_bracket_does_not_leak(parse):
    soup = parse("<p>a<!-- x > y --></p>")
    assert extract_text(soup) == "a"
