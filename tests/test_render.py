from filesearch.ranking.highlight import highlight
from filesearch.ranking.models import Span, SpanKind
from filesearch.render import to_html, to_markdown, to_rich_text


def test_markdown_wraps_matches_in_double_asterisks():
    assert to_markdown(highlight("MyFile.txt", "file", case_sensitive=False)) == "My**File**.txt"


def test_markdown_without_matches_is_plain_name():
    assert to_markdown(highlight("notes.md", "zzz", case_sensitive=False)) == "notes.md"


def test_html_escapes_text_and_marks_matches():
    spans = [Span(SpanKind.LITERAL, "a<"), Span(SpanKind.MATCHED, "b&")]
    assert to_html(spans) == "a&lt;<strong>b&amp;</strong>"


def test_rich_text_styles_only_matched_spans():
    text = to_rich_text(highlight("aXa.py", "x", case_sensitive=False), style="bold")
    assert text.plain == "aXa.py"
    assert len(text.spans) == 1
    assert (text.spans[0].start, text.spans[0].end) == (1, 2)
    assert str(text.spans[0].style) == "bold"


def test_rich_text_default_style():
    text = to_rich_text(highlight("aXa.py", "x", case_sensitive=False))
    assert str(text.spans[0].style) == "bold yellow"
