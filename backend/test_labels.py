"""Label formatting and colour resolution"""

import pytest

from yuml2dot.compiler.colors import color_table, resolve_color
from yuml2dot.compiler.labels import escape_label, format_label, record_name, wordwrap
from yuml2dot.dsl.expressions import extract_bg_and_note


def test_record_name_stops_at_first_divider():
    assert record_name("Person|name|save()") == "Person"
    assert record_name("  Person  ") == "Person"


def test_escape_label():
    assert escape_label("A;B") == "A\\nB"
    assert escape_label("{x}") == "\\{x\\}"
    assert escape_label("a b") == "a\\ b"
    assert escape_label("<<x>>") == "\\<\\<x\\>\\>"


def test_escape_label_is_not_idempotent():
    once = escape_label("a b")
    assert escape_label(once) == "a\\\\ b"
    assert escape_label(once) != once


def test_wordwrap_breaks_at_last_space_within_width():
    assert wordwrap("short", 20) == "short"
    assert wordwrap("The quick brown fox jumps", 10) == "The quick\\nbrown fox\\njumps"
    assert wordwrap("aaa bbb", 3, "\n") == "aaa\nbbb"


def test_wordwrap_leaves_unbreakable_text():
    assert wordwrap("Supercalifragilistic", 5) == "Supercalifragilistic"


def test_wordwrap_breaks_after_long_leading_word():
    assert (
        wordwrap("Supercalifragilisticexpialidocious method", 20)
        == "Supercalifragilisticexpialidocious\\nmethod"
    )
    assert (
        format_label("Order|Supercalifragilisticexpialidocious method", 20, True)
        == "Order|Supercalifragilisticexpialidocious\\nmethod"
    )


def test_format_label_keeps_fields():
    assert (
        format_label("Customer|Forename;Surname|Save()", 20, True)
        == "Customer|Forename\\nSurname|Save()"
    )


def test_format_label_wraps_each_field():
    assert (
        format_label("Name|a very long attribute name here", 10, True)
        == "Name|a\\ very\\nlong\\nattribute\\nname\\ here"
    )


def test_format_label_without_divisors():
    assert format_label("a b|c", 20, False) == "a\\ b|c"


def test_hex_colors_get_contrasting_font():
    assert resolve_color("#000000").fontcolor == "white"
    white = resolve_color("#FFFFFF")
    assert white.value == "#ffffff"
    assert white.fontcolor == "black"


def test_named_colors_resolve_to_hex():
    orange = resolve_color("orange")
    assert orange.value == "#ffa500"
    assert orange.fontcolor == "black"

    green = resolve_color("Green")
    assert green.value == "#008000"
    assert green.fontcolor == "white"


def test_unknown_color_passes_through_without_font():
    color = resolve_color("red3")
    assert color.value == "red3"
    assert color.fontcolor is None


def test_color_table_is_read_only():
    with pytest.raises(TypeError):
        color_table()["mauve"] = ("#e0b0ff", 190.0)


def test_extract_background():
    expr = extract_bg_and_note("Customer{bg:orange}", True)
    assert expr.label == "Customer"
    assert expr.bg == "#ffa500"
    assert expr.fontcolor == "black"
    assert not expr.is_note


def test_extract_note_with_background():
    expr = extract_bg_and_note("note: hello {bg:green}", True)
    assert expr.is_note
    assert expr.label == "hello"
    assert expr.bg == "#008000"
    assert expr.fontcolor == "white"


def test_note_marker_ignored_when_not_allowed():
    expr = extract_bg_and_note("note: x", False)
    assert not expr.is_note
    assert expr.label == "note: x"
