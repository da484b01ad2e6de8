"""Tokenizer and identity registry"""

from yuml2dot.dsl.tokenizer import split_yuml_expr
from yuml2dot.ir.identity import UidRegistry


def test_splits_bracketed_records_and_connectors():
    assert split_yuml_expr("[Customer]->[Order]", "[") == ["[Customer]", "->", "[Order]"]


def test_connector_text_is_trimmed():
    assert split_yuml_expr("[A]  -  [B]", "[") == ["[A]", "-", "[B]"]


def test_escaped_bracket_is_literal():
    assert split_yuml_expr(r"[A\]B]-[C]", "[") == [r"[A\]B]", "-", "[C]"]


def test_unterminated_bracket_runs_to_end_of_line():
    assert split_yuml_expr("[A]-[B", "[") == ["[A]", "-", "[B"]


def test_activity_brackets():
    assert split_yuml_expr("(start)-><d1>", "(<|") == ["(start)", "->", "<d1>"]
    assert split_yuml_expr("(a)->|bar|", "(<|") == ["(a)", "->", "|bar|"]


def test_other_brackets_are_plain_text_inside_a_region():
    assert split_yuml_expr("(Paused|do/wait)->(end)", "(<|") == [
        "(Paused|do/wait)",
        "->",
        "(end)",
    ]


def test_output_is_deterministic():
    line = "[A]<>1-*[B]"
    assert split_yuml_expr(line, "[") == split_yuml_expr(line, "[")


def test_uids_are_sequential_and_deduplicated():
    uids = UidRegistry()

    assert uids.create_uid("Customer") == "A0"
    assert uids.create_uid("Order") == "A1"
    assert uids.create_uid("Customer") is None
    assert uids.create_uid("Address") == "A2"


def test_uid_key_is_record_name():
    uids = UidRegistry()

    assert uids.create_uid("Person|name|save()") == "A0"
    assert uids.create_uid("Person") is None
    assert uids.get_uid(" Person |other") == "A0"


def test_get_uid_never_creates():
    uids = UidRegistry()

    assert uids.get_uid("Ghost") is None
    assert len(uids) == 0
    assert uids.create_uid("Ghost") == "A0"
