import io

import pytest

from dotgraph.attributes import HTML, Attributes, Literal, String, quote
from dotgraph.constants import Key


def test_string_value_escapes_quotes_and_control_characters():
    assert String('a"b').format() == '"a\\"b"'
    assert String("back\\slash").format() == '"back\\\\slash"'
    assert String("line\nbreak\ttab").format() == '"line\\nbreak\\ttab"'


def test_quote_uses_hex_and_unicode_escapes_for_non_printables():
    assert quote("\x00") == '"\\x00"'
    assert quote("\x7f") == '"\\x7f"'
    assert quote("\u200b") == '"\\u200b"'
    assert quote("\U000e0001") == '"\\U000e0001"'
    assert quote("ünïcode ✓") == '"ünïcode ✓"'


def test_literal_value_is_written_verbatim():
    assert Literal('"left-justified text\\l"').format() == '"left-justified text\\l"'


def test_html_value_is_wrapped_in_angle_brackets():
    assert HTML("<B>Hi</B>").format() == "<<B>Hi</B>>"


def test_bracketed_output_is_sorted_by_key():
    attributes = Attributes()
    attributes.set_string("style", "bold")
    attributes.set_literal("color", "red")
    attributes.set_html(Key.LABEL, "<B>Hi</B>")

    assert attributes.format() == '[color=red,label=<<B>Hi</B>>,style="bold"]'


def test_unbracketed_output_terminates_each_pair():
    attributes = Attributes({"rank": Literal("same"), "color": Literal("red")})

    assert attributes.format(bracketed=False) == "color=red;rank=same;"


def test_set_overwrites_existing_key():
    attributes = Attributes()
    attributes.set_string(Key.LABEL, "first")
    attributes.set_literal("label", "second")

    assert len(attributes) == 1
    assert attributes.get(Key.LABEL) == Literal("second")


def test_get_and_delete_missing_keys_do_not_raise():
    attributes = Attributes()

    assert attributes.get("missing") is None
    assert attributes.get_string("missing") == ""
    attributes.delete("missing")
    assert attributes.is_empty()


def test_all_returns_a_copy():
    attributes = Attributes({"label": "x"})
    snapshot = attributes.all()
    snapshot["color"] = Literal("red")

    assert "color" not in attributes
    assert snapshot["label"] == String("x")


def test_update_helpers_pick_value_kinds():
    attributes = Attributes()
    attributes.update({"label": "plain", Key.SHAPE: Literal("box")})
    attributes.update_literals({"rank": "same"})
    attributes.update_html({"xlabel": "<I>x</I>"})
    attributes.update_strings({"tooltip": "tip"})

    assert attributes.all() == {
        "label": String("plain"),
        "shape": Literal("box"),
        "rank": Literal("same"),
        "xlabel": HTML("<I>x</I>"),
        "tooltip": String("tip"),
    }
    assert list(attributes) == ["label", "rank", "shape", "tooltip", "xlabel"]


def test_unsupported_value_type_is_rejected():
    with pytest.raises(TypeError):
        Attributes().set("weight", 3)


def test_from_reader_copies_without_sharing():
    original = Attributes({"label": "x"})
    copied = Attributes.from_reader(original)
    copied.set_string("label", "y")

    assert original.get_string("label") == "x"
    assert Attributes.from_reader(None).is_empty()
    assert Attributes.from_reader({"a": "b"}) == Attributes({"a": String("b")})


def test_write_to_is_a_single_call_and_reports_bytes(chunk_sink):
    attributes = Attributes({"label": "ü"})

    written = attributes.write_to(chunk_sink)

    assert chunk_sink.chunks == ['[label="ü"]'.encode("utf-8")]
    assert written == len('[label="ü"]'.encode("utf-8"))


def test_empty_store_writes_nothing(chunk_sink):
    assert Attributes().write_to(chunk_sink) == 0
    assert Attributes().write_to(chunk_sink, bracketed=False) == 0
    assert chunk_sink.chunks == []


def test_write_to_accepts_file_like_sinks():
    buffer = io.BytesIO()
    Attributes({"rank": Literal("same")}).write_to(buffer, bracketed=False)

    assert buffer.getvalue() == b"rank=same;"
