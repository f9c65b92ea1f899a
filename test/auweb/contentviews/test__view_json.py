import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from auweb.contentviews import beautify
from auweb.contentviews import json_view
from auweb.mime import MimeKind
from auweb.options import Options

json_values = st.recursive(
    st.none()
    | st.booleans()
    | st.integers()
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(),
    lambda children: st.lists(children) | st.dictionaries(st.text(), children),
    max_leaves=20,
)


def test_view_json(opts):
    assert json_view.prettify("null", opts) == "null"
    assert json_view.prettify("{}", opts) == "{}"
    assert json_view.prettify("[]", opts) == "[]"
    assert json_view.prettify("[1, 2]", opts) == "[\n  1,\n  2\n]"
    with pytest.raises(ValueError):
        json_view.prettify("{", opts)
    assert json_view.name == "JSON"
    assert json_view.kind is MimeKind.JSON


def test_key_order_is_kept():
    assert beautify(MimeKind.JSON, '{"b":1,"a":2}') == '{\n  "b": 1,\n  "a": 2\n}'


def test_nested():
    assert beautify(MimeKind.JSON, '{"a":{"b":[true,null]}}') == (
        '{\n  "a": {\n    "b": [\n      true,\n      null\n    ]\n  }\n}'
    )


def test_indent_option():
    opts = Options(json_indent=4)
    assert beautify(MimeKind.JSON, '{"a":1}', opts) == '{\n    "a": 1\n}'


def test_non_ascii_is_kept():
    assert beautify(MimeKind.JSON, '["\\u4e16", "界"]') == '[\n  "世",\n  "界"\n]'


@pytest.mark.parametrize(
    "text",
    [
        "{bad}",
        "",
        "{",
        "NaN",
        "[Infinity]",
        "[-Infinity]",
        "1e999",
        "{'single': 'quotes'}",
        '{"a": 1,}',
    ],
)
def test_invalid_is_returned_unchanged(text):
    assert beautify(MimeKind.JSON, text) == text


@given(json_values)
def test_idempotent(value):
    once = beautify(MimeKind.JSON, json.dumps(value))
    assert beautify(MimeKind.JSON, once) == once


@given(st.text())
def test_unparsable_text_is_unchanged(text):
    try:
        json.loads(text, parse_constant=lambda c: 1 / 0)
    except (ValueError, ZeroDivisionError, RecursionError):
        assert beautify(MimeKind.JSON, text) == text
