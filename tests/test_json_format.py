import io

import pytest

from transitmap.json_format import ParsingError, dump, dumps, load, loads


def test_literals():
    assert loads("null") is None
    assert loads("true") is True
    assert loads("false") is False


def test_integers_and_floats():
    assert loads("42") == 42
    assert isinstance(loads("42"), int)
    assert loads("-7") == -7
    assert isinstance(loads("2.5"), float)
    assert loads("2.5") == 2.5


def test_exponent_gives_float():
    value = loads("1e2")
    assert isinstance(value, float)
    assert value == loads("100.0")


def test_int_outside_32_bits_becomes_float():
    big = loads("3000000000")
    assert isinstance(big, float)
    assert big == 3000000000
    assert isinstance(loads("2147483647"), int)


def test_nested_structures():
    text = ' { "a" : [1, 2.5, "x", null, true], "b": {"c": false} } '
    assert loads(text) == {"a": [1, 2.5, "x", None, True], "b": {"c": False}}


def test_string_escapes():
    assert loads(r'"a\nb\tc\rd\"e\\f"') == 'a\nb\tc\rd"e\\f'


def test_load_from_stream():
    assert load(io.StringIO('[1, "two"]')) == [1, "two"]


def test_whitespace_separated_array_items_are_accepted():
    assert loads("[1 2]") == [1, 2]


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "Unexpected EOF"),
        ("[1, 2", "Array parsing error"),
        ('{"a": 1', "Dictionary parsing error"),
        ('"abc', "String parsing error"),
        ('"a\\qb"', "Unrecognized escape sequence"),
        ('"a\nb"', "Unexpected end of line"),
        ("tru", "Failed to parse 'tru' as bool"),
        ("nul", "Failed to parse 'nul' as null"),
        ("-", "A digit is expected"),
        ("1.", "A digit is expected"),
        ("1e", "A digit is expected"),
        ('{"a" 1}', "is expected"),
        ('{1: 2}', "',' is expected"),
        ('{"a": 1, "a": 2}', "Duplicate key 'a'"),
        ("1e999", "Failed to convert"),
    ],
)
def test_parsing_errors(text, message):
    with pytest.raises(ParsingError, match=message):
        loads(text)


def test_dumps_scalars():
    assert dumps(None) == "null"
    assert dumps(True) == "true"
    assert dumps(False) == "false"
    assert dumps(17) == "17"


def test_dumps_empty_array_layout():
    assert dumps([]) == "[\n\n]"


def test_dumps_dict_indents_entries():
    assert '\n    "a": 1' in dumps({"a": 1})


def test_dumps_sorts_keys():
    text = dumps({"b": 1, "a": 2})
    assert text.index('"a"') < text.index('"b"')


@pytest.mark.parametrize(
    "value",
    [
        [1, 2, 3],
        {"z": [1, {"y": None}], "a": "text"},
        'quote " backslash \\ newline \n return \r',
        [[], {}, [[1]]],
        {"nested": {"deep": {"deeper": [True, False, None]}}},
        2.5,
        -3,
    ],
)
def test_round_trip(value):
    assert loads(dumps(value)) == value


def test_dumps_escapes_newline_but_keeps_tab():
    text = dumps("x\ny\tz")
    assert "\n" not in text
    assert "\t" in text
    assert loads(text) == "x\ny\tz"


def test_dump_writes_same_text_as_dumps():
    value = {"k": [1, "v"]}
    out = io.StringIO()
    dump(value, out)
    assert out.getvalue() == dumps(value)


def test_dumps_rejects_unsupported_types():
    with pytest.raises(TypeError):
        dumps({1: "a"})
    with pytest.raises(TypeError):
        dumps(object())