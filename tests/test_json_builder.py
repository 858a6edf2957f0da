import pytest

from transitmap.json_builder import Builder


def test_build_flat_dict():
    result = (
        Builder()
        .start_dict()
        .key("request_id").value(1)
        .key("error_message").value("not found")
        .end_dict()
        .build()
    )
    assert result == {"request_id": 1, "error_message": "not found"}


def test_build_nested_structure():
    result = (
        Builder()
        .start_dict()
        .key("items")
        .start_array()
        .value(1)
        .start_dict().key("x").value(None).end_dict()
        .start_array().value("a").end_array()
        .end_array()
        .key("inner").start_dict().key("flag").value(True).end_dict()
        .end_dict()
        .build()
    )
    assert result == {"items": [1, {"x": None}, ["a"]], "inner": {"flag": True}}


def test_build_root_array():
    assert Builder().start_array().value(1).value(2).end_array().build() == [1, 2]


def test_build_root_scalar():
    assert Builder().value("text").build() == "text"


def test_value_accepts_containers():
    buses = ["14", "22"]
    result = Builder().start_dict().key("buses").value(buses).end_dict().build()
    assert result == {"buses": ["14", "22"]}


def test_repeated_key_overwrites_value():
    result = Builder().start_dict().key("a").value(1).key("a").value(2).end_dict().build()
    assert result == {"a": 2}


def test_build_empty_raises():
    with pytest.raises(RuntimeError, match="Wrong Build"):
        Builder().build()


def test_build_with_open_nested_container_raises():
    builder = Builder().start_dict().key("a").start_array()
    with pytest.raises(RuntimeError, match="Wrong Build"):
        builder.build()


def test_key_outside_dict_raises():
    with pytest.raises(RuntimeError, match="Wrong map key"):
        Builder().start_array().key("a")


def test_two_keys_in_a_row_raise():
    with pytest.raises(RuntimeError, match="Wrong map key"):
        Builder().start_dict().key("a").key("b")


def test_value_in_dict_without_key_raises():
    with pytest.raises(RuntimeError, match="without key"):
        Builder().start_dict().value(1)


def test_start_array_in_dict_without_key_raises():
    with pytest.raises(RuntimeError, match="without key"):
        Builder().start_dict().start_array()


def test_start_dict_in_dict_without_key_raises():
    with pytest.raises(RuntimeError, match="without key"):
        Builder().start_dict().start_dict()


def test_second_root_value_raises():
    with pytest.raises(RuntimeError, match="unknow container"):
        Builder().value(1).value(2)


def test_start_container_after_root_scalar_raises():
    with pytest.raises(RuntimeError, match="Wrong prev node"):
        Builder().value(1).start_array()


def test_end_dict_on_array_raises():
    with pytest.raises(RuntimeError, match="not a Dict"):
        Builder().start_array().end_dict()


def test_end_array_on_dict_raises():
    with pytest.raises(RuntimeError, match="not an Array"):
        Builder().start_dict().end_array()


def test_calls_after_closing_root_raise():
    builder = Builder().start_dict().end_dict()
    assert builder.build() == {}
    with pytest.raises(RuntimeError):
        builder.value(1)