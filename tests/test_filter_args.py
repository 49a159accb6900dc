"""Argument validation and value coercion for registered filters."""

from __future__ import annotations

import pytest

from plaintext_filters.lib.errors import FilterError, InvalidArgument, TypeMismatch
from plaintext_filters.lib.filters.alignment import AlignArgs
from plaintext_filters.lib.filters.codec import coerce_filter_args
from plaintext_filters.lib.filters.registry import get_filter
from plaintext_filters.lib.filters.slicing import SliceArgs


def test_coerce_filter_args_builds_typed_arguments() -> None:
    assert coerce_filter_args("center", AlignArgs, named={"length": 20}) == AlignArgs(length=20)
    assert coerce_filter_args("slice", SliceArgs, named={"end": 0}) == SliceArgs(end=0)


def test_missing_argument_is_invalid() -> None:
    with pytest.raises(InvalidArgument, match="expected an argument called `length`") as exc_info:
        coerce_filter_args("center", AlignArgs, named={})

    assert exc_info.value.filter_name == "center"
    assert str(exc_info.value).startswith("Filter `center`: ")


@pytest.mark.parametrize(
    "raw_value",
    [
        pytest.param(-1, id="negative"),
        pytest.param("20", id="string"),
        pytest.param(20.0, id="float"),
        pytest.param(True, id="bool"),
        pytest.param(None, id="none"),
    ],
)
def test_non_count_argument_is_invalid(raw_value: object) -> None:
    with pytest.raises(InvalidArgument):
        coerce_filter_args("left_align", AlignArgs, named={"length": raw_value})


def test_positional_arguments_are_rejected() -> None:
    with pytest.raises(InvalidArgument, match="named arguments only"):
        coerce_filter_args("center", AlignArgs, positional=(20,), named={})


def test_unknown_arguments_are_rejected() -> None:
    with pytest.raises(InvalidArgument, match="unexpected argument"):
        coerce_filter_args("center", AlignArgs, named={"length": 3, "fill": "*"})


def test_error_types_subclass_builtin_errors() -> None:
    assert issubclass(InvalidArgument, ValueError)
    assert issubclass(TypeMismatch, TypeError)
    assert issubclass(InvalidArgument, FilterError)
    assert issubclass(TypeMismatch, FilterError)


@pytest.mark.parametrize(
    "value,expected",
    [
        pytest.param("12.23", "       12.23        ", id="text"),
        pytest.param(12.23, "       12.23        ", id="float"),
        pytest.param(None, " " * 20, id="null"),
        pytest.param(3000, "        3000        ", id="int"),
        pytest.param(True, "        True        ", id="bool"),
    ],
)
def test_center_coerces_scalars_to_text(value: object, expected: str) -> None:
    assert get_filter("center").invoke(value, length=20) == expected


@pytest.mark.parametrize(
    "value",
    [
        pytest.param({"a": "notice", "b": 124.0}, id="mapping"),
        pytest.param(["notice", "the", "trailing", "comma -->"], id="list"),
        pytest.param(("a", "b"), id="tuple"),
    ],
)
def test_alignment_rejects_containers(value: object) -> None:
    for name in ("left_align", "center", "right_align"):
        with pytest.raises(TypeMismatch, match="expected a text or number"):
            get_filter(name).invoke(value, length=20)


def test_slice_accepts_sequences_and_iterables() -> None:
    slicer = get_filter("slice")

    assert slicer.invoke([1, 2, 3, 4, 5], end=3) == [1, 2, 3]
    assert slicer.invoke((1, 2, 3), end=5) == (1, 2, 3)
    assert list(slicer.invoke(range(10), end=2)) == [0, 1]
    assert slicer.invoke((item for item in "abcdef"), end=4) == ["a", "b", "c", "d"]
    assert slicer.invoke([], end=3) == []


def test_slice_consumes_only_needed_items() -> None:
    pulled: list[int] = []

    def numbers():
        for number in range(100):
            pulled.append(number)
            yield number

    assert get_filter("slice").invoke(numbers(), end=3) == [0, 1, 2]
    assert pulled == [0, 1, 2]


@pytest.mark.parametrize(
    "value",
    [
        pytest.param("abc", id="text"),
        pytest.param(b"abc", id="bytes"),
        pytest.param({"a": 1}, id="mapping"),
        pytest.param(None, id="null"),
        pytest.param(42, id="scalar"),
    ],
)
def test_slice_rejects_non_sequences(value: object) -> None:
    with pytest.raises(TypeMismatch, match="expected a sequence"):
        get_filter("slice").invoke(value, end=2)


def test_invalid_arguments_win_before_value_checks() -> None:
    with pytest.raises(InvalidArgument):
        get_filter("slice").invoke("abc", end=-1)


def test_async_iterables_are_rejected_outside_async_environments() -> None:
    async def letters():
        yield "a"

    items = letters()

    with pytest.raises(TypeMismatch, match="expected a text or number"):
        get_filter("center").invoke(items, length=3)
    with pytest.raises(TypeMismatch, match="expected a sequence"):
        get_filter("slice").invoke(items, end=1)
