import pytest

from middlestack.arguments import as_argument_list, is_list_shaped


@pytest.mark.parametrize(
    "value",
    [[1, 2], (1, 2), [], (), 100, "text", b"bytes", 0, False, object()],
)
def test_list_shaped_values(value) -> None:
    assert is_list_shaped(value) is True


@pytest.mark.parametrize(
    "value",
    [None, {1, 2}, frozenset(), {"a": 1}, iter([1]), (x for x in range(2))],
)
def test_rejected_values(value) -> None:
    assert is_list_shaped(value) is False


def test_sequences_are_copied_into_lists() -> None:
    original = [1, 2]
    result = as_argument_list(original)

    assert result == [1, 2]
    assert result is not original
    assert as_argument_list((3, 4)) == [3, 4]


def test_single_value_becomes_one_element_list() -> None:
    assert as_argument_list("(100)") == ["(100)"]
    assert as_argument_list(100) == [100]


def test_strings_are_not_spread() -> None:
    assert as_argument_list("abc") == ["abc"]


def test_none_cannot_be_coerced() -> None:
    with pytest.raises(TypeError):
        as_argument_list(None)
