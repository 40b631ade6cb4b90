from __future__ import annotations

import pytest

from treegen.core.tokens import SEPARATOR, group_tokens


def test_group_tokens_splits_on_separator() -> None:
    """Separator ends one group and starts the next."""
    # Input
    tokens = ["src", "main.rs", ":", "README.md"]

    # Act
    result = group_tokens(tokens)

    # Expected
    expected = [["src", "main.rs"], ["README.md"]]

    # Assert
    assert result == expected


def test_group_tokens_without_separator_is_single_group() -> None:
    # Input
    tokens = ["a", "..", "b.txt"]

    # Act
    result = group_tokens(tokens)

    # Assert
    assert result == [["a", "..", "b.txt"]]


def test_group_tokens_empty_input_yields_no_groups() -> None:
    assert group_tokens([]) == []


@pytest.mark.parametrize(
    "tokens",
    [
        [":"],
        [":", ":", ":"],
        [":", "a", ":", ":", "b", ":"],
        ["a", ":", ":", "b"],
    ],
)
def test_group_tokens_never_yields_empty_groups(tokens: list[str]) -> None:
    """Leading, trailing and adjacent separators are dropped."""
    # Act
    result = group_tokens(tokens)

    # Assert
    assert all(group for group in result)


@pytest.mark.parametrize(
    "tokens",
    [
        ["a", "b", ":", "c", "..", "d.txt"],
        [":", "x", ":", ":", "y/z.py", ":"],
        ["only"],
    ],
)
def test_group_tokens_preserves_token_order(tokens: list[str]) -> None:
    """Flattening the groups reproduces the non-separator tokens in order."""
    # Act
    result = group_tokens(tokens)

    # Expected
    expected = [token for token in tokens if token != SEPARATOR]

    # Assert
    assert [token for group in result for token in group] == expected


def test_group_tokens_accepts_any_iterable() -> None:
    # Input
    tokens = iter(["a", ":", "b"])

    # Act
    result = group_tokens(tokens)

    # Assert
    assert result == [["a"], ["b"]]
