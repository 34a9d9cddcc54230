"""Unit tests for collection helpers."""

import random

import pytest

from cloudops_utils.domain.collection import (
    array_from_list,
    in_array,
    is_empty,
    list_from_array,
    pop,
    pop_front,
    pop_stack,
    push,
    push_front,
    push_stack,
    reverse,
    size,
)


def test_array_from_list_splits_on_spaces_and_commas() -> None:
    """Test that default separators split on spaces, commas and newlines."""
    assert array_from_list("a, b,c\nd") == ["a", "b", "c", "d"]


def test_array_from_list_custom_separators() -> None:
    """Test splitting on caller-supplied separators only."""
    assert array_from_list("a:b c:d", ":") == ["a", "b c", "d"]


def test_array_from_list_empty_text() -> None:
    """Test that empty text gives an empty list."""
    assert array_from_list("") == []


def test_join_then_split_round_trip() -> None:
    """Test that items without separators survive a join/split round trip."""
    items = ["alpha", "beta", "gamma"]

    assert array_from_list(list_from_array(items, ","), ",") == items


def test_size_and_is_empty() -> None:
    """Test size and emptiness checks."""
    assert size(["a", "b"]) == 2
    assert is_empty([])
    assert not is_empty(["a"])


def test_in_array_matches_pattern() -> None:
    """Test regex matching against the joined collection."""
    collection = ["us-east-1", "eu-west-2"]

    assert in_array(collection, r"^us-")
    assert not in_array(collection, "ap-south")


def test_push_then_pop_restores_collection() -> None:
    """Test that a push followed by a pop gives back the pushed item."""
    collection = ["a", "b"]

    push(collection, "c")
    removed = pop(collection)

    assert removed == ["c"]
    assert collection == ["a", "b"]


def test_push_skips_empty_items() -> None:
    """Test that empty strings are never added."""
    collection: list[str] = []

    push(collection, "a", "", "b")

    assert collection == ["a", "b"]


def test_push_front_last_argument_first() -> None:
    """Test that items are prepended one at a time."""
    collection = ["z"]

    push_front(collection, "a", "b")

    assert collection == ["b", "a", "z"]


def test_pop_clamps_count() -> None:
    """Test that popping more than available empties the list."""
    collection = ["a", "b"]

    removed = pop(collection, 5)

    assert removed == ["a", "b"]
    assert collection == []


def test_pop_zero_or_empty() -> None:
    """Test that popping nothing returns nothing."""
    assert pop(["a"], 0) == []
    assert pop([]) == []


def test_pop_front_removes_head() -> None:
    """Test removing items from the front."""
    collection = ["a", "b", "c"]

    removed = pop_front(collection, 2)

    assert removed == ["a", "b"]
    assert collection == ["c"]


def test_stack_aliases_operate_on_head() -> None:
    """Test that the stack aliases push and pop at the head."""
    stack: list[str] = []

    push_stack(stack, "first")
    push_stack(stack, "second")

    assert pop_stack(stack) == ["second"]
    assert stack == ["first"]


def test_reverse_in_place() -> None:
    """Test in-place reversal."""
    collection = ["a", "b", "c"]

    result = reverse(collection)

    assert result is collection
    assert collection == ["c", "b", "a"]


def test_reverse_twice_is_identity() -> None:
    """Test that reversing twice restores the original order."""
    collection = ["1", "2", "3", "4"]

    reverse(reverse(collection))

    assert collection == ["1", "2", "3", "4"]


def test_reverse_into_target_leaves_source() -> None:
    """Test reversing into a separate list replaces its contents."""
    source = ["a", "b"]
    target = ["stale"]

    reverse(source, target)

    assert target == ["b", "a"]
    assert source == ["a", "b"]


@pytest.mark.parametrize("seed", range(25))
def test_random_push_pop_sequences_match_list_model(seed: int) -> None:
    """Test that any push/pop sequence matches append and clamped remove-from-end."""
    rng = random.Random(seed)
    collection: list[str] = []
    model: list[str] = []

    for step in range(rng.randint(1, 40)):
        if rng.random() < 0.5:
            items = [rng.choice(["", f"item{step}", f"x{step}"]) for _ in range(rng.randint(0, 3))]
            push(collection, *items)
            model.extend(item for item in items if item)
        else:
            count = rng.randint(0, 5)
            removed = pop(collection, count)
            kept = max(0, len(model) - count)
            assert removed == model[kept:]
            del model[kept:]

        assert collection == model


@pytest.mark.parametrize("seed", range(10))
def test_random_front_sequences_match_list_model(seed: int) -> None:
    """Test push_front/pop_front against prepend and clamped remove-from-front."""
    rng = random.Random(seed)
    collection: list[str] = []
    model: list[str] = []

    for step in range(rng.randint(1, 30)):
        if rng.random() < 0.5:
            item = rng.choice(["", f"item{step}"])
            push_front(collection, item)
            if item:
                model.insert(0, item)
        else:
            count = rng.randint(0, 4)
            assert pop_front(collection, count) == model[:count]
            del model[:count]

        assert collection == model
