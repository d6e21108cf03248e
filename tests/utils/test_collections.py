import pytest

from clusterby.utils.collections import group_pairs


@pytest.mark.parametrize(
    ("pairs", "expected"),
    [
        ([], {}),
        ([("a", 1)], {"a": [1]}),
        ([("a", 1), ("b", 2), ("a", 3)], {"a": [1, 3], "b": [2]}),
        ([(1, "x"), (1, "y"), (2, "z")], {1: ["x", "y"], 2: ["z"]}),
    ],
)
def test_group_pairs_collects_values_by_key(pairs, expected) -> None:
    assert group_pairs(pairs) == expected


def test_group_pairs_keeps_first_occurrence_order_of_keys() -> None:
    result = group_pairs([("b", 1), ("a", 2), ("b", 3), ("c", 4)])
    assert list(result) == ["b", "a", "c"]


def test_group_pairs_accepts_a_generator() -> None:
    result = group_pairs((x % 2, x) for x in range(6))
    assert result == {0: [0, 2, 4], 1: [1, 3, 5]}


def test_group_pairs_rejects_unhashable_keys() -> None:
    with pytest.raises(TypeError):
        group_pairs([(["unhashable"], 1)])
