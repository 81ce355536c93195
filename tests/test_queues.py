import pytest

from algokit.queues import main, merge_unique, merge_with_duplicates

PAIRS = [
    ([1, 3, 5], [2, 3, 4]),
    ([], [1, 2]),
    ([7], []),
    ([-5, 0, 10], [-5, 0, 10]),
    ([1, 2, 3], [4, 5, 6]),
]


@pytest.mark.parametrize("first, second", PAIRS)
def test_merge_unique_is_sorted_union(first, second):
    assert merge_unique(first, second) == sorted(set(first) | set(second))


@pytest.mark.parametrize("first, second", PAIRS)
def test_merge_with_duplicates_keeps_everything(first, second):
    assert merge_with_duplicates(first, second) == sorted(first + second)


def test_inputs_are_not_consumed():
    first, second = [1, 2], [2, 3]
    merge_unique(first, second)
    assert first == [1, 2] and second == [2, 3]


def test_merge_accepts_iterators():
    assert merge_unique(iter([1, 4]), iter([2, 4])) == sorted({1, 2, 4})


def test_unique_only_drops_equal_heads():
    result = merge_unique([1, 1], [2])
    assert result.count(1) == 2


def test_main_outputs(capsys):
    assert main(["1", "3", "e", "2", "3", "e"]) == 0
    lines = capsys.readouterr().out.splitlines()
    unique_line = next(line for line in lines if "без дубликатов" in line)
    dup_line = next(line for line in lines if "с дубликатами" in line)
    assert unique_line.split(": ")[1].split() == ["1", "2", "3"]
    assert dup_line.split(": ")[1].split() == ["2", "2", "3", "3"]


def test_main_rejects_non_integer(capsys):
    assert main(["x", "e", "e"]) == 1