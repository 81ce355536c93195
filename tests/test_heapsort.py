import random

import pytest

from algokit.heapsort import heap_sort, main, random_values, sift_down

SAMPLES = [[], [1], [3, 1, 2], [5, -1, 5, 0, -99, 42, 7], list(range(20, 0, -1))]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorts(values):
    result = heap_sort(values)
    assert result.values == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_one_step_per_element(values):
    result = heap_sort(values)
    assert len(result.steps) == len(values)
    counts = [swaps for _, swaps in result.steps]
    assert counts == sorted(counts)
    assert all(count <= result.swaps for count in counts)


def test_input_unchanged():
    values = [4, 2, 9, 1]
    heap_sort(values)
    assert values == [4, 2, 9, 1]


def test_empty_has_no_swaps():
    assert heap_sort([]).swaps == 0


def test_snapshots_are_permutations():
    values = [8, 3, 5, 1, 9]
    for snapshot, _ in heap_sort(values).steps:
        assert sorted(snapshot) == sorted(values)


def test_sift_down_moves_largest_to_root():
    values = [1, 3, 2]
    swaps = sift_down(values, 3, 0)
    assert values[0] == 3
    assert swaps == 1


def test_sift_down_respects_size():
    values = [1, 5]
    assert sift_down(values, 1, 0) == 0
    assert values == [1, 5]


@pytest.mark.parametrize("positive, low, high", [(True, 0, 99), (False, -99, 99)])
def test_random_values_range(positive, low, high):
    values = random_values(300, positive, random.Random(3))
    assert len(values) == 300
    assert all(low <= value <= high for value in values)


def test_random_values_negative_count():
    with pytest.raises(ValueError):
        random_values(-1, True)


def test_main_sorts(capsys):
    assert main(["6", "y"]) == 0
    lines = capsys.readouterr().out.splitlines()
    final = lines[-1].split(": ", 1)[1].split()
    numbers = [int(token) for token in final]
    assert numbers == sorted(numbers)
    assert len(numbers) == 6
    assert sum("Промежуточный результат" in line for line in lines) == 6