import random

import pytest

from algokit.mergesort import RESULTS_FILE, main, merge, merge_sort, random_values

SAMPLES = [[], [1], [2, 1], [5, -3, 5, 0, 12, -50, 7], list(range(30, 0, -1))]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorts(values):
    assert merge_sort(values).values == sorted(values)


@pytest.mark.parametrize("values", SAMPLES[2:])
def test_call_count_is_one_per_split(values):
    assert merge_sort(values).calls == len(values) - 1


@pytest.mark.parametrize("values", [[], [4]])
def test_trivial_inputs_make_no_calls(values):
    assert merge_sort(values).calls == 0


def test_input_unchanged():
    values = [3, 1, 2]
    merge_sort(values)
    assert values == [3, 1, 2]


def test_merge_is_sorted_and_stable():
    left = [(1, "a"), (2, "a")]
    right = [(1, "b"), (3, "b")]
    merged = merge(left, right)
    assert merged == sorted(left + right)
    assert merged.index((1, "a")) < merged.index((1, "b"))


@pytest.mark.parametrize("negative, low, high", [(True, -50, 49), (False, 0, 99)])
def test_random_values_range(negative, low, high):
    values = random_values(300, negative, random.Random(5))
    assert len(values) == 300
    assert all(low <= value <= high for value in values)


def test_random_values_negative_count():
    with pytest.raises(ValueError):
        random_values(-2, False)


def test_main_appends_summary(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["5", "o"]) == 0
    assert main(["3", "n"]) == 0
    out = capsys.readouterr().out
    sorted_lines = [line for line in out.splitlines() if "Отсортированная" in line]
    numbers = [int(token) for token in sorted_lines[0].split(": ", 1)[1].split()]
    assert numbers == sorted(numbers)

    text = (tmp_path / RESULTS_FILE).read_text(encoding="utf-8")
    assert text.count("------------------------") == 2
    assert "Тип чисел: С отрицательными" in text
    assert "Тип чисел: Натуральные" in text
    assert "Количество элементов: 5" in text