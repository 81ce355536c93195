import random

import pytest

from algokit.bst import DEMO_KEYS, Node, Tree, main, parse_key


def keys_of(tree):
    return [node.key for node in tree.in_order()]


@pytest.mark.parametrize(
    "keys",
    [list(DEMO_KEYS), [3, 1, 2], [5, 5, 5, 1, 9, 5], list(range(10, 0, -1)), []],
)
def test_in_order_is_sorted(keys):
    assert keys_of(Tree(keys)) == sorted(keys)


def test_random_inserts_and_deletes_keep_order():
    rng = random.Random(1234)
    keys = [rng.randint(-50, 50) for _ in range(200)]
    tree = Tree(keys)
    remaining = list(keys)
    for key in rng.sample(keys, 120):
        assert tree.delete(key) is True
        remaining.remove(key)
        assert keys_of(tree) == sorted(remaining)


def test_find_present_and_missing():
    tree = Tree(DEMO_KEYS)
    for key in DEMO_KEYS:
        node = tree.find(key)
        assert node is not None and node.key == key
    assert tree.find(1000) is None
    assert 43 in tree
    assert 44 not in tree


def test_insert_returns_leaf():
    tree = Tree([10, 5])
    node = tree.insert(7)
    assert node.key == 7
    assert node.left is None and node.right is None
    assert tree.find(5).right is node


def test_duplicates_go_right():
    tree = Tree([10, 10])
    assert tree.root.right.key == 10
    assert tree.root.left is None


def test_delete_leaf():
    tree = Tree(DEMO_KEYS)
    assert tree.delete(12) is True
    assert tree.find(12) is None
    assert tree.find(25).left is None


def test_delete_node_with_one_child():
    tree = Tree(DEMO_KEYS)
    assert tree.delete(87) is True
    assert tree.find(75).right is tree.find(93)
    assert keys_of(tree) == sorted(k for k in DEMO_KEYS if k != 87)


def test_delete_root_with_two_children_takes_successor():
    tree = Tree(DEMO_KEYS)
    assert tree.delete(50) is True
    assert tree.root.key == 75
    assert keys_of(tree) == sorted(k for k in DEMO_KEYS if k != 50)


def test_delete_inner_node_with_deep_successor():
    tree = Tree(DEMO_KEYS)
    assert tree.delete(25) is True
    assert tree.root.left.key == 30
    assert keys_of(tree) == sorted(k for k in DEMO_KEYS if k != 25)


def test_delete_missing_key_changes_nothing():
    tree = Tree(DEMO_KEYS)
    before = tree.structure()
    assert tree.delete(999) is False
    assert tree.structure() == before


def test_delete_from_empty_tree():
    tree = Tree()
    assert tree.delete(1) is False
    assert tree.root is None


def test_delete_one_of_duplicates():
    tree = Tree([5, 5, 5])
    assert tree.delete(5) is True
    assert keys_of(tree) == [5, 5]


def test_structure_of_empty_tree():
    assert Tree().structure() == "null"


def test_structure_of_small_tree():
    assert Tree([50, 25, 75]).structure() == "(50 (25 null null) (75 null null))"


def test_describe():
    tree = Tree([50, 25, 75])
    assert tree.root.describe() == "(50, 25, 75)"
    assert Node(7).describe() == "(7, null, null)"


def test_display_joins_descriptions_in_order():
    tree = Tree([2, 1, 3])
    expected = "".join(node.describe() + " " for node in tree.in_order())
    assert tree.display() == expected
    assert tree.display().endswith(" ")


@pytest.mark.parametrize("text,value", [("42", 42), ("-7", -7), ("+3", 3), ("0", 0)])
def test_parse_key_valid(text, value):
    assert parse_key(text) == value


@pytest.mark.parametrize("text", ["", "abc", "4a", "1.5", "99999999999", "-"])
def test_parse_key_invalid(text):
    with pytest.raises(ValueError):
        parse_key(text)


def test_main_search_insert_delete(capsys):
    assert main(["50", "60", "25"]) == 0
    out = capsys.readouterr().out
    expected_found = Tree(DEMO_KEYS).root.describe()
    assert f"Найден узел: {expected_found}" in out

    final = Tree(DEMO_KEYS)
    final.insert(60)
    final.delete(25)
    last_block = out.split("Структура дерева (in-order):\n", 1)[1]
    assert last_block.splitlines()[0] == final.display()


def test_main_missing_key_and_retry(capsys):
    assert main(["x", "1000", "1", "1"]) == 0
    out = capsys.readouterr().out
    assert "Ошибка: введите целое число!" in out
    assert "Заданный ключ в дереве не найден." in out


def test_main_ends_early_without_input(capsys):
    assert main([]) == 1
    assert "Первоначальная структура дерева:" in capsys.readouterr().out