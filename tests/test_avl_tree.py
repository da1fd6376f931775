from hypothesis import given
from hypothesis import strategies as st

from structkit.avl_tree import AvlNode, AvlTree, main


def _check_balanced(node: AvlNode | None) -> int:
    if node is None:
        return 0
    left = _check_balanced(node.left)
    right = _check_balanced(node.right)
    assert abs(right - left) <= 1
    assert node.height == 1 + max(left, right)
    return node.height


def _build(values):
    tree = AvlTree()
    for value in values:
        tree.insert(value)
    return tree


def test_empty_tree_reports():
    tree = AvlTree()
    assert tree.height() == 0
    assert len(tree) == 0
    assert list(tree.in_order()) == []
    assert tree.format_in_order() == "[PRINT IN ORDER - TREE IS NULL]\n"
    assert tree.format_pre_order() == "[PRINT PRE ORDER - TREE IS NULL]\n"
    assert tree.format_graphically() == "[PRINT GRAPHICALLY - TREE IS NULL]\n"


def test_ascending_inserts_rotate():
    tree = _build([1, 2, 3])
    assert tree.root.value == 2
    assert list(tree.pre_order()) == [2, 1, 3]
    assert tree.height() == 2


def test_format_pre_order_text():
    tree = _build([1, 2, 3])
    expected = (
        "\n[PRINT PRE ORDER]\n"
        "[Quantity of tree nodes]: 3\n"
        "[Height of tree]: 2\n"
        "> 2 [height: 2] [1]\n"
        "> 1 [height: 1] [2]\n"
        "> 3 [height: 1] [3]\n"
    )
    assert tree.format_pre_order() == expected


def test_format_in_order_lists_sorted_values():
    tree = _build([5, 3, 8])
    lines = tree.format_in_order().splitlines()
    assert lines[1] == "[PRINT IN ORDER]"
    assert [line.split()[1] for line in lines[4:]] == ["3", "5", "8"]


def test_duplicates_are_kept():
    tree = _build([4, 4, 4, 4])
    assert list(tree.in_order()) == [4, 4, 4, 4]
    assert len(tree) == 4


def test_left_right_double_rotation():
    tree = _build([3, 1, 2])
    assert tree.root.value == 2
    assert list(tree.pre_order()) == [2, 1, 3]


def test_format_graphically_both_children():
    tree = _build([1, 2, 3])
    spaces = " " * 3
    assert tree.format_graphically() == (
        "[Quantity of tree nodes]: 3\n"
        f"  {spaces}2\n"
        f" {spaces}/ \\ \n"
        f"{spaces}1   3\n"
    )


@given(st.lists(st.integers(min_value=-5000, max_value=5000), max_size=200))
def test_invariants(values):
    tree = _build(values)
    assert list(tree.in_order()) == sorted(values)
    assert sorted(tree.pre_order()) == sorted(values)
    assert len(tree) == len(values)
    assert _check_balanced(tree.root) == tree.height()


def test_main_prints_report(capsys):
    assert main(["--count", "5", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("[OK INSERTED]") == 5
    assert "[PRINT IN ORDER]" in out
    assert "[Quantity of tree nodes]: 5" in out