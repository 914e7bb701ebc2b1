import random

import pytest

from algorithms.tree import avl, bst
from algorithms.tree.layout import layout
from algorithms.tree.traversal import TRAVERSALS, inorder, postorder, preorder
from model.presets import TREE_CANVAS_WIDTH, TREE_INITIAL_Y, TREE_LEVEL_HEIGHT
from model.tree import TreeNode, height, inorder_values, size


def build(module, values):
    root = None
    for v in values:
        root = module.insert(root, v)
    return root


def heights_consistent(node):
    if node is None:
        return True
    if node.height != 1 + max(height(node.left), height(node.right)):
        return False
    return heights_consistent(node.left) and heights_consistent(node.right)


# ---------------------------------------------------------------------------
# BST
# ---------------------------------------------------------------------------
def test_bst_inorder_is_sorted_and_deduplicated():
    root = build(bst, [50, 30, 70, 20, 40, 60, 80, 30, 50])
    assert inorder_values(root) == [20, 30, 40, 50, 60, 70, 80]
    assert heights_consistent(root)


@pytest.mark.parametrize("victim", [20, 30, 50, 80])
def test_bst_delete_leaf_one_child_two_children(victim):
    values = [50, 30, 70, 20, 40, 60, 80]
    root = bst.delete(build(bst, values), victim)

    expected = sorted(v for v in values if v != victim)
    assert inorder_values(root) == expected
    assert bst.find(root, victim) is None
    assert heights_consistent(root)


def test_bst_delete_missing_value_is_noop():
    root = build(bst, [2, 1, 3])
    assert inorder_values(bst.delete(root, 99)) == [1, 2, 3]


def test_bst_delete_last_node():
    assert bst.delete(TreeNode(5), 5) is None


def test_bst_two_child_delete_takes_successor():
    root = build(bst, [50, 30, 70, 60, 80])
    root = bst.delete(root, 50)
    assert root.value == 60


# ---------------------------------------------------------------------------
# AVL
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("values,case", [
    ([30, 20, 10], "LL"),
    ([10, 20, 30], "RR"),
    ([30, 10, 20], "LR"),
    ([10, 30, 20], "RL"),
])
def test_avl_single_rotation_cases(values, case):
    rotations = []
    root = None
    for v in values:
        root = avl.insert(root, v, rotations)

    assert rotations == [case]
    assert root.value == 20
    assert root.left.value == 10 and root.right.value == 30


def test_avl_ascending_inserts_stay_logarithmic():
    root = None
    for v in range(1, 128):
        root = avl.insert(root, v)
    assert avl.is_balanced(root)
    assert height(root) == 7
    assert size(root) == 127


@pytest.mark.parametrize("seed", range(5))
def test_avl_random_inserts_and_deletes_stay_balanced(seed):
    rnd = random.Random(seed)
    values = rnd.sample(range(1000), 60)
    root = None
    for v in values:
        root = avl.insert(root, v)
    for v in values[:30]:
        root = avl.delete(root, v)
        assert avl.is_balanced(root)

    assert inorder_values(root) == sorted(values[30:])
    assert heights_consistent(root)


def test_avl_delete_triggers_rotation():
    rotations = []
    root = None
    for v in [20, 10, 30, 40]:
        root = avl.insert(root, v)
    root = avl.delete(root, 10, rotations)
    assert rotations == ["RR"]
    assert avl.is_balanced(root)


# ---------------------------------------------------------------------------
# Layout & traversals
# ---------------------------------------------------------------------------
def test_layout_positions():
    root = layout(build(bst, [50, 30, 70, 20]))

    assert (root.x, root.y) == (TREE_CANVAS_WIDTH / 2, TREE_INITIAL_Y)
    assert root.left.x == TREE_CANVAS_WIDTH / 2 - TREE_CANVAS_WIDTH / 4
    assert root.right.x == TREE_CANVAS_WIDTH / 2 + TREE_CANVAS_WIDTH / 4
    assert root.left.left.y == TREE_INITIAL_Y + 2 * TREE_LEVEL_HEIGHT
    assert root.left.left.x == root.left.x - TREE_CANVAS_WIDTH / 8


def test_layout_empty_tree():
    assert layout(None) is None


def test_traversal_orders():
    root = build(bst, [2, 1, 3])
    ids = {n.value: n.id for n in root}

    assert inorder(root) == [ids[1], ids[2], ids[3]]
    assert preorder(root) == [ids[2], ids[1], ids[3]]
    assert postorder(root) == [ids[1], ids[3], ids[2]]
    assert set(TRAVERSALS) == {"inorder", "preorder", "postorder"}


def test_node_serialisation_keeps_shape():
    root = layout(build(avl, [5, 3, 8, 1]))
    clone = TreeNode.from_dict(root.to_dict())
    assert clone.to_dict() == root.to_dict()


# ---------------------------------------------------------------------------
# State-level tree edits
# ---------------------------------------------------------------------------
def test_state_tree_edit_does_not_mutate_earlier_root(state):
    from algorithms import AlgorithmType

    state.set_algorithm(AlgorithmType.AVL)
    for v in [30, 20]:
        state.tree_insert(v)
    before = state.tree_root
    before_dict = before.to_dict()

    state.tree_insert(10)
    assert state.last_rotations == ["LL"]
    assert before.to_dict() == before_dict
    assert state.tree_root.value == 20


def test_state_tree_delete_to_empty(state):
    from algorithms import AlgorithmType

    state.set_algorithm(AlgorithmType.BST)
    state.tree_insert(4)
    state.tree_delete(4)
    assert state.tree_root is None
