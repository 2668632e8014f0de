import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.tree import LiftedTree

PATH_SIZE = 12


@pytest.fixture(scope="module")
def path_tree():
    return LiftedTree(PATH_SIZE, [(i, i + 1) for i in range(1, PATH_SIZE)])


@pytest.fixture(scope="module")
def star_tree():
    return LiftedTree(6, [(1, leaf) for leaf in range(2, 7)])


nodes = st.integers(min_value=1, max_value=PATH_SIZE)


@given(nodes, nodes)
def test_path_lca_is_shallower_node(path_tree, u, v):
    assert path_tree.lca(u, v) == min(u, v)


@given(nodes, nodes)
def test_path_distance(path_tree, u, v):
    assert path_tree.distance(u, v) == abs(u - v)
    assert path_tree.distance(v, u) == path_tree.distance(u, v)


@given(nodes, nodes, nodes)
def test_path_rooted_lca_is_median(path_tree, r, u, v):
    assert path_tree.rooted_lca(r, u, v) == sorted([r, u, v])[1]


@given(nodes, nodes)
def test_rooted_at_root_matches_lca(path_tree, u, v):
    assert path_tree.rooted_lca(1, u, v) == path_tree.lca(u, v)


def test_star_leaves_meet_at_centre(star_tree):
    for u in range(2, 7):
        for v in range(2, 7):
            expected = u if u == v else 1
            assert star_tree.lca(u, v) == expected


def test_star_rooted_at_leaf(star_tree):
    assert star_tree.rooted_lca(2, 2, 3) == 2
    assert star_tree.rooted_lca(2, 3, 4) == 1


def test_lca_of_node_with_itself(star_tree):
    assert all(star_tree.lca(n, n) == n for n in range(1, 7))
    assert all(star_tree.distance(n, n) == 0 for n in range(1, 7))


def test_deep_tree_has_no_recursion_limit():
    size = 5000
    tree = LiftedTree(size, [(i, i + 1) for i in range(1, size)])
    assert tree.lca(size, size - 1) == size - 1
    assert tree.distance(1, size) == size - 1


def test_node_out_of_range():
    tree = LiftedTree(3, [(1, 2), (2, 3)])
    with pytest.raises(ValueError):
        tree.lca(0, 2)
    with pytest.raises(ValueError):
        tree.lca(1, 4)


def test_edge_out_of_range():
    with pytest.raises(ValueError):
        LiftedTree(3, [(1, 2), (2, 5)])


def test_disconnected_graph():
    with pytest.raises(ValueError):
        LiftedTree(4, [(1, 2), (3, 4)])