import pytest

from algobox.disjoint_set import DisjointSet


def test_fresh_elements_are_singletons():
    ds = DisjointSet(4)
    assert len(ds) == 4
    assert [ds.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert all(ds.size(i) == 1 for i in range(4))
    assert not ds.connected(0, 1)


def test_union_merges_once():
    ds = DisjointSet(3)
    assert ds.union(0, 1) is True
    assert ds.union(1, 0) is False
    assert ds.connected(0, 1)
    assert not ds.connected(0, 2)
    assert ds.size(0) == len({0, 1})


def test_sizes_and_roots_agree_with_groups():
    ds = DisjointSet(8)
    groups = [{0, 1, 2, 3}, {4, 5}, {6}, {7}]
    for group in groups:
        members = sorted(group)
        for a, b in zip(members, members[1:]):
            ds.union(a, b)
    for group in groups:
        roots = {ds.find(x) for x in group}
        assert len(roots) == 1
        assert all(ds.size(x) == len(group) for x in group)
    assert not ds.connected(3, 4)


def test_transitive_connection():
    ds = DisjointSet(5)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(1, 3)
    assert ds.connected(0, 2)
    assert ds.size(2) == len({0, 1, 2, 3})
    assert not ds.connected(4, 0)


def test_out_of_range_element():
    ds = DisjointSet(2)
    with pytest.raises(IndexError):
        ds.find(2)
    with pytest.raises(IndexError):
        ds.union(-1, 0)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DisjointSet(-1)