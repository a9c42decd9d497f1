from phraselint.services.utils import difference, group_by

def test_difference_keeps_order_of_first_list():
    assert difference(["one", "two", "three"], ["one"]) == ["two", "three"]
    assert difference(["c", "a", "b"], ["a"]) == ["c", "b"]

def test_difference_collapses_duplicates():
    assert difference(["a", "b", "a", "c"], ["c"]) == ["a", "b"]

def test_difference_edge_cases():
    assert difference([], ["a"]) == []
    assert difference(["a", "b"], []) == ["a", "b"]
    assert difference(["a"], ["a", "b", "z"]) == []

def test_group_by_first_seen_order():
    items = [("x", 1), ("y", 2), ("x", 3), ("z", 4)]
    groups = group_by(items, lambda it: it[0])
    assert list(groups.keys()) == ["x", "y", "z"]
    assert groups["x"] == [("x", 1), ("x", 3)]
    assert groups["z"] == [("z", 4)]

def test_group_by_empty():
    assert group_by([], lambda it: it) == {}
