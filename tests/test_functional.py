from nodescaler.functional import (
    contains_string,
    has_any_prefix,
    intersect_string_slice,
    string_slice_without,
    union_string_maps,
    unique_strings,
)

EMPTY_MAP = {}
ORIGINAL = {"a": "b", "c": "d"}
OVERWRITER = {"a": "y", "c": "z"}
DISJOINER = {"d": "y", "e": "z"}
UBERWRITER = {"d": "q", "e": "z"}

NILSET = None
EMPTY = []
UNIVERSE = ["a", "b", "c"]
SUBSET = ["a", "b"]
OVERLAP = ["a", "b", "d"]
DISJOINT = ["d", "e"]
DUPLICATES = ["a", "a"]


def test_union_no_args_returns_empty():
    assert union_string_maps() == {}


def test_union_multiple_empty_returns_empty():
    assert union_string_maps(EMPTY_MAP, EMPTY_MAP, EMPTY_MAP, EMPTY_MAP) == {}


def test_union_one_arg_returns_the_arg():
    assert union_string_maps(ORIGINAL) == ORIGINAL


def test_union_second_overrides_first():
    assert union_string_maps(ORIGINAL, OVERWRITER) == OVERWRITER


def test_union_disjoint():
    assert union_string_maps(ORIGINAL, DISJOINER) == {"a": "b", "c": "d", "d": "y", "e": "z"}


def test_union_final_arg_takes_precedence():
    assert union_string_maps(ORIGINAL, DISJOINER, EMPTY_MAP, UBERWRITER) == {
        "a": "b",
        "c": "d",
        "d": "q",
        "e": "z",
    }


def test_union_does_not_mutate_inputs():
    first = {"a": "b"}
    union_string_maps(first, {"a": "c"})
    assert first == {"a": "b"}


def test_intersect_nil_set():
    assert intersect_string_slice() is None
    assert intersect_string_slice(NILSET) is None
    assert intersect_string_slice(NILSET, NILSET) is None
    assert sorted(intersect_string_slice(NILSET, UNIVERSE)) == UNIVERSE
    assert sorted(intersect_string_slice(UNIVERSE, NILSET)) == UNIVERSE
    assert sorted(intersect_string_slice(UNIVERSE, NILSET, NILSET)) == UNIVERSE


def test_intersect_empty_set():
    assert intersect_string_slice(EMPTY, NILSET) == []
    assert intersect_string_slice(NILSET, EMPTY) == []
    assert intersect_string_slice(UNIVERSE, EMPTY) == []
    assert intersect_string_slice(UNIVERSE, UNIVERSE, EMPTY) == []


def test_intersect():
    assert sorted(intersect_string_slice(UNIVERSE, SUBSET)) == SUBSET
    assert sorted(intersect_string_slice(SUBSET, UNIVERSE)) == SUBSET
    assert sorted(intersect_string_slice(UNIVERSE, OVERLAP)) == SUBSET
    assert sorted(intersect_string_slice(OVERLAP, UNIVERSE)) == SUBSET
    assert intersect_string_slice(UNIVERSE, DISJOINT) == []
    assert intersect_string_slice(DISJOINT, UNIVERSE) == []
    assert intersect_string_slice(OVERLAP, DISJOINT, UNIVERSE) == []


def test_intersect_duplicates():
    assert intersect_string_slice(DUPLICATES) == ["a"]
    assert intersect_string_slice(DUPLICATES, NILSET) == ["a"]
    assert intersect_string_slice(DUPLICATES, UNIVERSE) == ["a"]
    assert intersect_string_slice(DUPLICATES, UNIVERSE, SUBSET) == ["a"]


def test_unique_strings():
    assert unique_strings(None) is None
    assert sorted(unique_strings(["x", "y", "x"])) == ["x", "y"]


def test_string_slice_without():
    assert string_slice_without(None, "a") is None
    assert string_slice_without(["a", "b", "c", "a"], "a", "c") == ["b"]
    assert string_slice_without(["a"], "a") == []


def test_contains_string():
    assert contains_string(UNIVERSE, "b")
    assert not contains_string(UNIVERSE, "z")
    assert not contains_string(None, "a")


def test_has_any_prefix():
    assert has_any_prefix("node.k8s.aws/foo", "kubernetes.io/", "node.k8s.aws/")
    assert not has_any_prefix("foo", "bar", "baz")
    assert not has_any_prefix("foo")