import pytest

from labelled_graphs import ArityMismatch, DuplicateLabel, LabelRegistry, UnknownLabel


def test_construction_builds_bijection() -> None:
    labels = [20, 4, 5, 6]
    reg = LabelRegistry(labels, 4)

    assert reg.labels == labels
    assert len(reg) == 4
    for i, label in enumerate(labels):
        assert reg.index_of(label) == i
        assert reg.label_of(reg.index_of(label)) == label


def test_construction_rejects_wrong_arity() -> None:
    with pytest.raises(ArityMismatch) as info:
        LabelRegistry([1, 4, 5, 3], 5)
    assert info.value.num_labels == 4
    assert info.value.num_vertices == 5


def test_construction_rejects_duplicates_regardless_of_arity() -> None:
    with pytest.raises(DuplicateLabel) as info:
        LabelRegistry([1, 5, 10, 5], 4)
    assert info.value.label == 5

    with pytest.raises(DuplicateLabel):
        LabelRegistry(["a", "a"], 2)

    # duplicates win over a wrong label count
    with pytest.raises(DuplicateLabel) as info:
        LabelRegistry(["a", "a"], 3)
    assert info.value.label == "a"
    with pytest.raises(DuplicateLabel):
        LabelRegistry([1, 2, 2], 1)


def test_errors_are_value_and_key_errors() -> None:
    """Callers catching the builtin kinds still see these failures."""
    with pytest.raises(ValueError):
        LabelRegistry([1], 2)
    with pytest.raises(KeyError):
        LabelRegistry(["a"], 1).index_of("b")


def test_unknown_label() -> None:
    reg = LabelRegistry(["a", "b"], 2)
    with pytest.raises(UnknownLabel) as info:
        reg.index_of("z")
    assert info.value.label == "z"
    assert "z" in str(info.value)


def test_membership_tolerates_unhashable_values() -> None:
    reg = LabelRegistry(["a"], 1)
    assert "a" in reg
    assert "b" not in reg
    assert ["a"] not in reg
    with pytest.raises(UnknownLabel):
        reg.index_of(["a"])


def test_append_assigns_next_index() -> None:
    reg = LabelRegistry(["a", "b"], 2)
    assert reg.append("c") == 2
    assert reg.append("d") == 3
    assert reg.labels == ["a", "b", "c", "d"]
    assert reg.index_of("d") == 3


def test_append_duplicate_leaves_registry_unchanged() -> None:
    reg = LabelRegistry(["a", "b"], 2)
    with pytest.raises(DuplicateLabel):
        reg.append("a")
    assert reg.labels == ["a", "b"]


def test_check_new_detects_existing_and_in_batch_duplicates() -> None:
    reg = LabelRegistry(["a"], 1)
    reg.check_new(["b", "c"])

    with pytest.raises(DuplicateLabel) as info:
        reg.check_new(["b", "a"])
    assert info.value.label == "a"

    with pytest.raises(DuplicateLabel) as info:
        reg.check_new(["b", "c", "b"])
    assert info.value.label == "b"

    assert reg.labels == ["a"]


def test_labels_property_is_a_copy() -> None:
    reg = LabelRegistry(["a"], 1)
    reg.labels.append("x")
    assert reg.labels == ["a"]
