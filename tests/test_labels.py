import numpy as np
import pandas as pd
import pytest

from featrank.exceptions import (
    DegenerateClassError,
    ShapeMismatchError,
    TooFewClassesError,
    TooManyClassesError,
    UnsupportedLabelTypeError,
)
from featrank.labels import label_length, resolve_class_partition


def _covers_all_columns(p, n):
    both = np.concatenate([p.indices_a, p.indices_b])
    return sorted(both.tolist()) == list(range(n)) and not set(p.indices_a) & set(p.indices_b)


def test_string_labels_use_lexical_order():
    p = resolve_class_partition(["b", "a", "b", "a"])
    assert p.labels == ("a", "b")
    assert p.indices_a.tolist() == [1, 3]
    assert p.indices_b.tolist() == [0, 2]
    assert _covers_all_columns(p, 4)


def test_integer_labels_ascending():
    p = resolve_class_partition(np.array([2, 1, 2, 1, 1]))
    assert p.labels == (1, 2)
    assert p.indices_a.tolist() == [1, 3, 4]
    assert p.sizes == (3, 2)
    assert p.n_instances == 5


def test_boolean_labels_false_first():
    p = resolve_class_partition([True, True, False, False])
    assert p.labels == (False, True)
    assert p.indices_a.tolist() == [2, 3]


def test_integral_float_labels_accepted():
    p = resolve_class_partition([0.0, 1.0, 0.0, 1.0])
    assert p.labels == (0.0, 1.0)
    assert p.indices_b.tolist() == [1, 3]


def test_column_vector_labels_accepted():
    p = resolve_class_partition(np.array([[0], [0], [1], [1]]))
    assert p.indices_a.tolist() == [0, 1]
    assert label_length(np.array([[0], [0], [1], [1]])) == 4
    assert label_length(np.array([[0, 0, 1, 1]])) == 4


def test_object_array_of_strings():
    p = resolve_class_partition(np.array(["x", "y", "x", "y"], dtype=object))
    assert p.labels == ("x", "y")


def test_pandas_category_uses_declared_order():
    cat = pd.Categorical(["pos", "neg", "pos", "neg"], categories=["pos", "neg"])
    p = resolve_class_partition(pd.Series(cat))
    assert p.labels == ("pos", "neg")
    assert p.indices_a.tolist() == [0, 2]


def test_pandas_category_ignores_unused_categories():
    cat = pd.Categorical(["pos", "neg", "pos", "neg"], categories=["other", "pos", "neg"])
    p = resolve_class_partition(cat)
    assert p.labels == ("pos", "neg")


def test_pandas_series_of_strings():
    p = resolve_class_partition(pd.Series(["ctrl", "case", "ctrl", "case"]))
    assert p.labels == ("case", "ctrl")


def test_three_classes_rejected():
    with pytest.raises(TooManyClassesError) as exc:
        resolve_class_partition(["A", "B", "C", "A", "B"])
    assert exc.value.values == ["A", "B", "C"]
    assert isinstance(exc.value, UnsupportedLabelTypeError)


def test_single_class_rejected():
    with pytest.raises(TooFewClassesError):
        resolve_class_partition([1, 1, 1, 1])


@pytest.mark.parametrize(
    "labels",
    [
        [0.5, 1.5, 0.5, 1.5],
        [1, "a", 1, "a"],
        ["a", None, "a", None],
        np.array([1 + 1j, 2 + 0j, 1 + 1j, 2 + 0j]),
    ],
)
def test_unsupported_label_types(labels):
    with pytest.raises(UnsupportedLabelTypeError):
        resolve_class_partition(np.array(labels, dtype=object) if isinstance(labels, list) else labels)


def test_categorical_with_missing_value_rejected():
    with pytest.raises(UnsupportedLabelTypeError):
        resolve_class_partition(pd.Categorical(["a", None, "b", "b"]))


def test_class_with_single_member_is_degenerate():
    with pytest.raises(DegenerateClassError) as exc:
        resolve_class_partition(["A", "B", "B", "B"])
    assert exc.value.label == "A"
    assert exc.value.size == 1


def test_matrix_shaped_labels_rejected():
    with pytest.raises(ShapeMismatchError):
        resolve_class_partition(np.zeros((2, 3), dtype=int))


def test_scalar_labels_rejected():
    with pytest.raises(UnsupportedLabelTypeError):
        label_length(3)
