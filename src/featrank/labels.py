"""
Label normalization.

Whatever the caller passes as labels (strings, pandas categories, integers,
booleans) is reduced here to two index sets over the instance columns, so the
scoring code never has to look at label types.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd

from .exceptions import (
    DegenerateClassError,
    ShapeMismatchError,
    TooFewClassesError,
    TooManyClassesError,
    UnsupportedLabelTypeError,
)

logger = logging.getLogger(__name__)

MIN_CLASS_SIZE = 2


@dataclass(frozen=True)
class ClassPartition:
    """
    Column indices of the two classes.

    indices_a/indices_b are disjoint, sorted, and together cover every column.
    """

    labels: Tuple[Any, Any]
    indices_a: np.ndarray
    indices_b: np.ndarray

    @property
    def n_instances(self) -> int:
        return int(self.indices_a.size + self.indices_b.size)

    @property
    def sizes(self) -> Tuple[int, int]:
        return int(self.indices_a.size), int(self.indices_b.size)

    def as_dict(self) -> Dict[str, object]:
        return {
            "labels": list(self.labels),
            "indices_a": self.indices_a.tolist(),
            "indices_b": self.indices_b.tolist(),
        }


def _to_python(value: Any) -> Any:
    return value.item() if isinstance(value, np.generic) else value


def _flatten(arr: np.ndarray) -> np.ndarray:
    # (n,), (n, 1) and (1, n) are all accepted as a label vector
    if arr.ndim == 1:
        return arr
    if arr.ndim == 2 and 1 in arr.shape:
        return arr.reshape(-1)
    raise ShapeMismatchError(f"labels must be a vector, got an array of shape {arr.shape}")


def _from_categorical(cat: pd.Categorical) -> Tuple[np.ndarray, List[Any]]:
    codes = np.asarray(cat.codes)
    if (codes < 0).any():
        raise UnsupportedLabelTypeError("labels contain missing values")
    present = np.unique(codes)
    # declared category order, restricted to categories that actually occur
    return codes, [(int(c), cat.categories[c]) for c in present]


def _normalize_object(arr: np.ndarray) -> np.ndarray:
    items = arr.tolist()
    if all(isinstance(v, str) for v in items):
        return arr.astype(str)
    if all(isinstance(v, (bool, np.bool_)) for v in items):
        return arr.astype(bool)
    if all(isinstance(v, numbers.Integral) and not isinstance(v, (bool, np.bool_)) for v in items):
        return arr.astype(np.int64)
    kinds = sorted({type(v).__name__ for v in items})
    raise UnsupportedLabelTypeError(f"labels must all be strings, integers or booleans; got element types {kinds}")


def _normalize_array(labels: Any) -> np.ndarray:
    arr = _flatten(np.asarray(labels))
    kind = arr.dtype.kind
    if kind in ("U", "S", "b", "i", "u"):
        return arr
    if kind == "O":
        return _normalize_object(arr)
    if kind == "f":
        # numeric class codes stored as floats (e.g. 0.0/1.0) are fine, real-valued targets are not
        if arr.size and np.all(np.isfinite(arr)) and np.all(arr == np.round(arr)):
            return arr
        raise UnsupportedLabelTypeError("float labels must be finite integral class codes")
    raise UnsupportedLabelTypeError(f"unsupported label dtype {arr.dtype}")


def resolve_class_partition(labels: Any, *, min_class_size: int = MIN_CLASS_SIZE) -> ClassPartition:
    """
    Split instance columns into two classes.

    Class order: ascending for numeric/boolean/string labels (False < True,
    lexical for strings), declared category order for pandas categoricals.
    The first value becomes class A, the second class B.
    """
    if isinstance(labels, pd.DataFrame):
        if labels.shape[1] != 1:
            raise ShapeMismatchError(f"labels must be a single column, got {labels.shape[1]} columns")
        labels = labels.iloc[:, 0]

    if isinstance(labels, pd.Series) and isinstance(labels.dtype, pd.CategoricalDtype):
        labels = labels.array
    if isinstance(labels, pd.Categorical):
        keys, pairs = _from_categorical(labels)
        values = [code for code, _ in pairs]
        names = [_to_python(name) for _, name in pairs]
    else:
        if isinstance(labels, pd.Series):
            labels = labels.to_numpy()
        keys = _normalize_array(labels)
        uniq = np.unique(keys)
        values = list(uniq)
        names = [_to_python(v) for v in uniq]

    if len(values) > 2:
        raise TooManyClassesError(names)
    if len(values) < 2:
        raise TooFewClassesError(names)

    idx_a = np.flatnonzero(keys == values[0])
    idx_b = np.flatnonzero(keys == values[1])
    for name, idx in zip(names, (idx_a, idx_b)):
        if idx.size < min_class_size:
            raise DegenerateClassError(name, idx.size, min_class_size)

    logger.debug("class partition: %r=%d, %r=%d", names[0], idx_a.size, names[1], idx_b.size)
    return ClassPartition(labels=(names[0], names[1]), indices_a=idx_a, indices_b=idx_b)


def label_length(labels: Any) -> int:
    """Number of instances described by a label container."""
    if isinstance(labels, (pd.Series, pd.Categorical)):
        return int(len(labels))
    if isinstance(labels, pd.DataFrame):
        return int(labels.shape[0])
    arr = np.asarray(labels)
    if arr.ndim == 0:
        raise UnsupportedLabelTypeError("labels must be a sequence, got a scalar")
    if arr.ndim == 2 and arr.shape[0] == 1:
        return int(arr.shape[1])
    return int(arr.shape[0])


__all__ = ["ClassPartition", "MIN_CLASS_SIZE", "resolve_class_partition", "label_length"]
