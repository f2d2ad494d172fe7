from __future__ import annotations

from typing import Sequence


class FeatureRankError(ValueError):
    """Base class for every error raised while ranking features."""


class ShapeMismatchError(FeatureRankError):
    pass


class UnsupportedLabelTypeError(FeatureRankError):
    """
    Labels cannot be reduced to exactly two groups.

    Raised directly when the element type itself is not supported
    (only strings/categories, integers and booleans are).
    """


class TooManyClassesError(UnsupportedLabelTypeError):
    def __init__(self, values: Sequence[object]):
        self.values = list(values)
        super().__init__(f"labels must contain exactly two classes, found {len(self.values)}: {self.values!r}")


class TooFewClassesError(UnsupportedLabelTypeError):
    def __init__(self, values: Sequence[object]):
        self.values = list(values)
        super().__init__(f"labels must contain exactly two classes, found {len(self.values)}: {self.values!r}")


class DegenerateClassError(FeatureRankError):
    def __init__(self, label: object, size: int, min_size: int = 2):
        self.label = label
        self.size = int(size)
        self.min_size = int(min_size)
        super().__init__(
            f"class {label!r} has {self.size} member(s); at least {self.min_size} are needed for sample variance"
        )


class DegenerateScoreError(FeatureRankError):
    def __init__(self, criterion: str, feature_indices: Sequence[int]):
        self.criterion = criterion
        self.feature_indices = [int(i) for i in feature_indices]
        shown = self.feature_indices[:10]
        more = "" if len(self.feature_indices) <= 10 else f" (+{len(self.feature_indices) - 10} more)"
        super().__init__(f"{criterion}: zero denominator for feature(s) {shown}{more}")


class InvalidParameterError(FeatureRankError):
    pass


__all__ = [
    "FeatureRankError",
    "ShapeMismatchError",
    "UnsupportedLabelTypeError",
    "TooManyClassesError",
    "TooFewClassesError",
    "DegenerateClassError",
    "DegenerateScoreError",
    "InvalidParameterError",
]
