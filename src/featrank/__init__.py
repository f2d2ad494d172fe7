"""
featrank: two-class feature ranking by Fisher Score or Discriminating Coefficient.

Typical use is a preprocessing step before training a classifier:

    scores, indices = featrank.rank(X, y, top_k=50)

where X is (n_features, n_instances) and indices are 1-based feature numbers.
"""

from .config import Criterion, RankerConfig, ZeroVariancePolicy
from .exceptions import (
    DegenerateClassError,
    DegenerateScoreError,
    FeatureRankError,
    InvalidParameterError,
    ShapeMismatchError,
    TooFewClassesError,
    TooManyClassesError,
    UnsupportedLabelTypeError,
)
from .labels import ClassPartition, resolve_class_partition
from .ranking import FeatureRanker, rank
from .relevance.base import BaseCriterion, RankingResult
from .relevance.filters import DiscriminatingCoefficient, FisherScore, get_criterion
from .selector import TwoClassRankSelector

__version__ = "0.1.0"

__all__ = [
    "BaseCriterion",
    "ClassPartition",
    "Criterion",
    "DegenerateClassError",
    "DegenerateScoreError",
    "DiscriminatingCoefficient",
    "FeatureRankError",
    "FeatureRanker",
    "FisherScore",
    "InvalidParameterError",
    "RankerConfig",
    "RankingResult",
    "ShapeMismatchError",
    "TooFewClassesError",
    "TooManyClassesError",
    "TwoClassRankSelector",
    "UnsupportedLabelTypeError",
    "ZeroVariancePolicy",
    "get_criterion",
    "rank",
    "resolve_class_partition",
]
