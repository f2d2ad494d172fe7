"""
Scoring criteria.

Each criterion turns a (n_features, n_instances) matrix and a two-class
partition into per-feature numerator/denominator arrays; the ranker does the
division, the zero-denominator policy and the sorting.
"""

from .base import BaseCriterion, RankingResult
from .filters import CRITERIA, DiscriminatingCoefficient, FisherScore, get_criterion

__all__ = ["BaseCriterion", "RankingResult", "CRITERIA", "DiscriminatingCoefficient", "FisherScore", "get_criterion"]
