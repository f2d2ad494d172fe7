from __future__ import annotations

import logging
from typing import Any, Union

import numpy as np
from sklearn.base import BaseEstimator
from sklearn.feature_selection import SelectorMixin
from sklearn.utils.validation import check_array, check_is_fitted

from .config import RankerConfig
from .exceptions import InvalidParameterError
from .ranking import FeatureRanker

logger = logging.getLogger(__name__)


class TwoClassRankSelector(SelectorMixin, BaseEstimator):
    """
    Keep the k most discriminative features of a two-class problem.

    Works on sklearn-oriented X (n_samples, n_features), so it can sit in a
    Pipeline in front of a classifier (e.g. SVC).

    Fitted attributes:
    - scores_: criterion score per feature, in original column order
    - ranking_: 0-based column indices, best first
    - classes_: the two class labels (class A first)
    - support_: boolean mask of kept columns
    """

    def __init__(self, criterion: Any = "fisher_score", k: Union[int, str] = 10, zero_variance: str = "nan"):
        self.criterion = criterion
        self.k = k
        self.zero_variance = zero_variance

    def _resolve_k(self, n_features: int) -> int:
        if isinstance(self.k, str):
            if self.k != "all":
                raise InvalidParameterError(f"k must be a positive integer or 'all', got {self.k!r}")
            return n_features
        k = int(self.k)
        if k <= 0:
            raise InvalidParameterError(f"k must be a positive integer or 'all', got {self.k!r}")
        if k > n_features:
            logger.warning("k=%d is larger than n_features=%d; keeping all features", k, n_features)
            return n_features
        return k

    def fit(self, X, y):
        columns = getattr(X, "columns", None)
        X = check_array(X, dtype=float, ensure_min_samples=2)
        n_features = X.shape[1]
        k = self._resolve_k(n_features)

        config = RankerConfig(criterion=self.criterion, zero_variance=self.zero_variance, index_base=0)
        result = FeatureRanker(config).rank(X.T, np.asarray(y))

        scores = np.empty(n_features, dtype=float)
        scores[result.indices] = result.scores
        mask = np.zeros(n_features, dtype=bool)
        mask[result.indices[:k]] = True

        self.scores_ = scores
        self.ranking_ = np.asarray(result.indices)
        self.classes_ = np.asarray(result.partition.labels)
        self.support_ = mask
        self.k_ = k
        self.n_features_in_ = n_features
        if columns is not None and all(isinstance(c, str) for c in columns):
            self.feature_names_in_ = np.asarray(columns, dtype=object)
        return self

    def _get_support_mask(self):
        check_is_fitted(self, "support_")
        return self.support_


__all__ = ["TwoClassRankSelector"]
