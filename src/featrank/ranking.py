"""
Two-class feature ranking.

    matrix (n_features, n_instances) + labels (n_instances,)
      -> resolve the two classes
      -> score every feature with the chosen criterion
      -> sort descending (ties by original index, NaN last)
      -> truncate to top_k

References:
- Y. W. Chen and C. J. Lin, "Combining SVMs with various feature selection
  strategies", Feature Extraction, Foundations and Applications, 2006.
- T. Markiewicz and S. Osowski, "Data mining techniques for feature selection
  in blood cell recognition", ESANN 2006.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

from .config import Criterion, RankerConfig, ZeroVariancePolicy
from .exceptions import DegenerateScoreError, InvalidParameterError, ShapeMismatchError
from .labels import label_length, resolve_class_partition
from .relevance.base import RankingResult, divide_scores
from .relevance.filters import get_criterion

logger = logging.getLogger(__name__)


def _as_matrix(matrix: Any) -> Tuple[np.ndarray, Optional[List[str]]]:
    names = None
    if isinstance(matrix, pd.DataFrame):
        names = [str(i) for i in matrix.index]
        matrix = matrix.to_numpy()
    X = np.asarray(matrix)
    if X.ndim != 2:
        raise ShapeMismatchError(f"matrix must be 2D (n_features, n_instances), got shape {X.shape}")
    if X.shape[0] < 1:
        raise ShapeMismatchError("matrix has no features")
    if X.dtype.kind not in ("b", "i", "u", "f"):
        raise InvalidParameterError(f"matrix must be numeric, got dtype {X.dtype}")
    return X.astype(float, copy=False), names


def _ensure_feature_names(feature_names: Optional[Iterable[str]], n_features: int, index_base: int) -> List[str]:
    if feature_names is None:
        return [f"x{i + index_base}" for i in range(n_features)]
    names = [str(n) for n in feature_names]
    if len(names) != n_features:
        raise ShapeMismatchError(f"feature_names has {len(names)} entries but matrix has {n_features} features")
    return names


def rank_order(scores: np.ndarray) -> np.ndarray:
    """
    Positions of ``scores`` from best to worst.

    Descending score, equal scores keep ascending position, NaN after everything.
    """
    scores = np.asarray(scores, dtype=float)
    nan = np.isnan(scores)
    key = np.where(nan, 0.0, -scores)
    # lexsort: last key is primary
    return np.lexsort((np.arange(scores.size), key, nan))


class FeatureRanker:
    """
    Rank features (matrix rows) by how well they separate two classes.

    Example:
        ranker = FeatureRanker(criterion="discriminating_coefficient", top_k=10)
        result = ranker.rank(X, y)
        scores, indices = result
    """

    def __init__(self, config: Optional[RankerConfig] = None, **overrides: Any):
        config = config if config is not None else RankerConfig()
        self.config = config.replace(**overrides) if overrides else config

    def rank(self, matrix: Any, labels: Any, feature_names: Optional[Iterable[str]] = None) -> RankingResult:
        t0 = time.perf_counter()
        cfg = self.config
        base = cfg.index_base

        X, frame_names = _as_matrix(matrix)
        n_features, n_instances = X.shape
        n_labels = label_length(labels)
        if n_labels != n_instances:
            raise ShapeMismatchError(f"matrix has {n_instances} instances (columns) but {n_labels} labels were given")
        if cfg.top_k is not None and cfg.top_k > n_features:
            raise InvalidParameterError(f"top_k={cfg.top_k} exceeds the number of features ({n_features})")

        names = _ensure_feature_names(feature_names if feature_names is not None else frame_names, n_features, base)
        partition = resolve_class_partition(labels)
        criterion = get_criterion(cfg.criterion)

        numer, denom = criterion.components(X, partition)
        zero = np.flatnonzero(denom == 0)
        if zero.size:
            logger.debug("%s: %d feature(s) with zero denominator", criterion.name, zero.size)
            if cfg.zero_variance is ZeroVariancePolicy.RAISE:
                raise DegenerateScoreError(criterion.name, zero + base)

        scores = divide_scores(numer, denom)
        n_nan = int(np.isnan(scores).sum())
        if n_nan:
            logger.warning(
                "%s: %d of %d feature(s) have undefined (NaN) scores and are ranked last",
                criterion.name,
                n_nan,
                n_features,
            )

        order = rank_order(scores)
        if cfg.top_k is not None:
            order = order[: cfg.top_k]

        dt = time.perf_counter() - t0
        return RankingResult(
            scores=scores[order],
            indices=order + base,
            feature_names=[names[i] for i in order],
            criterion=criterion.name,
            partition=partition,
            meta={
                "runtime_sec": dt,
                "index_base": base,
                "n_features": n_features,
                "n_instances": n_instances,
                "class_sizes": partition.sizes,
                "n_zero_denominator": int(zero.size),
                "n_nan": n_nan,
            },
        )


def rank(
    matrix: Any,
    labels: Any,
    top_k: Optional[int] = None,
    criterion: Any = Criterion.FISHER_SCORE,
    *,
    zero_variance: Any = ZeroVariancePolicy.NAN,
    index_base: int = 1,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rank the rows of ``matrix`` by two-class discriminative power.

    Returns ``(scores, indices)``: scores best first, indices 1-based
    (``index_base=0`` for numpy positions).
    """
    config = RankerConfig(criterion=criterion, top_k=top_k, zero_variance=zero_variance, index_base=index_base)
    result = FeatureRanker(config).rank(matrix, labels)
    return result.scores, result.indices


__all__ = ["FeatureRanker", "rank", "rank_order"]
