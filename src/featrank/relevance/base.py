from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np
import pandas as pd

from ..labels import ClassPartition


@dataclass(frozen=True)
class RankingResult:
    """
    Ranked features, best first.

    - scores: criterion value per ranked feature (non-increasing, NaN last)
    - indices: original feature numbers, aligned with scores by position
    - feature_names: names aligned with indices
    - meta: criterion name, index base, partition sizes, etc.

    Unpacks as ``scores, indices = result``.
    """

    scores: np.ndarray
    indices: np.ndarray
    feature_names: List[str]
    criterion: str
    partition: Optional[ClassPartition] = None
    meta: Dict[str, object] = field(default_factory=dict)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter((self.scores, self.indices))

    def __len__(self) -> int:
        return int(self.indices.size)

    def topk(self, k: int) -> List[str]:
        k = int(k)
        if k <= 0:
            return []
        return self.feature_names[:k]

    def as_dict(self) -> Dict[str, object]:
        return {
            "criterion": self.criterion,
            "scores": [float(s) for s in self.scores],
            "indices": [int(i) for i in self.indices],
            "feature_names": list(self.feature_names),
            "partition": self.partition.as_dict() if self.partition is not None else None,
            "meta": dict(self.meta),
        }

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "rank": np.arange(1, len(self) + 1),
                "index": self.indices,
                "feature": self.feature_names,
                "score": self.scores,
            }
        )


class BaseCriterion:
    """
    A two-class univariate scoring criterion.

    Conventions:
    - matrix is 2D (n_features, n_instances), float
    - the score of feature i is numerator[i] / denominator[i], larger is better
    - components() never divides; zero denominators are handled by the caller
    """

    name: str = "base"

    def components(self, matrix: np.ndarray, partition: ClassPartition) -> Tuple[np.ndarray, np.ndarray]:
        raise NotImplementedError

    def score(self, matrix: np.ndarray, partition: ClassPartition) -> np.ndarray:
        numer, denom = self.components(matrix, partition)
        return divide_scores(numer, denom)


def divide_scores(numer: np.ndarray, denom: np.ndarray) -> np.ndarray:
    """
    Elementwise numer/denom without floating-point warnings.

    x/0 with x>0 gives +inf, 0/0 gives NaN.
    """
    numer = np.asarray(numer, dtype=float)
    denom = np.asarray(denom, dtype=float)
    out = np.full(numer.shape, np.nan, dtype=float)
    ok = denom != 0
    out[ok] = numer[ok] / denom[ok]
    out[~ok & (numer > 0)] = np.inf
    return out


def class_moments(values: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Row-wise mean and sample variance (ddof=1) of a (n_features, n) block.

    Constant rows get their exact value as mean and exactly zero variance,
    so float round-off never turns "no spread" into a tiny positive number.
    """
    mean = values.mean(axis=1)
    var = values.var(axis=1, ddof=1)
    constant = np.ptp(values, axis=1) == 0
    mean = np.where(constant, values[:, 0], mean)
    var = np.where(constant, 0.0, var)
    return mean, var


__all__ = ["RankingResult", "BaseCriterion", "divide_scores", "class_moments"]
