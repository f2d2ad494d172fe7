from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type

import numpy as np

from ..config import Criterion
from ..exceptions import InvalidParameterError
from ..labels import ClassPartition
from .base import BaseCriterion, class_moments


@dataclass
class FisherScore(BaseCriterion):
    """
    Two-class Fisher Score (Chen & Lin, 2006).

        F_i = ((mu_a - mu)^2 + (mu_b - mu)^2) / (var_a + var_b)

    mu is the mean over all instances of feature i; var_* are sample
    variances (n-1 normalizer).
    """

    name: str = Criterion.FISHER_SCORE.value

    def components(self, matrix: np.ndarray, partition: ClassPartition) -> Tuple[np.ndarray, np.ndarray]:
        mu, _ = class_moments(matrix)
        mu_a, var_a = class_moments(matrix[:, partition.indices_a])
        mu_b, var_b = class_moments(matrix[:, partition.indices_b])
        numer = (mu_a - mu) ** 2 + (mu_b - mu) ** 2
        return numer, var_a + var_b


@dataclass
class DiscriminatingCoefficient(BaseCriterion):
    """
    Discriminating coefficient (Markiewicz & Osowski, 2006).

        S_i = |mu_a - mu_b| / (sigma_a + sigma_b)

    sigma_* are sample standard deviations (n-1 normalizer).
    """

    name: str = Criterion.DISCRIMINATING_COEFFICIENT.value

    def components(self, matrix: np.ndarray, partition: ClassPartition) -> Tuple[np.ndarray, np.ndarray]:
        mu_a, var_a = class_moments(matrix[:, partition.indices_a])
        mu_b, var_b = class_moments(matrix[:, partition.indices_b])
        return np.abs(mu_a - mu_b), np.sqrt(var_a) + np.sqrt(var_b)


CRITERIA: Dict[Criterion, Type[BaseCriterion]] = {
    Criterion.FISHER_SCORE: FisherScore,
    Criterion.DISCRIMINATING_COEFFICIENT: DiscriminatingCoefficient,
}


def get_criterion(criterion: Any) -> BaseCriterion:
    """Resolve a Criterion, an alias string, or pass a BaseCriterion instance through."""
    if isinstance(criterion, BaseCriterion):
        return criterion
    if isinstance(criterion, (str, Criterion)):
        return CRITERIA[Criterion.parse(criterion)]()
    if callable(getattr(criterion, "components", None)):
        return criterion
    raise InvalidParameterError(f"cannot use {type(criterion).__name__} as a ranking criterion")


__all__ = ["FisherScore", "DiscriminatingCoefficient", "CRITERIA", "get_criterion"]
