from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union

from .exceptions import InvalidParameterError


class Criterion(str, Enum):
    FISHER_SCORE = "fisher_score"
    DISCRIMINATING_COEFFICIENT = "discriminating_coefficient"

    @classmethod
    def parse(cls, value: Union[str, "Criterion"]) -> "Criterion":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidParameterError(f"criterion must be a string or Criterion, got {type(value).__name__}")
        key = value.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return _CRITERION_ALIASES[key]
        except KeyError:
            known = sorted(_CRITERION_ALIASES)
            raise InvalidParameterError(f"unknown criterion {value!r}; expected one of {known}") from None


_CRITERION_ALIASES = {
    "fisher_score": Criterion.FISHER_SCORE,
    "fisher": Criterion.FISHER_SCORE,
    "fs": Criterion.FISHER_SCORE,
    "discriminating_coefficient": Criterion.DISCRIMINATING_COEFFICIENT,
    "discriminating": Criterion.DISCRIMINATING_COEFFICIENT,
    "dc": Criterion.DISCRIMINATING_COEFFICIENT,
}


class ZeroVariancePolicy(str, Enum):
    """
    What to do when a criterion's denominator is zero.

    - NAN: x/0 with x>0 scores +inf, 0/0 scores NaN (ranked after everything else)
    - RAISE: fail with DegenerateScoreError
    """

    NAN = "nan"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: Union[str, "ZeroVariancePolicy"]) -> "ZeroVariancePolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidParameterError(
                f"unknown zero_variance policy {value!r}; expected one of {[p.value for p in cls]}"
            ) from None


@dataclass(frozen=True)
class RankerConfig:
    """
    Parameters of one ranking call.

    - criterion: Criterion / alias string, or a BaseCriterion instance
    - top_k: keep only the best k features (None -> all)
    - zero_variance: see ZeroVariancePolicy
    - index_base: 1 (reference numbering) or 0 (numpy positions)
    """

    criterion: Any = Criterion.FISHER_SCORE
    top_k: Optional[int] = None
    zero_variance: Union[str, ZeroVariancePolicy] = ZeroVariancePolicy.NAN
    index_base: int = 1

    def __post_init__(self) -> None:
        # frozen: normalized values go through object.__setattr__
        if isinstance(self.criterion, (str, Criterion)):
            object.__setattr__(self, "criterion", Criterion.parse(self.criterion))
        elif not callable(getattr(self.criterion, "components", None)):
            raise InvalidParameterError(
                f"criterion must be a name or an object with a components() method, got {type(self.criterion).__name__}"
            )
        object.__setattr__(self, "zero_variance", ZeroVariancePolicy.parse(self.zero_variance))

        if self.top_k is not None:
            try:
                k = int(self.top_k)
            except (TypeError, ValueError):
                k = None
            if k is None or isinstance(self.top_k, bool) or k != self.top_k or k <= 0:
                raise InvalidParameterError(f"top_k must be a positive integer, got {self.top_k!r}")
            object.__setattr__(self, "top_k", k)
        if self.index_base not in (0, 1):
            raise InvalidParameterError(f"index_base must be 0 or 1, got {self.index_base!r}")

    def replace(self, **changes: Any) -> "RankerConfig":
        return replace(self, **changes)

    @property
    def criterion_name(self) -> str:
        if isinstance(self.criterion, Criterion):
            return self.criterion.value
        return str(getattr(self.criterion, "name", type(self.criterion).__name__))


__all__ = ["Criterion", "ZeroVariancePolicy", "RankerConfig"]
