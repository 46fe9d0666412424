import math
from dataclasses import dataclass
from typing import Any, Dict

from statmonoids.core.accumulators.accumulator import Accumulator, register_accumulator
from statmonoids.core.maths import (
    MeanResult,
    VarianceSumsResult,
    parallel_variance_sums,
    weighted_mean_merge,
    welford_mean_update,
)
from statmonoids.core.stubs import np

_NAN = float("nan")


@dataclass(frozen=True)
class Count(Accumulator[Any]):
    """Number of elements in the sample. The element values are ignored."""

    n: int = 0

    @property
    def namespace(self) -> str:
        return "count"

    @classmethod
    def zero(cls) -> "Count":
        return Count()

    @classmethod
    def singleton(cls, value: Any) -> "Count":
        return Count(1)

    def update(self, value: Any) -> "Count":
        return Count(self.n + 1)

    def merge(self, other: "Count") -> "Count":
        self._check_mergeable(other)
        return Count(self.n + other.n)

    @classmethod
    def from_array(cls, arr: "np.ndarray") -> "Count":
        return Count(len(arr))

    @property
    def count(self) -> int:
        return self.n

    def _summary(self) -> Dict[str, Any]:
        return {"n": self.n}


@dataclass(frozen=True)
class Sum(Accumulator[float]):
    """Plain running sum. See KahanSum and KBNSum for compensated variants."""

    total: float = 0.0

    @property
    def namespace(self) -> str:
        return "sum"

    @classmethod
    def zero(cls) -> "Sum":
        return Sum()

    @classmethod
    def singleton(cls, value: float) -> "Sum":
        return Sum(float(value))

    def merge(self, other: "Sum") -> "Sum":
        self._check_mergeable(other)
        return Sum(self.total + other.total)

    @property
    def value(self) -> float:
        return self.total

    def _summary(self) -> Dict[str, Any]:
        return {"sum": self.total}


@dataclass(frozen=True)
class Product(Accumulator[float]):
    value: float = 1.0

    @property
    def namespace(self) -> str:
        return "product"

    @classmethod
    def zero(cls) -> "Product":
        return Product()

    @classmethod
    def singleton(cls, value: float) -> "Product":
        return Product(float(value))

    def merge(self, other: "Product") -> "Product":
        self._check_mergeable(other)
        return Product(self.value * other.value)

    def _summary(self) -> Dict[str, Any]:
        return {"product": self.value}


@dataclass(frozen=True)
class Mean(Accumulator[float]):
    """
    Running mean, updated with Welford's incremental formula.

    The stored mean of the empty accumulator is 0.0; the ``mean`` readout of an empty
    accumulator is NaN.
    """

    n: int = 0
    mean_value: float = 0.0

    @property
    def namespace(self) -> str:
        return "mean"

    @classmethod
    def zero(cls) -> "Mean":
        return Mean()

    def update(self, value: float) -> "Mean":
        res = welford_mean_update(existing=MeanResult(self.n, self.mean_value), new_value=float(value))
        return Mean(res.n, res.mean)

    def merge(self, other: "Mean") -> "Mean":
        self._check_mergeable(other)
        res = weighted_mean_merge(
            first=MeanResult(self.n, self.mean_value), second=MeanResult(other.n, other.mean_value)
        )
        return Mean(res.n, res.mean)

    @classmethod
    def from_array(cls, arr: "np.ndarray") -> "Mean":
        if len(arr) == 0:
            return Mean()
        return Mean(len(arr), float(arr.mean()))

    @property
    def count(self) -> int:
        return self.n

    @property
    def mean(self) -> float:
        if self.n == 0:
            return _NAN
        return self.mean_value

    def _summary(self) -> Dict[str, Any]:
        return {"n": self.n, "mean": self.mean}


@dataclass(frozen=True)
class Variance(Accumulator[float]):
    """
    Count, sum and sum of squared deviations from the mean.

    ``m2`` is maintained with the pairwise formula of Chan, Golub and LeVeque; a single
    element is folded in by merging the one-element accumulator ``(1, x, 0)``.

    Readouts that are undefined for the current count return NaN: ``mean``, ``variance``
    and ``stddev`` when the sample is empty, and the unbiased readouts when fewer than
    two elements were seen.
    """

    n: int = 0
    total: float = 0.0
    m2: float = 0.0

    @property
    def namespace(self) -> str:
        return "variance"

    @classmethod
    def zero(cls) -> "Variance":
        return Variance()

    @classmethod
    def singleton(cls, value: float) -> "Variance":
        return Variance(1, float(value), 0.0)

    def merge(self, other: "Variance") -> "Variance":
        self._check_mergeable(other)
        res = parallel_variance_sums(
            first=VarianceSumsResult(self.n, self.total, self.m2),
            second=VarianceSumsResult(other.n, other.total, other.m2),
        )
        return Variance(res.n, res.total, res.m2)

    @classmethod
    def from_array(cls, arr: "np.ndarray") -> "Variance":
        n = len(arr)
        if n == 0:
            return Variance()
        arr = arr.astype(float)
        deviations = arr - arr.mean()
        return Variance(n, float(arr.sum()), float(np.dot(deviations, deviations)))

    @property
    def count(self) -> int:
        return self.n

    @property
    def mean(self) -> float:
        if self.n == 0:
            return _NAN
        return self.total / self.n

    @property
    def variance(self) -> float:
        """Biased estimate of the variance, m2 / n."""
        if self.n == 0:
            return _NAN
        return self.m2 / self.n

    @property
    def variance_unbiased(self) -> float:
        """Unbiased estimate of the variance, m2 / (n - 1)."""
        if self.n < 2:
            return _NAN
        return self.m2 / (self.n - 1)

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)

    @property
    def stddev_unbiased(self) -> float:
        return math.sqrt(self.variance_unbiased)

    def _summary(self) -> Dict[str, Any]:
        return {
            "n": self.n,
            "mean": self.mean,
            "variance": self.variance,
            "variance_unbiased": self.variance_unbiased,
            "stddev": self.stddev,
            "stddev_unbiased": self.stddev_unbiased,
        }


register_accumulator([Count, Sum, Product, Mean, Variance])
