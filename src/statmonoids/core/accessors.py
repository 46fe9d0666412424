"""
Readouts that do not depend on the concrete accumulator type.

Count, Mean and Variance form a tower: each can report everything the previous one can.
These accessors let callers ask for a statistic from any accumulator that supports it. For a
compound accumulator the first component supporting the readout answers.
"""
import math
from typing import Any, Optional

from typing_extensions import Protocol, runtime_checkable

from statmonoids.core.accumulators.compound import CompoundAccumulator
from statmonoids.core.errors import UnsupportedError


@runtime_checkable
class CalcCount(Protocol):
    @property
    def count(self) -> int:
        ...


@runtime_checkable
class CalcMean(Protocol):
    @property
    def mean(self) -> float:
        ...


@runtime_checkable
class CalcVariance(Protocol):
    @property
    def variance(self) -> float:
        ...

    @property
    def variance_unbiased(self) -> float:
        ...


def _find(accumulator: Any, capability: type) -> Optional[Any]:
    if isinstance(accumulator, capability):
        return accumulator
    if isinstance(accumulator, CompoundAccumulator):
        for component in accumulator.components:
            found = _find(component, capability)
            if found is not None:
                return found
    return None


def _require(accumulator: Any, capability: type) -> Any:
    found = _find(accumulator, capability)
    if found is None:
        raise UnsupportedError(f"{type(accumulator).__name__} does not support {capability.__name__}")
    return found


def calc_count(accumulator: Any) -> int:
    return _require(accumulator, CalcCount).count


def calc_mean(accumulator: Any) -> float:
    return _require(accumulator, CalcMean).mean


def calc_variance(accumulator: Any) -> float:
    """Biased estimate of the variance, the denominator is n."""
    return _require(accumulator, CalcVariance).variance


def calc_variance_unbiased(accumulator: Any) -> float:
    """Unbiased estimate of the variance, the denominator is n - 1."""
    return _require(accumulator, CalcVariance).variance_unbiased


def calc_stddev(accumulator: Any) -> float:
    return math.sqrt(calc_variance(accumulator))


def calc_stddev_unbiased(accumulator: Any) -> float:
    return math.sqrt(calc_variance_unbiased(accumulator))
