"""
Running minimum and maximum.

``Min`` and ``Max`` work over any ordered type and use ``None`` for the empty sample.
``MinD`` and ``MaxD`` are the floating point variants. They use NaN as the empty sentinel,
so the identity needs no extra flag, and they ignore NaN elements: a NaN in the stream never
replaces an extremum that is already present.
"""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, TypeVar

from statmonoids.core.accumulators.accumulator import Accumulator, register_accumulator
from statmonoids.core.maths import nan_max, nan_min
from statmonoids.core.stubs import np

T = TypeVar("T")

_NAN = float("nan")


@dataclass(frozen=True)
class _OrderedExtremum(Accumulator[T]):
    value: Optional[T] = None

    # pairwise choice between two present values
    _combine = staticmethod(min)

    @classmethod
    def zero(cls):  # type: ignore
        return cls()

    @classmethod
    def singleton(cls, value: T):  # type: ignore
        return cls(value)

    def merge(self, other):  # type: ignore
        self._check_mergeable(other)
        if self.value is None:
            return other
        if other.value is None:
            return self
        return self.__class__(self._combine(self.value, other.value))

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def _summary(self) -> Dict[str, Any]:
        return {self.namespace: self.value}


@dataclass(frozen=True)
class Min(_OrderedExtremum[T]):
    _combine = staticmethod(min)

    @property
    def namespace(self) -> str:
        return "min"


@dataclass(frozen=True)
class Max(_OrderedExtremum[T]):
    _combine = staticmethod(max)

    @property
    def namespace(self) -> str:
        return "max"


@dataclass(frozen=True, eq=False)
class _FloatExtremum(Accumulator[float]):
    value: float = _NAN

    _combine = staticmethod(nan_min)

    @classmethod
    def zero(cls):  # type: ignore
        return cls()

    @classmethod
    def singleton(cls, value: float):  # type: ignore
        return cls(float(value))

    def merge(self, other):  # type: ignore
        self._check_mergeable(other)
        return self.__class__(self._combine(self.value, other.value))

    @property
    def is_empty(self) -> bool:
        return math.isnan(self.value)

    def _summary(self) -> Dict[str, Any]:
        return {self.namespace: self.value}

    def __eq__(self, other: object) -> bool:
        # two empty accumulators are equal even though nan != nan
        if type(other) is not type(self):
            return NotImplemented
        if self.is_empty and other.is_empty:  # type: ignore
            return True
        return self.value == other.value  # type: ignore

    def __hash__(self) -> int:
        return hash((type(self), None if self.is_empty else self.value))


@dataclass(frozen=True, eq=False)
class MinD(_FloatExtremum):
    _combine = staticmethod(nan_min)

    @property
    def namespace(self) -> str:
        return "min_d"

    @classmethod
    def from_array(cls, arr: "np.ndarray") -> "MinD":
        arr = arr.astype(float)
        if len(arr) == 0 or np.isnan(arr).all():
            return MinD()
        return MinD(float(np.nanmin(arr)))


@dataclass(frozen=True, eq=False)
class MaxD(_FloatExtremum):
    _combine = staticmethod(nan_max)

    @property
    def namespace(self) -> str:
        return "max_d"

    @classmethod
    def from_array(cls, arr: "np.ndarray") -> "MaxD":
        arr = arr.astype(float)
        if len(arr) == 0 or np.isnan(arr).all():
            return MaxD()
        return MaxD(float(np.nanmax(arr)))


register_accumulator([Min, Max, MinD, MaxD])
