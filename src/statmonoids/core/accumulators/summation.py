from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, TypeVar

from statmonoids.core.accumulators.accumulator import Accumulator, register_accumulator
from statmonoids.core.maths import CompensatedResult, kahan_add, kbn_add

CS = TypeVar("CS", bound="_CompensatedSum")


@dataclass(frozen=True)
class _CompensatedSum(Accumulator[float]):
    """
    Running sum with a correction term for the rounding error of each addition.

    Merging folds the other accumulator's compensated value into this one as a single
    element, so the correction of this side keeps being tracked.
    """

    total: float = 0.0
    correction: float = 0.0

    @classmethod
    def zero(cls):  # type: ignore
        return cls()

    @staticmethod
    @abstractmethod
    def _add(existing: CompensatedResult, new_value: float) -> CompensatedResult:
        raise NotImplementedError

    def update(self: CS, value: float) -> CS:
        res = self._add(CompensatedResult(self.total, self.correction), float(value))
        return self.__class__(res.total, res.correction)

    def merge(self: CS, other: CS) -> CS:
        self._check_mergeable(other)
        return self.update(other.value)

    @property
    def value(self) -> float:
        return self.total + self.correction

    @property
    def sum(self) -> float:
        return self.value

    def _summary(self) -> Dict[str, Any]:
        return {"sum": self.value}


@dataclass(frozen=True)
class KahanSum(_CompensatedSum):
    """Kahan compensated summation."""

    @property
    def namespace(self) -> str:
        return "kahan_sum"

    @staticmethod
    def _add(existing: CompensatedResult, new_value: float) -> CompensatedResult:
        return kahan_add(existing=existing, new_value=new_value)


@dataclass(frozen=True)
class KBNSum(_CompensatedSum):
    """
    Kahan-Babuska-Neumaier summation.

    Unlike plain Kahan summation it stays accurate when an added term is larger in
    magnitude than the running total.
    """

    @property
    def namespace(self) -> str:
        return "kbn_sum"

    @staticmethod
    def _add(existing: CompensatedResult, new_value: float) -> CompensatedResult:
        return kbn_add(existing=existing, new_value=new_value)


register_accumulator([KahanSum, KBNSum])
