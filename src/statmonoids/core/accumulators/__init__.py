from enum import Enum
from typing import Type

from statmonoids.core.accumulators.accumulator import (
    Accumulator,
    custom_accumulator,
    get_accumulator_type,
    register_accumulator,
)
from statmonoids.core.accumulators.compound import CompoundAccumulator, Pair, compound
from statmonoids.core.accumulators.extrema import Max, MaxD, Min, MinD
from statmonoids.core.accumulators.numeric import Count, Mean, Product, Sum, Variance
from statmonoids.core.accumulators.summation import KahanSum, KBNSum


class StandardAccumulator(Enum):
    count = Count
    sum = Sum
    product = Product
    mean = Mean
    variance = Variance
    min = Min
    max = Max
    min_d = MinD
    max_d = MaxD
    kahan_sum = KahanSum
    kbn_sum = KBNSum

    def __init__(self, clz: Type[Accumulator]):
        self._clz = clz

    @property
    def accumulator_type(self) -> Type[Accumulator]:
        return self._clz

    def zero(self) -> Accumulator:
        return self._clz.zero()


__ALL__ = [
    Accumulator,
    CompoundAccumulator,
    Count,
    KahanSum,
    KBNSum,
    Max,
    MaxD,
    Mean,
    Min,
    MinD,
    Pair,
    Product,
    StandardAccumulator,
    Sum,
    Variance,
    compound,
    custom_accumulator,
    get_accumulator_type,
    register_accumulator,
]
