from statmonoids.core.accessors import (
    calc_count,
    calc_mean,
    calc_stddev,
    calc_stddev_unbiased,
    calc_variance,
    calc_variance_unbiased,
)
from statmonoids.core.accumulators import (
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
)
from statmonoids.core.configs import SummaryConfig
from statmonoids.core.reduce import merge_all, reduce_partitions, reduce_sample

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
    SummaryConfig,
    Variance,
    calc_count,
    calc_mean,
    calc_stddev,
    calc_stddev_unbiased,
    calc_variance,
    calc_variance_unbiased,
    compound,
    merge_all,
    reduce_partitions,
    reduce_sample,
]
