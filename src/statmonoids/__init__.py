"""
statmonoids is a library of composable, constant-space streaming statistics accumulators.

Each accumulator summarizes a sample (count, mean, variance, extrema, compensated sums) so that:

* folding in one element is O(1) work and O(1) extra space
* summaries of disjoint sub-samples merge into the summary of their concatenation
* merging is associative and commutative, so shards can be folded in parallel and combined
  in any order or tree shape
"""
from .core import (
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
)


def package_version(package: str = __package__) -> str:
    """Calculate version number from the installed distribution metadata"""
    from importlib import metadata

    try:
        version = metadata.version(package)
    except metadata.PackageNotFoundError:  # type: ignore
        version = f"{package} is not installed."

    return version


__version__ = package_version()

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
