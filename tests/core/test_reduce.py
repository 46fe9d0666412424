import random

import numpy as np
import pytest
from testutil import assert_equivalent

from statmonoids.core.accumulators import Count, KahanSum, MaxD, Mean, Variance, compound
from statmonoids.core.reduce import merge_all, reduce_partitions, reduce_sample


@pytest.mark.parametrize("acc_type", [Count, Mean, Variance, MaxD, KahanSum, compound(Count, Mean, Variance, MaxD)])
def test_reduce_sample_of_list_and_array_agree(acc_type, gaussian_sample) -> None:
    from_list = reduce_sample(acc_type, gaussian_sample)
    from_array = reduce_sample(acc_type, np.array(gaussian_sample))

    assert_equivalent(from_list, acc_type.zero().fold(gaussian_sample))
    assert_equivalent(from_array, from_list)


def test_reduce_sample_of_generator() -> None:
    mean = reduce_sample(Mean, (float(i) for i in range(1, 5)))

    assert mean.mean == 2.5


def test_reduce_sample_of_series(gaussian_sample) -> None:
    pd = pytest.importorskip("pandas")
    series = pd.Series(gaussian_sample)

    variance = reduce_sample(Variance, series)

    assert variance.variance_unbiased == pytest.approx(series.var(), rel=1e-9)
    assert reduce_sample(Mean, series).mean == pytest.approx(series.mean(), rel=1e-12)


def test_reduce_empty_sample() -> None:
    assert reduce_sample(Variance, []) == Variance.zero()
    assert reduce_sample(Variance, np.array([])) == Variance.zero()


def test_merge_all_tree_matches_chain(variance_sample) -> None:
    partials = [Variance.singleton(x) for x in variance_sample]

    merged = merge_all(partials)

    assert merged.n == 8
    assert merged.variance == pytest.approx(4.0)
    assert merge_all([Count(1), Count(2), Count(3)]) == Count(6)


def test_merge_all_empty() -> None:
    assert merge_all([], zero=Mean.zero()) == Mean.zero()
    with pytest.raises(ValueError):
        merge_all([])


@pytest.mark.parametrize("max_workers", [None, 1, 4])
def test_reduce_partitions(max_workers, gaussian_sample) -> None:
    rng = random.Random(7)
    partitions = [[] for _ in range(9)]
    for value in gaussian_sample:
        partitions[rng.randrange(len(partitions))].append(value)

    Stats = compound(Count, Mean, Variance, MaxD)
    result = reduce_partitions(Stats, partitions, max_workers=max_workers)

    assert_equivalent(result, Stats.zero().fold(gaussian_sample))


def test_reduce_partitions_of_arrays(gaussian_sample) -> None:
    arr = np.array(gaussian_sample)

    result = reduce_partitions(Variance, np.array_split(arr, 5))

    assert_equivalent(result, Variance.zero().fold(gaussian_sample))


def test_reduce_no_partitions() -> None:
    assert reduce_partitions(KahanSum, []) == KahanSum.zero()
