"""Centralized module for core math logic.

These utility functions can be hard to reason about so it's important to keep them as
centralized as possible and close to the textbook pseudo code.
"""
import math
from collections import namedtuple

MeanResult = namedtuple("MeanResult", "n mean")
VarianceSumsResult = namedtuple("VarianceSumsResult", "n total m2")
CompensatedResult = namedtuple("CompensatedResult", "total correction")


def welford_mean_update(*, existing: MeanResult, new_value: float) -> MeanResult:
    (n, mean) = existing

    n += 1
    mean += (new_value - mean) / n
    return MeanResult(n=n, mean=mean)


def weighted_mean_merge(*, first: MeanResult, second: MeanResult) -> MeanResult:
    (n_a, mean_a) = first
    (n_b, mean_b) = second
    n = n_a + n_b
    if n == 0:
        return MeanResult(n=0, mean=0.0)
    mean = (mean_a * n_a + mean_b * n_b) / n
    return MeanResult(n=n, mean=mean)


def parallel_variance_sums(*, first: VarianceSumsResult, second: VarianceSumsResult) -> VarianceSumsResult:
    """
    Pairwise update of (count, sum, sum of squared deviations).

    Source: Chan, Golub, LeVeque (1979), "Updating Formulae and a Pairwise Algorithm for
    Computing Sample Variances", STAN-CS-79-773, page 4.

    Args:
        first: the :class:VarianceSumsResult object for the first stream
        second: the :class:VarianceSumsResult object for the second stream

    Returns:
        The sums of the concatenated stream.

    """
    (n_a, t_a, m2_a) = first
    (n_b, t_b, m2_b) = second
    n = n_a + n_b
    total = t_a + t_b
    if n_a == 0 or n_b == 0:
        # the empty side has m2 == 0
        m2 = m2_a + m2_b
    else:
        m2 = m2_a + m2_b + (t_a * n_b - t_b * n_a) ** 2 / (n_a * n_b * n)
    return VarianceSumsResult(n=n, total=total, m2=m2)


def kahan_add(*, existing: CompensatedResult, new_value: float) -> CompensatedResult:
    """
    Kahan compensated summation step.

    Source: https://en.wikipedia.org/wiki/Kahan_summation_algorithm

    The correction holds the low-order bits still owed to the total, so the compensated
    value is ``total + correction``.
    """
    (total, correction) = existing

    y = new_value + correction
    t = total + y
    correction = y - (t - total)
    return CompensatedResult(total=t, correction=correction)


def kbn_add(*, existing: CompensatedResult, new_value: float) -> CompensatedResult:
    """
    Neumaier (Kahan-Babuska) compensated summation step.

    Source: https://en.wikipedia.org/wiki/Kahan_summation_algorithm#Further_enhancements
    """
    (total, correction) = existing

    t = total + new_value
    if abs(total) >= abs(new_value):
        correction += (total - t) + new_value
    else:
        correction += (new_value - t) + total
    return CompensatedResult(total=t, correction=correction)


# N.B. any comparison against NaN is False, so NaN must be checked before min/max


def nan_min(lhs: float, rhs: float) -> float:
    if math.isnan(lhs):
        return rhs
    if math.isnan(rhs):
        return lhs
    return min(lhs, rhs)


def nan_max(lhs: float, rhs: float) -> float:
    if math.isnan(lhs):
        return rhs
    if math.isnan(rhs):
        return lhs
    return max(lhs, rhs)
