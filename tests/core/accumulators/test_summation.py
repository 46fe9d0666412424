import math
import sys
from dataclasses import dataclass

import pytest

from statmonoids.core.accumulators.numeric import Sum
from statmonoids.core.accumulators.summation import KahanSum, KBNSum, _CompensatedSum

_EPS = sys.float_info.epsilon


def _error_bound(data) -> float:
    return 2 * _EPS * math.fsum(abs(x) for x in data)


@pytest.mark.parametrize("acc_type", [KahanSum, KBNSum])
def test_compensated_sum_is_accurate(acc_type, ill_conditioned_sample) -> None:
    exact = math.fsum(ill_conditioned_sample)
    naive = Sum.zero().fold(ill_conditioned_sample).value

    compensated = acc_type.zero().fold(ill_conditioned_sample)

    assert naive == 1.0
    assert abs(compensated.value - exact) <= _error_bound(ill_conditioned_sample)
    assert abs(compensated.value - exact) < abs(naive - exact) / 1000


@pytest.mark.parametrize("acc_type", [KahanSum, KBNSum])
def test_merged_halves_match_single_pass(acc_type, ill_conditioned_sample) -> None:
    half = len(ill_conditioned_sample) // 2
    exact = math.fsum(ill_conditioned_sample)
    single_pass = acc_type.zero().fold(ill_conditioned_sample)

    first = acc_type.zero().fold(ill_conditioned_sample[:half])
    second = acc_type.zero().fold(ill_conditioned_sample[half:])
    merged = first + second

    assert abs(merged.value - exact) <= _error_bound(ill_conditioned_sample)
    assert abs(merged.value - single_pass.value) <= _error_bound(ill_conditioned_sample)


def test_kbn_handles_terms_larger_than_the_running_sum() -> None:
    data = [1.0, 1e100, 1.0, -1e100]

    assert KBNSum.zero().fold(data).value == 2.0
    # plain Kahan loses both small terms here
    assert KahanSum.zero().fold(data).value == 0.0


@pytest.mark.parametrize("acc_type", [KahanSum, KBNSum])
def test_integer_elements_are_widened(acc_type) -> None:
    acc = acc_type.zero().fold([1, 2, 3])

    assert acc.value == 6.0
    assert isinstance(acc.total, float)
    assert acc.sum == acc.value


@pytest.mark.parametrize("acc_type", [KahanSum, KBNSum])
def test_merge_folds_in_reconstructed_value(acc_type) -> None:
    left = acc_type(1.0, 1e-16)
    right = acc_type(2.0, 3e-16)

    assert left + right == left.update(right.value)


def test_compensated_sum_summary() -> None:
    assert KBNSum.zero().fold([0.5, 0.25]).to_summary_dict() == {"sum": 0.75}
    assert KahanSum.zero().to_summary_dict() == {"sum": 0.0}


def test_compensated_sum_requires_an_add_step() -> None:
    @dataclass(frozen=True)
    class NoStep(_CompensatedSum):
        @property
        def namespace(self) -> str:
            return "no_step"

    with pytest.raises(TypeError):
        NoStep()
    with pytest.raises(TypeError):
        _CompensatedSum()  # type: ignore
