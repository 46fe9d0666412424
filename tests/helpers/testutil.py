import math
from typing import Any, Dict


def _same_value(lhs: Any, rhs: Any, rel_tol: float, abs_tol: float) -> bool:
    if isinstance(lhs, float) or isinstance(rhs, float):
        if lhs is None or rhs is None:
            return lhs is rhs
        if math.isnan(lhs) and math.isnan(rhs):
            return True
        return math.isclose(lhs, rhs, rel_tol=rel_tol, abs_tol=abs_tol)
    return lhs == rhs


def compare_summaries(lhs: Dict[str, Any], rhs: Dict[str, Any], rel_tol: float = 1e-9, abs_tol: float = 1e-12):
    assert lhs.keys() == rhs.keys()
    for key in lhs:
        assert _same_value(lhs[key], rhs[key], rel_tol, abs_tol), f"{key}: {lhs[key]} != {rhs[key]}"


def assert_equivalent(lhs, rhs, rel_tol: float = 1e-9, abs_tol: float = 1e-12):
    """Accumulators are equivalent when they report the same readouts within tolerance."""
    assert type(lhs) is type(rhs)
    compare_summaries(lhs.to_summary_dict(), rhs.to_summary_dict(), rel_tol=rel_tol, abs_tol=abs_tol)
