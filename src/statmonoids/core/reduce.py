import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Iterable, List, Optional, Sequence, Type, TypeVar

from statmonoids.core.accumulators.accumulator import Accumulator
from statmonoids.core.stubs import as_array

logger = logging.getLogger(__name__)

ACC = TypeVar("ACC", bound=Accumulator)


def reduce_sample(accumulator_type: Type[ACC], values: Iterable[Any]) -> ACC:
    """
    Fold a finite sample into a new accumulator, starting from the identity.

    numpy arrays and pandas Series go through the type's vectorised ``from_array`` when it
    has one; everything else is folded element by element with ``update``.
    """
    arr = as_array(values)
    if arr is not None:
        from_array = getattr(accumulator_type, "from_array", None)
        if from_array is not None:
            logger.debug("Reducing %s values into %s with from_array", len(arr), accumulator_type.__name__)
            return from_array(arr)
    return accumulator_type.zero().fold(values)


def merge_all(accumulators: Iterable[ACC], zero: Optional[ACC] = None) -> ACC:
    """
    Merge any number of partial accumulators with a balanced pairwise tree.

    ``zero`` is returned for an empty input. Merge is associative and commutative, so the
    tree shape only affects floating point rounding.
    """
    level: List[ACC] = list(accumulators)
    if not level:
        if zero is None:
            raise ValueError("Cannot merge an empty collection of accumulators without a zero")
        return zero
    while len(level) > 1:
        merged = [level[i].merge(level[i + 1]) for i in range(0, len(level) - 1, 2)]
        if len(level) % 2 == 1:
            merged.append(level[-1])
        level = merged
    return level[0]


def reduce_partitions(
    accumulator_type: Type[ACC],
    partitions: Sequence[Iterable[Any]],
    max_workers: Optional[int] = None,
) -> ACC:
    """
    Fold each partition on a thread pool and merge the partial accumulators.

    Accumulators are immutable values, so the partial folds share nothing and need no locks.
    """
    if not partitions:
        return accumulator_type.zero()
    logger.debug("Reducing %s partitions into %s", len(partitions), accumulator_type.__name__)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(reduce_sample, accumulator_type, partition) for partition in partitions]
        partials = [future.result() for future in futures]
    return merge_all(partials, zero=accumulator_type.zero())
