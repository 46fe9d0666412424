import dataclasses
import logging
import math
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, List, Optional, Tuple, Type, TypeVar, Union

from statmonoids.core.configs import SummaryConfig
from statmonoids.core.errors import DeserializationError, UnsupportedError

logger = logging.getLogger(__name__)

T = TypeVar("T")
ACC = TypeVar("ACC", bound="Accumulator")

_ACCUMULATOR_REGISTRY: Dict[str, Type["Accumulator"]] = {}


class Accumulator(ABC, Generic[T]):
    """
    An accumulator is an immutable summary of a sample that can be built one element at a
    time and merged with the summary of another, disjoint sample.

    The identity (``zero()``) and ``merge`` form a commutative monoid. ``update`` is a single
    step of a fold over the sample, and ``singleton`` builds the summary of a one-element
    sample. The following must hold, with floating point equality understood as approximate:

        1. ``A.zero().update(x) == A.singleton(x)``
        2. ``A.singleton(x) + A.singleton(y) == A.zero().update(x).update(y)``
        3. ``a + b == b + a``
        4. ``A.zero() + a == a == a + A.zero()``

    A subclass must override at least one of ``update`` and ``singleton``. The default of each
    is derived from the other: ``update`` merges in a singleton built from the new element,
    ``singleton`` updates the identity.
    """

    @classmethod
    def get_namespace(cls) -> str:
        return cls.zero().namespace

    @property
    @abstractmethod
    def namespace(self) -> str:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def zero(cls: Type[ACC]) -> ACC:
        """The accumulator of the empty sample."""
        raise NotImplementedError

    @abstractmethod
    def merge(self: ACC, other: ACC) -> ACC:
        """The accumulator of the concatenation of both samples."""
        raise NotImplementedError

    def __add__(self: ACC, other: ACC) -> ACC:
        return self.merge(other)

    def update(self: ACC, value: T) -> ACC:
        if type(self).singleton.__func__ is Accumulator.singleton.__func__:  # type: ignore
            raise TypeError(f"{type(self).__name__} must override update() or singleton()")
        return self.merge(type(self).singleton(value))

    @classmethod
    def singleton(cls: Type[ACC], value: T) -> ACC:
        if cls.update is Accumulator.update:
            raise TypeError(f"{cls.__name__} must override update() or singleton()")
        return cls.zero().update(value)

    def fold(self: ACC, values: Iterable[T]) -> ACC:
        acc = self
        for value in values:
            acc = acc.update(value)
        return acc

    def _check_mergeable(self, other: Any) -> None:
        if type(other) is not type(self):
            raise UnsupportedError(f"Cannot merge {type(self).__name__} with {type(other).__name__}")

    @abstractmethod
    def _summary(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_summary_dict(self, cfg: Optional[SummaryConfig] = None) -> Dict[str, Any]:
        cfg = cfg or SummaryConfig()
        summary = {}
        for key, value in self._summary().items():
            if key in cfg.disabled_readouts:
                continue
            if value is None or (isinstance(value, float) and math.isnan(value)):
                value = cfg.undefined_value
            summary[key] = value
        return summary

    def to_tuple(self) -> Tuple[Any, ...]:
        """The fixed-width flat fields of this accumulator, in declaration order."""
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))  # type: ignore

    @classmethod
    def field_count(cls) -> int:
        return len(dataclasses.fields(cls))  # type: ignore

    @classmethod
    def from_tuple(cls: Type[ACC], values: Tuple[Any, ...]) -> ACC:
        if not dataclasses.is_dataclass(cls):
            raise ValueError(f"Accumulator class: {cls} is not a dataclass")
        expected = cls.field_count()
        if len(values) != expected:
            raise DeserializationError(f"{cls.__name__} expects {expected} fields but got {len(values)}")
        return cls(*values)  # type: ignore


def register_accumulator(accumulators: Union[Type[ACC], List[Type[ACC]]]) -> None:
    if not isinstance(accumulators, list):
        accumulators = [accumulators]

    for accumulator in accumulators:
        namespace = accumulator.get_namespace()
        existing = _ACCUMULATOR_REGISTRY.get(namespace)
        if existing is not None and existing is not accumulator:
            logger.warning("Replacing accumulator %s registered as %s with %s", existing, namespace, accumulator)
        _ACCUMULATOR_REGISTRY[namespace] = accumulator


def custom_accumulator(accumulator: Type[ACC]) -> Type[ACC]:
    register_accumulator(accumulator)
    return accumulator


def get_accumulator_type(namespace: str) -> Type[Accumulator]:
    accumulator = _ACCUMULATOR_REGISTRY.get(namespace)
    if accumulator is None:
        raise UnsupportedError(f"Unsupported accumulator: {namespace}")
    return accumulator
