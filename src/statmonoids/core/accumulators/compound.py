import copyreg
import logging
from abc import ABCMeta
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterator, Tuple, Type, TypeVar, Union

from statmonoids.core.accumulators.accumulator import Accumulator, get_accumulator_type
from statmonoids.core.errors import DeserializationError
from statmonoids.core.stubs import np

logger = logging.getLogger(__name__)

COMPOUND = TypeVar("COMPOUND", bound="CompoundAccumulator")

_COMPOUND_TYPES: Dict[Tuple[type, Tuple[Type[Accumulator], ...]], type] = {}


class _CompoundMeta(ABCMeta):
    """Metaclass of compound accumulators. Classes built by compound() pickle by their component types."""


@dataclass(frozen=True)
class CompoundAccumulator(Accumulator[Any], metaclass=_CompoundMeta):
    """
    Product of several accumulators fed from the same stream in a single pass.

    Every element is folded into each component independently, merges are done component
    by component and the identity is the tuple of the component identities. The components
    never see each other, so the laws of the compound follow from the laws of each component.

    Use ``compound(Count, Mean, Variance, MaxD)`` to get a concrete class with fixed
    component types, which is what ``zero()`` and ``singleton()`` need:

        >>> Stats = compound(Count, Mean, Variance, MaxD)
        >>> stats = Stats.zero().fold([1.0, 2.0, 3.0])
        >>> count, mean, variance, maximum = stats

    Summary keys are prefixed with ``"<index>:<namespace>/"``.
    """

    components: Tuple[Accumulator, ...] = ()

    component_types: ClassVar[Tuple[Type[Accumulator], ...]] = ()

    def __post_init__(self) -> None:
        components = tuple(self.components)
        for component in components:
            if not isinstance(component, Accumulator):
                raise ValueError(f"Compound components must be accumulators, got {type(component).__name__}")
        expected = self.component_types
        if expected and tuple(type(c) for c in components) != expected:
            raise ValueError(
                f"{type(self).__name__} expects components of types {[t.__name__ for t in expected]}, "
                f"got {[type(c).__name__ for c in components]}"
            )
        object.__setattr__(self, "components", components)

    @property
    def namespace(self) -> str:
        return "compound"

    @classmethod
    def zero(cls: Type[COMPOUND]) -> COMPOUND:
        if not cls.component_types:
            raise TypeError(f"{cls.__name__} has no component types; build the class with compound()")
        return cls(tuple(t.zero() for t in cls.component_types))

    @classmethod
    def singleton(cls: Type[COMPOUND], value: Any) -> COMPOUND:
        if not cls.component_types:
            raise TypeError(f"{cls.__name__} has no component types; build the class with compound()")
        return cls(tuple(t.singleton(value) for t in cls.component_types))

    @classmethod
    def from_components(cls: Type[COMPOUND], *accumulators: Accumulator) -> COMPOUND:
        return _compound_class(cls, tuple(type(a) for a in accumulators))(accumulators)

    def update(self: COMPOUND, value: Any) -> COMPOUND:
        return self.__class__(tuple(c.update(value) for c in self.components))

    def merge(self: COMPOUND, other: COMPOUND) -> COMPOUND:
        self._check_mergeable(other)
        if [type(c) for c in self.components] != [type(c) for c in other.components]:
            raise ValueError("Attempt to merge incompatible CompoundAccumulators")
        return self.__class__(tuple(a.merge(b) for a, b in zip(self.components, other.components)))

    @classmethod
    def from_array(cls: Type[COMPOUND], arr: "np.ndarray") -> COMPOUND:
        components = []
        for component_type in cls.component_types:
            from_array = getattr(component_type, "from_array", None)
            if from_array is not None:
                components.append(from_array(arr))
            else:
                components.append(component_type.zero().fold(arr))
        return cls(tuple(components))

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Accumulator]:
        return iter(self.components)

    def __getitem__(self, index: int) -> Accumulator:
        return self.components[index]

    def __reduce__(self) -> Tuple[Any, ...]:
        return self.__class__, (self.components,)

    def _summary(self) -> Dict[str, Any]:
        summary = {}
        for index, component in enumerate(self.components):
            for key, value in component._summary().items():
                summary[f"{index}:{component.namespace}/{key}"] = value
        return summary

    def to_tuple(self) -> Tuple[Any, ...]:
        fields: Tuple[Any, ...] = ()
        for component in self.components:
            fields += component.to_tuple()
        return fields

    @classmethod
    def field_count(cls) -> int:
        return sum(t.field_count() for t in cls.component_types)

    @classmethod
    def from_tuple(cls: Type[COMPOUND], values: Tuple[Any, ...]) -> COMPOUND:
        expected = cls.field_count()
        if not cls.component_types or len(values) != expected:
            raise DeserializationError(f"{cls.__name__} expects {expected} fields but got {len(values)}")
        components = []
        offset = 0
        for component_type in cls.component_types:
            width = component_type.field_count()
            components.append(component_type.from_tuple(tuple(values[offset : offset + width])))
            offset += width
        return cls(tuple(components))


@dataclass(frozen=True)
class Pair(CompoundAccumulator):
    """Two accumulators over the same stream. ``Pair.of(Count, Mean)`` builds a concrete class."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.components) != 2:
            raise ValueError(f"Pair needs exactly two components, got {len(self.components)}")

    @property
    def namespace(self) -> str:
        return "pair"

    @classmethod
    def of(cls, first: Union[str, Type[Accumulator]], second: Union[str, Type[Accumulator]]) -> Type["Pair"]:
        return _compound_class(cls, (_resolve(first), _resolve(second)))

    @property
    def first(self) -> Accumulator:
        return self.components[0]

    @property
    def second(self) -> Accumulator:
        return self.components[1]


def _resolve(accumulator_type: Union[str, Type[Accumulator]]) -> Type[Accumulator]:
    if isinstance(accumulator_type, str):
        return get_accumulator_type(accumulator_type)
    if not (isinstance(accumulator_type, type) and issubclass(accumulator_type, Accumulator)):
        raise ValueError(f"Expected an accumulator type or namespace, got {accumulator_type!r}")
    return accumulator_type


def _compound_class(base: type, types: Tuple[Type[Accumulator], ...]) -> type:
    key = (base, types)
    clazz = _COMPOUND_TYPES.get(key)
    if clazz is None:
        name = f"{base.__name__}[{', '.join(t.__name__ for t in types)}]"
        logger.debug("Creating compound accumulator class %s", name)
        clazz = type(
            name,
            (base,),
            {"component_types": types, "_compound_key": key, "__module__": base.__module__},
        )
        _COMPOUND_TYPES[key] = clazz
    return clazz


def compound(*accumulator_types: Union[str, Type[Accumulator]]) -> Type[CompoundAccumulator]:
    """Concrete compound class over the given accumulator types or registered namespaces."""
    if not accumulator_types:
        raise ValueError("compound() needs at least one accumulator type")
    return _compound_class(CompoundAccumulator, tuple(_resolve(t) for t in accumulator_types))


def _reduce_compound_class(clazz: type) -> Any:
    key = clazz.__dict__.get("_compound_key")
    if key is None:
        # defined in a module, pickled by reference
        return clazz.__qualname__
    return _compound_class, key


copyreg.pickle(_CompoundMeta, _reduce_compound_class)
