import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

try:
    import pandas as _pd
except ImportError:  # noqa
    _pd = None  # type: ignore

try:
    import numpy as _np
except ImportError:  # noqa
    _np = None  # type: ignore
    if _pd is not None:
        logger.error("Pandas is installed but numpy is not. Your environment is probably broken.")


class _StubClass:
    pass


@dataclass(frozen=True)
class NumpyStub:
    ndarray: type = _StubClass
    floating: type = _StubClass
    integer: type = _StubClass


@dataclass(frozen=True)
class PandasStub(object):
    Series: type = _StubClass


def is_not_stub(stubbed_class: Any) -> bool:
    if stubbed_class and stubbed_class is not _StubClass and not isinstance(stubbed_class, (PandasStub, NumpyStub)):
        return True
    return False


if _np is None:
    _np = NumpyStub()

if _pd is None:
    _pd = PandasStub()


np = _np
pd = _pd


def as_array(values: Any) -> Any:
    """Return ``values`` as a one-dimensional numpy array, or None if it is not array-like.

    Only numpy arrays and pandas Series qualify. Plain iterables return None so callers
    fall back to an element-wise fold.
    """
    if is_not_stub(pd.Series) and isinstance(values, pd.Series):
        return values.to_numpy()
    if is_not_stub(np.ndarray) and isinstance(values, np.ndarray):
        return values.ravel()
    return None
