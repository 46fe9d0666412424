from dataclasses import dataclass, field
from typing import List, Optional

# SummaryConfig default values

undefined_value: Optional[float] = None  # what NaN readouts become in summary dicts
disabled_readouts: List[str] = []


@dataclass
class SummaryConfig:
    disabled_readouts: List[str] = field(default_factory=lambda: list(disabled_readouts))
    undefined_value: Optional[float] = field(default_factory=lambda: undefined_value)
