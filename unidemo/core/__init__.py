"""Core modules for the Unicode string demo."""

from .normalization import combining_marks, compose, decompose, renders_same  # noqa: F401
from .report import build_lines  # noqa: F401
from .samples import DemoSamples  # noqa: F401
from .trace import TraceLogger  # noqa: F401
from .utf16 import (  # noqa: F401
    Utf16Text,
    from_surrogate_pair,
    is_high_surrogate,
    is_low_surrogate,
    is_surrogate,
    to_surrogate_pair,
)
