"""Build the lines printed by the string weirdness demo."""

from typing import List, Optional

from .samples import DemoSamples
from .trace import TraceLogger
from .utf16 import Utf16Text


def describe_accented(name: str, text: str) -> List[str]:
    """Lines for a string whose second unit may or may not carry the accent."""
    units = Utf16Text.from_str(text)
    return [
        f'{name} = "{text}"',
        f"{name}'s length is {len(units)}",
        f"character 1 of {name} is {units.char_at(1)}",
        "",
    ]


def describe_supplementary(name: str, text: str) -> List[str]:
    """Lines for a string that starts with a code point above U+FFFF."""
    units = Utf16Text.from_str(text)
    return [
        f'{name} = "{text}"',
        f"{name}'s length is {len(units)}",
        f"character 0 of {name} is U+{units.unit_at(0):04X}",
        f"character 1 of {name} is U+{units.unit_at(1):04X}",
        f"codepoint 0 of {name} is U+{units.code_point_at(0):06X}",
    ]


def build_lines(
    samples: Optional[DemoSamples] = None,
    trace: Optional[TraceLogger] = None,
) -> List[str]:
    """Return the demo output, one entry per printed line."""
    samples = samples or DemoSamples()
    trace = trace or TraceLogger()

    lines: List[str] = []
    trace.log("precomposed sample")
    lines.extend(describe_accented("s", samples.s))
    trace.log("decomposed sample")
    lines.extend(describe_accented("t", samples.t))
    trace.log("supplementary sample")
    lines.extend(describe_supplementary("e", samples.e))
    trace.log(f"built {len(lines)} lines")
    return lines
