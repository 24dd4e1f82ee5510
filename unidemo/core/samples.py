"""Literal strings shown by the demo."""

from dataclasses import dataclass

# s is NFC, t is NFD
PRECOMPOSED = "t\u00e9st"
DECOMPOSED = "te\u0301st"
GRINNING_FACE = "\U0001F600"


@dataclass(frozen=True)
class DemoSamples:
    """Three strings that look simple but are stored differently."""

    s: str = PRECOMPOSED
    t: str = DECOMPOSED
    e: str = GRINNING_FACE
