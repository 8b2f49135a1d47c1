"""Format engine: locale data, pattern generation, and rendering.

The core consumes only the FormatEngine protocol. BabelFormatEngine is the
default implementation; ``DEFAULT_ENGINE`` is the shared stateless instance.

Python 3.13+.
"""

from .babel_engine import RENDERABLE_CALENDARS, RENDERABLE_NUMBERING_SYSTEMS, BabelFormatEngine
from .fields import PATTERN_CHAR_FIELDS, DateField
from .generator import get_best_pattern
from .protocol import Calendar, FieldSpan, FormatEngine, Formatter, PatternToken

DEFAULT_ENGINE: FormatEngine = BabelFormatEngine()

__all__ = [
    "DEFAULT_ENGINE",
    "PATTERN_CHAR_FIELDS",
    "RENDERABLE_CALENDARS",
    "RENDERABLE_NUMBERING_SYSTEMS",
    "BabelFormatEngine",
    "Calendar",
    "DateField",
    "FieldSpan",
    "FormatEngine",
    "Formatter",
    "PatternToken",
    "get_best_pattern",
]
