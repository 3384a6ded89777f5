"""Character code constants used across the package."""

LF = 0x0A
""""Line feed" control character."""

CR = 0x0D
""""Carriage return" control character."""

TAB = 0x09
"""Horizontal tab."""

SPACE = 0x20
"""Space character."""

HASH = 0x23
"""Character ``#``."""

DOT = 0x2E
"""Character ``.``."""

SLASH = 0x2F
"""Character ``/``."""

COLON = 0x3A
"""Character ``:``."""

QUESTION = 0x3F
"""Character ``?``."""

LBRACE = 0x7B
"""Character ``{``."""
