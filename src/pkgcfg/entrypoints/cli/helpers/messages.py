"""Terminal message helpers for the PKGCFG CLI.

Status lines go to stderr so stdout carries only command results (package
names, URIs, fetched bytes) and stays pipeable. Each line starts with a glyph
that falls back to ASCII when stderr cannot encode the emoji.
"""

import click

SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
CAUTION_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on the current stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(choices: tuple[str, str]) -> str:
    """Pick the emoji from an ``(emoji, fallback)`` pair if stderr can encode it."""
    emoji, fallback = choices
    return emoji if _supports_character(emoji) else fallback


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr, e.g. ``✅  foo is valid``."""
    click.secho(f"{glyph(SUCCESS_GLYPHS)}  {msg}", fg="green", bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph(CAUTION_GLYPHS)}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph(ERROR_GLYPHS)}  {msg}", fg="red", bold=True, err=True)
