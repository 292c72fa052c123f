"""Terminal message helpers for the Enlist CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr by default so stdout can remain machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    if _supports_character(emoji):
        return emoji
    return fallback


def caution_glyph() -> str:
    """Warning marker: "⚠️" when the stream supports it, otherwise "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker: "✅" when the stream supports it, otherwise "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    """Error marker: "❌" when the stream supports it, otherwise "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Note:
        Warnings go to **stderr** so they won't interfere with data piped from
        stdout (e.g., when using ``--json``).
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
