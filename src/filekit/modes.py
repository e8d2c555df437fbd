"""Mode string parsing for open(), read() and write().

Mode strings are read letter by letter:

- ``r``: read (the fallback when nothing else is requested)
- ``w``: write, truncating the file
- ``a``: append
- ``b``: binary instead of text

Writing wins over reading, so ``"rw"`` opens for writing. Unknown letters
are ignored unless strict parsing is requested.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MODE_LETTERS", "OpenMode"]

MODE_LETTERS = frozenset("rwab")


def _check_letters(mode: str, allowed: frozenset[str]) -> None:
    unknown = sorted(set(mode) - allowed)
    if unknown:
        raise ValueError(f"Unsupported mode letter(s) {''.join(unknown)!r} in mode {mode!r}")


@dataclass(frozen=True)
class OpenMode:
    """Parsed mode flags.

    Attributes:
        append: Writes go to the end of the file.
        truncate: The file is emptied when opened for writing.
        binary: Data is ``bytes`` rather than ``str``.
    """

    append: bool = False
    truncate: bool = False
    binary: bool = False

    @property
    def writing(self) -> bool:
        """True if the mode opens the file for writing."""
        return self.append or self.truncate

    @property
    def python_mode(self) -> str:
        """Equivalent mode string for the builtin ``open``."""
        if self.append:
            base = "a"
        elif self.truncate:
            base = "w"
        else:
            base = "r"
        return base + ("b" if self.binary else "")

    @classmethod
    def parse(cls, mode: str | None = None, *, strict: bool = False) -> OpenMode:
        """Parse a mode string for ``open()``.

        Args:
            mode: Mode string; ``None`` or ``""`` means text read.
            strict: Reject letters outside ``rwab``.

        Returns:
            The parsed mode.

        Raises:
            ValueError: If ``strict`` and the mode has unknown letters.
        """
        mode = mode or "r"
        if strict:
            _check_letters(mode, MODE_LETTERS)
        append = "a" in mode
        return cls(
            append=append,
            truncate="w" in mode and not append,
            binary="b" in mode,
        )

    @classmethod
    def for_read(cls, mode: str | None = None, *, strict: bool = False) -> OpenMode:
        """Parse a mode string for ``read()``; only ``b`` is significant."""
        mode = mode or "r"
        if strict:
            _check_letters(mode, frozenset("rb"))
        return cls(binary="b" in mode)

    @classmethod
    def for_write(cls, mode: str | None = None, *, strict: bool = False) -> OpenMode:
        """Parse a mode string for ``write()``; truncating unless ``a`` is given."""
        mode = mode or "w"
        if strict:
            _check_letters(mode, frozenset("wab"))
        append = "a" in mode
        return cls(append=append, truncate=not append, binary="b" in mode)
