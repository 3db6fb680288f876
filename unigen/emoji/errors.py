"""Fatal errors raised while building the emoji catalog."""

from __future__ import annotations

from typing import Optional, Sequence


class CatalogError(Exception):
    """Base class for catalog build failures. Every one aborts the build."""


class MalformedInput(CatalogError):
    """A structurally invalid input line or a duplicate neutral definition."""

    def __init__(self, message: str, line_no: Optional[int] = None, line: str = ""):
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}"
        if line:
            message = f"{message}: {line!r}"
        super().__init__(message)


class UnresolvedVariant(CatalogError):
    """A tone/gender/role variant whose candidate keys match no entry."""

    def __init__(self, name: str, candidates: Sequence[str], line_no: Optional[int] = None):
        self.name = name
        self.candidates = list(candidates)
        self.line_no = line_no
        tried = ", ".join(repr(c) for c in self.candidates)
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}no entry for variant {name!r} (tried {tried})")
