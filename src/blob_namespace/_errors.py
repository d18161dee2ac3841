"""Normalized error hierarchy for blob_namespace."""

from __future__ import annotations

from typing import Optional


class BlobNamespaceError(Exception):
    """Base class for all blob_namespace errors.

    Subclasses that carry extra attributes extend :meth:`_context`; both
    ``str()`` and ``repr()`` render whatever it returns.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    :param drive: The drive name involved, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, drive: Optional[str] = None) -> None:
        self.path = path
        self.drive = drive
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""

    def _context(self) -> list[tuple[str, object]]:
        """Named attributes worth showing, in display order; unset ones are left out."""
        return [(k, v) for k, v in (("path", self.path), ("drive", self.drive)) if v is not None]

    def __str__(self) -> str:
        rendered = [f"{k}={v!r}" for k, v in self._context()]
        if self.message:
            rendered.insert(0, self.message)
        return " | ".join(rendered)

    def __repr__(self) -> str:
        args = [repr(self.message), *(f"{k}={v!r}" for k, v in self._context())]
        return f"{type(self).__name__}({', '.join(args)})"


class DriveValidationError(BlobNamespaceError):
    """Raised when a proposed drive is structurally invalid.

    :param root: The rejected root value, as given.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        drive: Optional[str] = None,
        root: object = None,
    ) -> None:
        self.root = root
        super().__init__(message, path=path, drive=drive)

    def _context(self) -> list[tuple[str, object]]:
        context = super()._context()
        if self.root is not None:
            context.append(("root", self.root))
        return context


class InvalidPath(BlobNamespaceError):
    """Raised for malformed or unsafe drive paths."""
