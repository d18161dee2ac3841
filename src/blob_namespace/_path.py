"""DrivePath — immutable, validated path within a mounted drive."""

from __future__ import annotations

import re
from typing import Final

from blob_namespace._authority import resolve_account
from blob_namespace._errors import InvalidPath

# "Azure:" or "Azure:/..." but not "acct.blob.core.windows.net:443/..."
_DRIVE_QUALIFIER = re.compile(r"^(?P<drive>[^/:]+):(?=/|$)")
_URL_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


class DrivePath:
    """An immutable, normalized path within a drive.

    The first segment is the storage authority (``account.blob.core.windows.net[:port]``),
    the second the container, and the remainder the blob name. The account is
    resolved from the authority only when asked for.

    :param raw: The raw path string to normalize and validate.
    :raises InvalidPath: If the path is malformed or unsafe.
    """

    __slots__ = ("_drive", "_parts")
    _drive: Final[str | None]  # type: ignore[misc]
    _parts: Final[tuple[str, ...]]  # type: ignore[misc]

    def __init__(self, raw: str) -> None:
        drive, parts = self._parse(raw)
        object.__setattr__(self, "_drive", drive)
        object.__setattr__(self, "_parts", parts)

    @staticmethod
    def _parse(raw: str) -> tuple[str | None, tuple[str, ...]]:
        if not isinstance(raw, str):
            raise InvalidPath(f"Path must be a string, got {type(raw).__name__}")
        if "\0" in raw:
            raise InvalidPath("Path contains null byte", path=raw)
        p = raw.replace("\\", "/")
        scheme = _URL_SCHEME.match(p)
        if scheme is not None:
            p = p[scheme.end() :]
        drive = None
        m = _DRIVE_QUALIFIER.match(p)
        if m is not None:
            drive = m.group("drive")
            p = p[m.end() :]
        parts: list[str] = []
        for segment in p.split("/"):
            if segment == "" or segment == ".":
                continue
            if segment == "..":
                raise InvalidPath("Path contains '..' segment", path=raw)
            parts.append(segment)
        return drive, tuple(parts)

    @classmethod
    def _from_parts(cls, drive: str | None, parts: tuple[str, ...]) -> DrivePath:
        p = object.__new__(cls)
        object.__setattr__(p, "_drive", drive)
        object.__setattr__(p, "_parts", parts)
        return p

    @property
    def drive(self) -> str | None:
        """Drive qualifier (``"Azure"`` for ``Azure:/...``), or ``None``."""
        return self._drive

    @property
    def parts(self) -> tuple[str, ...]:
        """Tuple of path components, drive qualifier excluded."""
        return self._parts

    @property
    def is_root(self) -> bool:
        return not self._parts

    @property
    def authority(self) -> str | None:
        """The ``host[:port]`` segment, or ``None`` at the drive root."""
        return self._parts[0] if self._parts else None

    @property
    def account(self) -> str | None:
        """Storage account named by the authority, or ``None`` if it names none."""
        return resolve_account(self.authority)

    @property
    def container(self) -> str | None:
        return self._parts[1] if len(self._parts) > 1 else None

    @property
    def blob(self) -> str | None:
        """Blob name below the container (may contain ``/``)."""
        if len(self._parts) < 3:
            return None
        return "/".join(self._parts[2:])

    @property
    def name(self) -> str:
        """Final component of the path, or empty string at the drive root."""
        return self._parts[-1] if self._parts else ""

    @property
    def parent(self) -> DrivePath | None:
        """Parent path, or ``None`` at the drive root."""
        if not self._parts:
            return None
        return self._from_parts(self._drive, self._parts[:-1])

    def __truediv__(self, other: str) -> DrivePath:
        child = DrivePath(other)
        if child.drive is not None:
            raise InvalidPath("Cannot join a drive-qualified path", path=other)
        return self._from_parts(self._drive, self._parts + child.parts)

    def __str__(self) -> str:
        body = "/".join(self._parts)
        if self._drive is None:
            return body
        return f"{self._drive}:/{body}"

    def __repr__(self) -> str:
        return f"DrivePath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DrivePath):
            return self._drive == other._drive and self._parts == other._parts
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._drive, self._parts))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"DrivePath is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"DrivePath is immutable: cannot delete '{name}'")
