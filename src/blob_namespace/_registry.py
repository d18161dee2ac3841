"""DriveRegistry — the ordered set of drives a provider offers to its host."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, overload

from blob_namespace._drive import DriveDescriptor, DriveScheme

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from blob_namespace._config import ProviderConfig
    from blob_namespace._host import ProviderInfo

log = logging.getLogger(__name__)


class DriveRegistry(Sequence[DriveDescriptor]):
    """Immutable, ordered sequence of drives.

    The host mounts drives in sequence order, so the root drive comes first
    and aliases follow in their configured order.

    :param drives: Drives in mount order.
    """

    __slots__ = ("_drives",)
    _drives: tuple[DriveDescriptor, ...]

    def __init__(self, drives: Iterable[DriveDescriptor] = ()) -> None:
        object.__setattr__(self, "_drives", tuple(drives))

    @overload
    def __getitem__(self, index: int) -> DriveDescriptor: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[DriveDescriptor, ...]: ...

    def __getitem__(self, index: int | slice) -> DriveDescriptor | tuple[DriveDescriptor, ...]:
        return self._drives[index]

    def __len__(self) -> int:
        return len(self._drives)

    def __iter__(self) -> Iterator[DriveDescriptor]:
        return iter(self._drives)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return self.get(item) is not None
        return item in self._drives

    def names(self) -> list[str]:
        """Drive names in mount order."""
        return [d.name for d in self._drives]

    def get(self, name: str) -> DriveDescriptor | None:
        """Look up a drive by name, ignoring case as the host shell does."""
        key = name.casefold()
        for drive in self._drives:
            if drive.name.casefold() == key:
                return drive
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DriveRegistry):
            return self._drives == other._drives
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._drives)

    def __repr__(self) -> str:
        return f"DriveRegistry(drives={self.names()!r})"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("DriveRegistry is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("DriveRegistry is immutable")


def root_drive(config: ProviderConfig, provider_info: ProviderInfo | None = None) -> DriveDescriptor:
    """The canonical drive for the provider's root scheme."""
    return DriveDescriptor(
        name=config.root_scheme,
        root=config.root_scheme,
        scheme=DriveScheme.ROOT_SCHEME,
        description=config.description,
        provider=provider_info,
    )


def alias_drive(alias: str, provider_info: ProviderInfo | None = None) -> DriveDescriptor:
    return DriveDescriptor(name=alias, root=alias, scheme=DriveScheme.ALIAS, provider=provider_info)


def build_default_drives(config: ProviderConfig, provider_info: ProviderInfo | None = None) -> DriveRegistry:
    """Build the drives mounted when the provider starts.

    A new registry with new descriptors is built on every call; nothing is
    cached between calls.

    :param config: Supplies the root scheme and the ordered alias list.
    :param provider_info: Attached to every descriptor.
    """
    drives = [root_drive(config, provider_info)]
    drives.extend(alias_drive(alias, provider_info) for alias in config.aliases)
    log.debug("Default drives for %r: %s", config.root_scheme, [d.name for d in drives])
    return DriveRegistry(drives)
