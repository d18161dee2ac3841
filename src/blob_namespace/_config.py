"""Configuration model — immutable description of a namespace provider."""

from __future__ import annotations

import dataclasses

DEFAULT_ROOT_SCHEME = "Azure"
DEFAULT_DESCRIPTION = "Azure namespace"
DEFAULT_FORMAT_RESOURCE = "Azure.format.ps1xml"

FORBIDDEN_NAME_CHARS = frozenset("\0/\\:")


def forbidden_name_chars(name: str) -> list[str]:
    """Characters in ``name`` that may not appear in a drive name, sorted."""
    return sorted(FORBIDDEN_NAME_CHARS.intersection(name))


@dataclasses.dataclass(frozen=True)
class ProviderConfig:
    """Describes the drives a provider exposes.

    Instances are hashable; ``metadata`` takes part in equality but not in
    the hash.

    :param root_scheme: Name of the canonical root drive (e.g. ``"Azure"``).
    :param aliases: Additional drive names, mounted in this order after the root.
    :param description: Label given to the root drive.
    :param format_resource: Packaged display-format file registered at load time.
    :param metadata: Free-form provider metadata.
    """

    root_scheme: str = DEFAULT_ROOT_SCHEME
    aliases: tuple[str, ...] = ()
    description: str = DEFAULT_DESCRIPTION
    format_resource: str = DEFAULT_FORMAT_RESOURCE
    metadata: dict[str, object] = dataclasses.field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        # Accept any iterable of names but always store an immutable tuple.
        if not isinstance(self.aliases, tuple):
            object.__setattr__(self, "aliases", tuple(self.aliases))

    def validate(self) -> None:
        """Check that drive names are usable and unambiguous.

        Names follow the same rules :func:`make_drive_descriptor` applies to
        drives proposed by the host.

        :raises ValueError: On an empty root scheme, an empty or duplicate
            alias, an alias that shadows the root scheme, or a name holding
            a forbidden character.
        """
        if not isinstance(self.root_scheme, str) or not self.root_scheme.strip():
            raise ValueError("root_scheme must be a non-empty string")
        bad = forbidden_name_chars(self.root_scheme)
        if bad:
            raise ValueError(f"root_scheme '{self.root_scheme}' contains forbidden characters {bad!r}")
        seen = {self.root_scheme.casefold()}
        for alias in self.aliases:
            if not isinstance(alias, str) or not alias.strip():
                raise ValueError(f"Alias names must be non-empty strings, got {alias!r}")
            bad = forbidden_name_chars(alias)
            if bad:
                raise ValueError(f"Alias {alias!r} contains forbidden characters {bad!r}")
            key = alias.casefold()
            if key in seen:
                raise ValueError(
                    f"Alias '{alias}' duplicates another drive name. "
                    f"Drive names: {[self.root_scheme, *self.aliases]}"
                )
            seen.add(key)

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> ProviderConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        Missing keys fall back to the defaults.

        :param data: Dict with optional ``root_scheme``, ``aliases``,
            ``description``, ``format_resource`` and ``metadata`` keys.
        """
        raw_aliases = data.get("aliases", ())
        raw_metadata = data.get("metadata", {})
        if isinstance(raw_aliases, str) or not isinstance(raw_aliases, (list, tuple)):
            msg = "Expected 'aliases' to be a list of names"
            raise TypeError(msg)
        if not isinstance(raw_metadata, dict):
            msg = "Expected 'metadata' to be a dict"
            raise TypeError(msg)

        return cls(
            root_scheme=str(data.get("root_scheme", DEFAULT_ROOT_SCHEME)),
            aliases=tuple(str(a) for a in raw_aliases),
            description=str(data.get("description", DEFAULT_DESCRIPTION)),
            format_resource=str(data.get("format_resource", DEFAULT_FORMAT_RESOURCE)),
            metadata=dict(raw_metadata),
        )
