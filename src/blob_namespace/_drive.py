"""Drive descriptors and validation of proposed drives."""

from __future__ import annotations

import dataclasses
import enum
import logging
from typing import TYPE_CHECKING, Union

from blob_namespace._config import forbidden_name_chars
from blob_namespace._errors import DriveValidationError, InvalidPath
from blob_namespace._path import DrivePath

if TYPE_CHECKING:
    from blob_namespace._config import ProviderConfig
    from blob_namespace._host import ProviderInfo

log = logging.getLogger(__name__)


class DriveScheme(enum.Enum):
    """How a drive relates to the provider's namespace."""

    ROOT_SCHEME = "root_scheme"
    ALIAS = "alias"


@dataclasses.dataclass(frozen=True)
class ProposedDrive:
    """A drive as the host proposes it, before the provider has seen it.

    :param name: Drive name the user will type (``Azure`` in ``Azure:``).
    :param root: Root the drive maps to; the name is used when empty.
    :param description: Free-form description.
    :param provider: Provider info the host attached to the drive, if any.
    """

    name: str
    root: str = ""
    description: str = ""
    provider: ProviderInfo | None = None


@dataclasses.dataclass(frozen=True)
class DriveDescriptor:
    """A drive owned by this provider.

    Equality compares content only, so descriptors built by separate calls
    compare equal while remaining distinct objects.

    :param name: Drive name.
    :param root: Root scheme or alias the drive is mounted on.
    :param scheme: Whether this is the canonical root drive or an alias.
    :param description: Human-readable label.
    :param account_hint: Account bound to the drive, if any. Normally ``None``;
        accounts are resolved from paths when they are used.
    :param provider: Provider info the drive belongs to.
    """

    name: str
    root: str
    scheme: DriveScheme
    description: str = ""
    account_hint: str | None = None
    provider: ProviderInfo | None = dataclasses.field(default=None, compare=False, repr=False)

    @property
    def is_root(self) -> bool:
        return self.scheme is DriveScheme.ROOT_SCHEME

    def resolve_account(self, path: str | DrivePath) -> str | None:
        """Resolve the storage account addressed by a path on this drive.

        Falls back to :attr:`account_hint` when the path names no account.

        :raises InvalidPath: If ``path`` is malformed.
        """
        drive_path = path if isinstance(path, DrivePath) else DrivePath(path)
        account = drive_path.account
        if account is None:
            return self.account_hint
        return account


ProposedDriveLike = Union[DriveDescriptor, ProposedDrive, str, None]


def _check_name(name: object, *, root: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise DriveValidationError("Drive name must be a non-empty string", root=root)
    bad = forbidden_name_chars(name)
    if bad:
        raise DriveValidationError(f"Drive name contains forbidden characters {bad!r}", drive=name, root=root)
    return name


def _check_root(root: object, *, name: str) -> str:
    if not isinstance(root, str) or not root.strip():
        raise DriveValidationError("Drive root must be a non-empty string", drive=name, root=root)
    try:
        DrivePath(root)
    except InvalidPath as exc:
        raise DriveValidationError(f"Drive root is not a valid path: {exc}", drive=name, root=root) from exc
    return root


def make_drive_descriptor(
    proposed: ProposedDriveLike,
    config: ProviderConfig,
    provider_info: ProviderInfo | None = None,
) -> DriveDescriptor:
    """Turn a proposed drive into this provider's :class:`DriveDescriptor`.

    A proposed drive that already is a descriptor is returned unchanged.
    Nothing is resolved eagerly and no default root is ever substituted.

    :param proposed: A descriptor, a :class:`ProposedDrive`, or a bare drive name.
    :param config: Provider configuration; decides root scheme vs alias.
    :param provider_info: Provider info to attach when the proposal has none.
    :raises DriveValidationError: If the proposal is structurally invalid.
    """
    if isinstance(proposed, DriveDescriptor):
        return proposed

    if proposed is None:
        raise DriveValidationError("No drive was proposed")
    if isinstance(proposed, str):
        proposed = ProposedDrive(name=proposed)
    elif not isinstance(proposed, ProposedDrive):
        raise DriveValidationError(
            f"Cannot create a drive from {type(proposed).__name__}",
            root=proposed,
        )

    name = _check_name(proposed.name, root=proposed.root)
    root = _check_root(proposed.root or name, name=name)

    scheme = DriveScheme.ROOT_SCHEME if root.casefold() == config.root_scheme.casefold() else DriveScheme.ALIAS
    descriptor = DriveDescriptor(
        name=name,
        root=root,
        scheme=scheme,
        description=proposed.description,
        provider=proposed.provider or provider_info,
    )
    log.debug("Created %s drive %r (root=%r)", scheme.value, name, root)
    return descriptor
