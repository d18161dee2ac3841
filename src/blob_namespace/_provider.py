"""BlobNamespaceProvider — drive lifecycle as seen by a host shell."""

from __future__ import annotations

import functools
import logging
import os
import tempfile
import threading
from typing import TYPE_CHECKING, ClassVar

from blob_namespace._authority import resolve_account
from blob_namespace._config import ProviderConfig
from blob_namespace._drive import make_drive_descriptor
from blob_namespace._errors import DriveValidationError
from blob_namespace._host import BlobProviderInfo, ProviderInfo
from blob_namespace._registry import build_default_drives
from blob_namespace._startup import OneTimeInitializer, StartupResult, StartupStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from blob_namespace._drive import DriveDescriptor, ProposedDriveLike
    from blob_namespace._host import Host
    from blob_namespace._registry import DriveRegistry

log = logging.getLogger(__name__)

# One initializer per provider class, created on first use.
_STARTUP: dict[type, OneTimeInitializer] = {}
_STARTUP_LOCK = threading.Lock()


def _initializer_for(cls: type) -> OneTimeInitializer:
    with _STARTUP_LOCK:
        initializer = _STARTUP.get(cls)
        if initializer is None:
            initializer = _STARTUP[cls] = OneTimeInitializer()
        return initializer


class BlobNamespaceProvider:
    """Exposes blob-storage accounts as drives of a host shell.

    The host drives the lifecycle: :meth:`on_provider_load` once, then
    :meth:`start`, then :meth:`initialize_default_drives`, and
    :meth:`new_drive` for every drive it is about to mount.

    :param config: Provider configuration. Validated immediately.
    :param host: Host services; without one, startup registration is skipped
        and drive errors are only logged.
    :raises ValueError: If config is invalid.
    """

    FORMAT_DATA_COMMAND: ClassVar[str] = "Update-FormatData -PrependPath '{path}'"

    resolve_account = staticmethod(resolve_account)

    def __init__(self, config: ProviderConfig | None = None, host: Host | None = None) -> None:
        self._config = config or ProviderConfig()
        self._config.validate()
        self._host = host
        self._info: BlobProviderInfo | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root_scheme={self._config.root_scheme!r}, aliases={list(self._config.aliases)!r})"

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def host(self) -> Host | None:
        return self._host

    @property
    def provider_info(self) -> BlobProviderInfo | None:
        """Info returned by :meth:`start`, or ``None`` before the provider started."""
        return self._info

    # region: startup

    def on_provider_load(self) -> StartupResult:
        """Register display formatting with the host, once per provider class.

        Best effort: failures are returned as a ``WARNING`` result and never
        raised. Later calls return the first call's result without repeating
        the work.
        """
        host = self._host
        if host is None:
            return StartupResult(StartupStatus.SKIPPED, detail="no host")
        return _initializer_for(type(self)).run(functools.partial(self._register_format_data, host))

    def _register_format_data(self, host: Host) -> StartupResult:
        resource = self._config.format_resource
        target = os.path.join(tempfile.gettempdir(), resource)
        path = host.extract_resource(resource, target)
        host.invoke_command(self.FORMAT_DATA_COMMAND.format(path=path))
        log.info("Registered format data from %s", path)
        return StartupResult(StartupStatus.SUCCESS, detail=path)

    @classmethod
    def reset_startup(cls) -> None:
        """Allow the one-time startup step to run again for this class."""
        _initializer_for(cls).reset()

    def start(self, base_info: ProviderInfo | None = None) -> BlobProviderInfo:
        """Enrich the host's provider info with this provider's configuration.

        :param base_info: Info supplied by the host. A default is made from
            the root scheme when omitted.
        """
        self.on_provider_load()
        if base_info is None:
            base_info = ProviderInfo(name=self._config.root_scheme)
        if isinstance(base_info, BlobProviderInfo) and base_info.config == self._config:
            info = base_info
        else:
            info = BlobProviderInfo.from_base(base_info, self._config)
        self._info = info
        log.info("Started provider %r with drives %s", info.name, [self._config.root_scheme, *self._config.aliases])
        return info

    # endregion

    # region: drives

    def new_drive(self, proposed: ProposedDriveLike) -> DriveDescriptor:
        """Validate a drive the host is about to mount.

        A drive that already belongs to this provider is returned unchanged.

        :raises DriveValidationError: If the proposal is structurally invalid.
        """
        return make_drive_descriptor(proposed, self._config, self._info)

    def validate_new_drive(self, proposed: ProposedDriveLike) -> DriveDescriptor:
        """Alias of :meth:`new_drive`."""
        return self.new_drive(proposed)

    def initialize_default_drives(self) -> DriveRegistry:
        """The root drive followed by one drive per configured alias, in order."""
        return build_default_drives(self._config, self._info)

    def add_drives(self, proposed_drives: Iterable[ProposedDriveLike]) -> list[DriveDescriptor]:
        """Validate several proposed drives, skipping those that fail.

        Each failure is reported to the host's error channel and affects only
        that drive.
        """
        accepted: list[DriveDescriptor] = []
        for proposed in proposed_drives:
            try:
                accepted.append(self.new_drive(proposed))
            except DriveValidationError as exc:
                if self._host is not None:
                    self._host.write_error(exc)
                else:
                    log.warning("Skipping drive: %s", exc)
        return accepted

    # endregion
