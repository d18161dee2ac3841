"""Host adapter — the narrow interface this package needs from a host shell."""

from __future__ import annotations

import abc
import dataclasses
import os
from importlib import resources
from typing import TYPE_CHECKING

from blob_namespace._config import ProviderConfig

if TYPE_CHECKING:
    from blob_namespace._errors import BlobNamespaceError

RESOURCE_PACKAGE = "blob_namespace.resources"


@dataclasses.dataclass(frozen=True)
class ProviderInfo:
    """Provider information as supplied by the host.

    :param name: Provider name registered with the host.
    :param module: Module the provider was loaded from, if any.
    :param home: Provider home location, if any.
    """

    name: str
    module: str = ""
    home: str = ""


@dataclasses.dataclass(frozen=True)
class BlobProviderInfo(ProviderInfo):
    """Provider information enriched with this provider's configuration.

    Returned from :meth:`BlobNamespaceProvider.start`; later drive operations
    reach provider-wide state through it.
    """

    config: ProviderConfig = dataclasses.field(default_factory=ProviderConfig)

    @classmethod
    def from_base(cls, base: ProviderInfo, config: ProviderConfig) -> BlobProviderInfo:
        return cls(name=base.name, module=base.module, home=base.home, config=config)

    @property
    def root_scheme(self) -> str:
        return self.config.root_scheme

    @property
    def aliases(self) -> tuple[str, ...]:
        return self.config.aliases


class Host(abc.ABC):
    """Services a host shell provides to the provider.

    Implementations adapt a concrete shell. Only :meth:`invoke_command` and
    :meth:`write_error` are required; :meth:`extract_resource` reads from the
    package's bundled resources by default.
    """

    @abc.abstractmethod
    def invoke_command(self, command: str) -> object:
        """Run a command string in the host shell and return its result."""

    @abc.abstractmethod
    def write_error(self, error: BlobNamespaceError) -> None:
        """Report a non-terminating error to the user without ending the session."""

    def extract_resource(self, name: str, destination: str) -> str:
        """Copy a bundled resource file to ``destination`` and return its path.

        :raises FileNotFoundError: If no resource with this name is bundled.
        :raises OSError: If the destination cannot be written.
        """
        data = resources.files(RESOURCE_PACKAGE).joinpath(name).read_bytes()
        os.makedirs(os.path.dirname(destination) or ".", exist_ok=True)
        with open(destination, "wb") as f:
            f.write(data)
        return destination
