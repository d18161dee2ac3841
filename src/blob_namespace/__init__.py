"""Blob-storage accounts as drives of a host shell."""

from blob_namespace._authority import ACCOUNT_FROM_HOST_PORT, BLOB_HOST_SUFFIX, resolve_account
from blob_namespace._config import ProviderConfig
from blob_namespace._drive import DriveDescriptor, DriveScheme, ProposedDrive, make_drive_descriptor
from blob_namespace._errors import BlobNamespaceError, DriveValidationError, InvalidPath
from blob_namespace._host import BlobProviderInfo, Host, ProviderInfo
from blob_namespace._path import DrivePath
from blob_namespace._provider import BlobNamespaceProvider
from blob_namespace._registry import DriveRegistry, build_default_drives
from blob_namespace._startup import OneTimeInitializer, StartupResult, StartupStatus

__version__ = "0.1.0"

__all__ = [
    # Core
    "BlobNamespaceProvider",
    "DriveRegistry",
    "build_default_drives",
    # Accounts & paths
    "resolve_account",
    "ACCOUNT_FROM_HOST_PORT",
    "BLOB_HOST_SUFFIX",
    "DrivePath",
    # Drives
    "DriveDescriptor",
    "DriveScheme",
    "ProposedDrive",
    "make_drive_descriptor",
    # Host
    "Host",
    "ProviderInfo",
    "BlobProviderInfo",
    # Startup
    "OneTimeInitializer",
    "StartupResult",
    "StartupStatus",
    # Config
    "ProviderConfig",
    # Errors
    "BlobNamespaceError",
    "DriveValidationError",
    "InvalidPath",
    # Version
    "__version__",
]
