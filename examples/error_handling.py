"""Error handling — rejected drives, bad paths, and a failing startup.

Demonstrates how drive validation errors reach the host without stopping
the other drives, and that a failed startup step never stops the provider.
"""

from __future__ import annotations

from blob_namespace import (
    BlobNamespaceError,
    BlobNamespaceProvider,
    DrivePath,
    DriveValidationError,
    Host,
    InvalidPath,
    ProposedDrive,
    ProviderConfig,
)


class BrokenHost(Host):
    """A host that cannot extract resources and collects errors."""

    def __init__(self) -> None:
        self.errors: list[BlobNamespaceError] = []

    def extract_resource(self, name: str, destination: str) -> str:
        raise PermissionError(f"read-only temp directory: {destination}")

    def invoke_command(self, command: str) -> object:
        return None

    def write_error(self, error: BlobNamespaceError) -> None:
        self.errors.append(error)


if __name__ == "__main__":
    host = BrokenHost()
    provider = BlobNamespaceProvider(ProviderConfig(aliases=("prod",)), host)

    # --- Startup failure is reported, not raised ---
    result = provider.on_provider_load()
    print(f"Startup: {result.status.value} ({result.error!r})")
    provider.start()
    print(f"Default drives still available: {provider.initialize_default_drives().names()}")

    # --- DriveValidationError ---
    try:
        provider.new_drive(ProposedDrive(name="bad:name"))
    except DriveValidationError as exc:
        print(f"\nDriveValidationError: {exc}")
        print(f"  drive={exc.drive}, root={exc.root!r}")

    # --- One bad drive does not stop the others ---
    added = provider.add_drives(["backups", None, ProposedDrive(name="logs", root="../escape")])
    print(f"\nAdded: {[d.name for d in added]}")
    for error in host.errors:
        print(f"  reported to host: {error}")

    # --- InvalidPath ---
    try:
        DrivePath("Azure:/acct.blob.core.windows.net/../other")
    except InvalidPath as exc:
        print(f"\nInvalidPath: {exc}")

    # --- Unresolvable authority is just None ---
    print(f"\nresolve_account('example.com') -> {provider.resolve_account('example.com')}")

    print("\nDone!")
