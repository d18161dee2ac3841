"""Quickstart — start a provider and list its default drives.

Demonstrates:
- Creating a ProviderConfig with two alias drives
- Running the provider lifecycle the way a host shell would
- Resolving the storage account behind a path
"""

from __future__ import annotations

from blob_namespace import BlobNamespaceError, BlobNamespaceProvider, Host, ProviderConfig, ProviderInfo


class PrintingHost(Host):
    """Stand-in for a real shell: prints what it is asked to do."""

    def invoke_command(self, command: str) -> object:
        print(f"host> {command}")
        return None

    def write_error(self, error: BlobNamespaceError) -> None:
        print(f"host error: {error}")


if __name__ == "__main__":
    config = ProviderConfig(aliases=("prod", "staging"))
    provider = BlobNamespaceProvider(config, PrintingHost())

    # Once per process: register display formatting (best effort)
    result = provider.on_provider_load()
    print(f"Startup: {result.status.value}")

    info = provider.start(ProviderInfo(name="Azure", module="blob_namespace"))
    print(f"Started {info.name} with aliases {list(info.aliases)}")

    # The host mounts these in order
    for drive in provider.initialize_default_drives():
        print(f"  {drive.name}: ({drive.scheme.value}) {drive.description}")

    root = provider.initialize_default_drives()[0]
    path = "Azure:\\myaccount.blob.core.windows.net:443\\images\\cat.png"
    print(f"Account for {path!r}: {root.resolve_account(path)}")
    print(f"Account for 'example.com': {provider.resolve_account('example.com')}")
