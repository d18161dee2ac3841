"""Storage-account resolution from ``host[:port]`` authority strings."""

from __future__ import annotations

import re
from typing import Final

BLOB_HOST_SUFFIX: Final = ".blob.core.windows.net"

ACCOUNT_FROM_HOST_PORT: Final = re.compile(r"(?P<account>\w+)" + re.escape(BLOB_HOST_SUFFIX) + r"(?::\d+)?")


def resolve_account(host_and_port: str | None) -> str | None:
    """Return the storage account named by an authority string.

    ``"myaccount.blob.core.windows.net:443"`` resolves to ``"myaccount"``.
    The first match wins and the account is returned exactly as written.
    Strings without the blob host suffix are not an error: they simply do
    not name an account, and ``None`` is returned.
    """
    if not host_and_port:
        return None
    match = ACCOUNT_FROM_HOST_PORT.search(host_and_port)
    if match is None:
        return None
    return match.group("account")
