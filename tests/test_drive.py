"""Tests for drive descriptors and proposed-drive validation."""

from __future__ import annotations

import dataclasses

import pytest

from blob_namespace._config import ProviderConfig
from blob_namespace._drive import DriveDescriptor, DriveScheme, ProposedDrive, make_drive_descriptor
from blob_namespace._errors import DriveValidationError
from blob_namespace._host import ProviderInfo
from blob_namespace._path import DrivePath

CONFIG = ProviderConfig(aliases=("a1", "a2"))


class TestPassThrough:
    def test_existing_descriptor_returned_unchanged(self) -> None:
        drive = DriveDescriptor(name="a1", root="a1", scheme=DriveScheme.ALIAS)
        assert make_drive_descriptor(drive, CONFIG) is drive

    def test_wrapping_twice_is_a_no_op(self) -> None:
        first = make_drive_descriptor(ProposedDrive(name="x"), CONFIG)
        assert make_drive_descriptor(first, CONFIG) is first


class TestWrapping:
    def test_root_scheme(self) -> None:
        d = make_drive_descriptor(ProposedDrive(name="Azure"), CONFIG)
        assert d.scheme is DriveScheme.ROOT_SCHEME
        assert d.is_root
        assert d.root == "Azure"

    def test_root_scheme_ignores_case(self) -> None:
        assert make_drive_descriptor("azure", CONFIG).scheme is DriveScheme.ROOT_SCHEME

    def test_alias(self) -> None:
        d = make_drive_descriptor(ProposedDrive(name="a1", description="first"), CONFIG)
        assert d.scheme is DriveScheme.ALIAS
        assert d.name == "a1"
        assert d.root == "a1"
        assert d.description == "first"

    def test_explicit_root(self) -> None:
        d = make_drive_descriptor(ProposedDrive(name="prod", root="Azure"), CONFIG)
        assert d.name == "prod"
        assert d.root == "Azure"
        assert d.scheme is DriveScheme.ROOT_SCHEME

    def test_plain_name(self) -> None:
        d = make_drive_descriptor("backups", CONFIG)
        assert (d.name, d.root, d.scheme) == ("backups", "backups", DriveScheme.ALIAS)

    def test_no_eager_account(self) -> None:
        d = make_drive_descriptor(ProposedDrive(name="x", root="acct.blob.core.windows.net"), CONFIG)
        assert d.account_hint is None

    def test_provider_info_attached(self) -> None:
        info = ProviderInfo(name="Azure")
        assert make_drive_descriptor("x", CONFIG, info).provider is info

    def test_proposed_provider_wins(self) -> None:
        own = ProviderInfo(name="own")
        d = make_drive_descriptor(ProposedDrive(name="x", provider=own), CONFIG, ProviderInfo(name="other"))
        assert d.provider is own


class TestValidation:
    def test_none(self) -> None:
        with pytest.raises(DriveValidationError):
            make_drive_descriptor(None, CONFIG)

    def test_wrong_type(self) -> None:
        with pytest.raises(DriveValidationError, match="int"):
            make_drive_descriptor(42, CONFIG)  # type: ignore[arg-type]

    @pytest.mark.parametrize("name", ["", "   ", "bad:name", "a/b", "a\\b", "nul\0"])
    def test_bad_names(self, name: str) -> None:
        with pytest.raises(DriveValidationError):
            make_drive_descriptor(ProposedDrive(name=name), CONFIG)

    @pytest.mark.parametrize("root", ["   ", "a/../b", "x\0y"])
    def test_bad_roots(self, root: str) -> None:
        with pytest.raises(DriveValidationError) as info:
            make_drive_descriptor(ProposedDrive(name="ok", root=root), CONFIG)
        assert info.value.root == root
        assert info.value.drive == "ok"


class TestDescriptor:
    def test_content_equality(self) -> None:
        a = DriveDescriptor(name="a1", root="a1", scheme=DriveScheme.ALIAS, provider=ProviderInfo(name="p"))
        b = DriveDescriptor(name="a1", root="a1", scheme=DriveScheme.ALIAS)
        assert a == b
        assert a is not b

    def test_frozen(self) -> None:
        d = DriveDescriptor(name="a1", root="a1", scheme=DriveScheme.ALIAS)
        with pytest.raises(dataclasses.FrozenInstanceError):
            d.root = "b"  # type: ignore[misc]

    def test_resolve_account_from_path(self) -> None:
        d = DriveDescriptor(name="Azure", root="Azure", scheme=DriveScheme.ROOT_SCHEME)
        assert d.resolve_account("Azure:/acct.blob.core.windows.net:443/c") == "acct"
        assert d.resolve_account(DrivePath("acct2.blob.core.windows.net")) == "acct2"

    def test_resolve_account_unresolvable(self) -> None:
        d = DriveDescriptor(name="Azure", root="Azure", scheme=DriveScheme.ROOT_SCHEME)
        assert d.resolve_account("Azure:/somewhere/else") is None

    def test_resolve_account_falls_back_to_hint(self) -> None:
        d = DriveDescriptor(name="prod", root="prod", scheme=DriveScheme.ALIAS, account_hint="prodacct")
        assert d.resolve_account("prod:/container/blob") == "prodacct"
        assert d.resolve_account("prod:/other.blob.core.windows.net/c") == "other"
