from __future__ import annotations

import pytest

from usbdetector.backend.device import MacOsRelease, resolve_release


@pytest.mark.parametrize("version", ["10.8", "10.8.5", "10.8.0-beta"])
def test_versions_sharing_a_prefix_resolve_to_the_same_release(version: str) -> None:
    assert resolve_release(version) is MacOsRelease.MountainLion


def test_single_number_prefixes() -> None:
    assert resolve_release("14.2") is MacOsRelease.Sonoma
    assert resolve_release("11.0") is MacOsRelease.BigSur
    assert resolve_release("15.1") is MacOsRelease.Sequoia
    assert resolve_release("26.0.1") is MacOsRelease.Tahoe


def test_two_digit_minor_versions_are_not_confused_with_shorter_prefixes() -> None:
    assert resolve_release("10.10.5") is MacOsRelease.Yosemite
    assert resolve_release("10.15.7") is MacOsRelease.Catalina
    assert resolve_release("10.4.11") is MacOsRelease.Tiger


@pytest.mark.parametrize("version", ["9.9", "1", "1.2", "", "140.1", "Darwin"])
def test_unknown_versions_are_unresolved(version: str) -> None:
    assert resolve_release(version) is None


def test_releases_are_ordered_by_table_position() -> None:
    assert MacOsRelease.BigSur > MacOsRelease.Catalina
    assert MacOsRelease.Yosemite > MacOsRelease.Lion
    assert MacOsRelease.MountainLion >= MacOsRelease.MountainLion
    assert MacOsRelease.Lion < MacOsRelease.MountainLion
    assert sorted([MacOsRelease.Sonoma, MacOsRelease.Tiger, MacOsRelease.Yosemite]) == [
        MacOsRelease.Tiger,
        MacOsRelease.Yosemite,
        MacOsRelease.Sonoma,
    ]


def test_version_prefix() -> None:
    assert MacOsRelease.ElCapitan.version_prefix == "10.11"
    assert MacOsRelease.Monterey.version_prefix == "12"
