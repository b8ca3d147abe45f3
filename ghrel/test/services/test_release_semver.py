from __future__ import annotations

import pytest

from ghrel.core.result import Err, Ok
from ghrel.services.release.semver import SemVer, is_valid_version, parse_version


@pytest.mark.parametrize("tag", ["v0.0.1", "v1.2.3", "v10.20.30", "v01.2.3"])
def test_valid(tag: str) -> None:
    assert is_valid_version(tag)


@pytest.mark.parametrize(
    "tag",
    ["", "1.2.3", "v1.2", "v1.2.3.4", "v1.2.3-beta.1", "V1.2.3", "v1.2.x", "v1.2.3\n", " v1.2.3"],
)
def test_invalid(tag: str) -> None:
    assert not is_valid_version(tag)


def test_parse_version() -> None:
    assert parse_version("v1.2.3") == Ok(SemVer(1, 2, 3))
    assert parse_version("  v1.2.3 ") == Ok(SemVer(1, 2, 3))


def test_parse_version_error_keeps_input() -> None:
    result = parse_version("1.2")
    assert isinstance(result, Err)
    assert result.error.version == "1.2"


def test_ordering_and_tag() -> None:
    assert SemVer(1, 10, 0) > SemVer(1, 9, 9)
    assert SemVer(2, 0, 1).to_tag() == "v2.0.1"
