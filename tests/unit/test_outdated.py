from dataclasses import dataclass
from typing import Optional

from envmanager.domain.versioning.outdated import (
    count_outdated,
    filter_outdated,
    installation_version,
    is_outdated,
)


@dataclass(frozen=True)
class Installation:
    version: Optional[str]


class ExplodingIterable:
    def __iter__(self):
        raise AssertionError("installations must not be inspected")


def test_basic_ordering():
    assert is_outdated("1.0.0.0", "1.0.0.1") is True
    assert is_outdated("1.0.0.1", "1.0.0.0") is False


def test_version_not_outdated_against_itself():
    for version in ("1.0", "v2.0", "18.1-beta", "no-digits"):
        assert is_outdated(version, version) is False


def test_missing_inputs_are_never_outdated():
    assert is_outdated("1.0", "") is False
    assert is_outdated("", "1.0") is False
    assert is_outdated("1.0", None) is False
    assert is_outdated(None, "1.0") is False


def test_unparseable_inputs_are_never_outdated():
    assert is_outdated("unknown", "2.0") is False
    assert is_outdated("1.0", "Unknown") is False


def test_trailing_zero_padding_is_equivalent():
    assert is_outdated("1.2", "1.2.0.0") is False
    assert is_outdated("1.2", "1.2.0.1") is True


def test_ahead_of_latest_is_not_outdated():
    assert is_outdated("18.1-beta", "18.0") is False


def test_count_outdated_mappings():
    installations = [{"version": "1.0"}, {"version": "2.0"}, {"version": "3.0"}]
    assert count_outdated("2.0", installations) == 1


def test_count_outdated_without_latest_short_circuits():
    assert count_outdated(None, [{"version": "1.0"}]) == 0
    assert count_outdated("", ExplodingIterable()) == 0


def test_count_outdated_dashboard_scenario():
    installations = [Installation("17.5"), Installation("18.0"), Installation("18.1-beta")]
    assert count_outdated("18.0", installations) == 1


def test_count_outdated_ignores_missing_versions():
    installations = [{"version": None}, {}, Installation(None), {"version": "0.9"}]
    assert count_outdated("1.0", installations) == 1


def test_count_outdated_does_not_mutate_input():
    installations = [{"version": "1.0"}, {"version": "2.0"}]
    snapshot = [dict(i) for i in installations]
    count_outdated("2.0", installations)
    count_outdated("2.0", installations)
    assert installations == snapshot


def test_filter_outdated_keeps_input_order():
    installations = [Installation("3.0"), Installation("1.5"), Installation("2.0"), Installation("1.0")]
    assert filter_outdated("2.0", installations) == [Installation("1.5"), Installation("1.0")]
    assert filter_outdated(None, installations) == []


def test_installation_version_reads_mapping_or_attribute():
    assert installation_version({"version": "1.0"}) == "1.0"
    assert installation_version(Installation("2.0")) == "2.0"
    assert installation_version(object()) is None


def test_oversized_digit_run_is_unparseable_not_an_error():
    huge = "1" * 5000
    assert is_outdated(huge, "2") is False
    assert is_outdated("1.0", huge) is False
    assert count_outdated("2.0", [{"version": huge}, {"version": "1.0"}]) == 1


def test_non_string_versions_read_as_missing():
    assert installation_version({"version": 1.5}) is None
    assert installation_version(Installation(2)) is None
    assert count_outdated("2.0", [{"version": 1.5}, {"version": ["1.0"]}, {"version": "1.0"}]) == 1
    assert filter_outdated("2.0", [{"version": 1.5}]) == []
