"""
Unit Tests for Zone Resolution and Reference Data

Run with: pytest freight/tests/test_zones.py -v
"""

import pytest
import polars as pl

from freight.data import find_missing_rates, load_rates, load_zones
from freight.models import Location, ServiceabilityRecord
from freight.zones import (
    default_zone_map,
    normalize_state,
    resolve_leg_zone,
    resolve_zone,
    zone_map_from_frame,
)


# =============================================================================
# RESOLVE ZONE
# =============================================================================

class TestResolveZone:
    """State name -> zone."""

    @pytest.mark.parametrize("state,zone", [
        ("Delhi", "N1"),
        ("Himachal Pradesh", "N2"),
        ("West Bengal", "E"),
        ("Assam", "NE"),
        ("Gujarat", "W1"),
        ("Maharashtra", "W2"),
        ("Karnataka", "S1"),
        ("Kerala", "S2"),
        ("Madhya Pradesh", "Central"),
    ])
    def test_one_state_per_zone(self, state, zone):
        assert resolve_zone(state) == zone

    @pytest.mark.parametrize("state", ["delhi", "DELHI", "  Delhi  ", "\tdelhi\n"])
    def test_case_and_whitespace_insensitive(self, state):
        assert resolve_zone(state) == "N1"

    @pytest.mark.parametrize("state", ["Jammu & Kashmir", "Jammu and Kashmir"])
    def test_aliases(self, state):
        assert resolve_zone(state) == "N2"

    @pytest.mark.parametrize("state", ["", "   ", None])
    def test_empty_state(self, state):
        assert resolve_zone(state) is None

    def test_unmapped_state(self):
        assert resolve_zone("Atlantis") is None

    def test_partial_name_not_matched(self):
        assert resolve_zone("Pradesh") is None

    def test_custom_zone_map(self):
        zone_map = {"atlantis": "S2"}
        assert resolve_zone("Atlantis", zone_map) == "S2"
        assert resolve_zone("Delhi", zone_map) is None

    def test_normalize_state(self):
        assert normalize_state("  Tamil Nadu ") == "tamil nadu"
        assert normalize_state(None) == ""


# =============================================================================
# RESOLVE LEG ZONE
# =============================================================================

class TestResolveLegZone:
    """Serviceability override on top of the state mapping."""

    def test_no_record_uses_state(self):
        location = Location("400001", "Mumbai", "Maharashtra")
        assert resolve_leg_zone(location) == "W2"

    def test_override_wins(self):
        location = Location("400001", "Mumbai", "Maharashtra")
        record = ServiceabilityRecord(zone="S1")
        assert resolve_leg_zone(location, record) == "S1"

    def test_empty_override_ignored(self):
        location = Location("400001", "Mumbai", "Maharashtra")
        record = ServiceabilityRecord(zone="")
        assert resolve_leg_zone(location, record) == "W2"

    def test_whitespace_override_ignored(self):
        location = Location("400001", "Mumbai", "Maharashtra")
        assert resolve_leg_zone(location, ServiceabilityRecord(zone="  ")) == "W2"

    def test_override_trimmed(self):
        location = Location("400001", "Mumbai", "Maharashtra")
        assert resolve_leg_zone(location, ServiceabilityRecord(zone=" S1 ")) == "S1"

    def test_override_for_unmapped_state(self):
        location = Location("999999", "Nowhere", "Atlantis")
        assert resolve_leg_zone(location) is None
        assert resolve_leg_zone(location, ServiceabilityRecord(zone="E")) == "E"


# =============================================================================
# ZONE MAP
# =============================================================================

class TestZoneMap:
    """Bundled state -> zone mapping."""

    def test_read_only(self):
        with pytest.raises(TypeError):
            default_zone_map()["atlantis"] = "N1"

    def test_keys_normalized(self):
        for state in default_zone_map():
            assert state == state.strip().lower()

    def test_from_frame(self):
        zones = pl.DataFrame({"state": ["atlantis"], "zone": ["S2"]})
        assert dict(zone_map_from_frame(zones)) == {"atlantis": "S2"}

    def test_load_zones_normalizes(self, tmp_path):
        path = tmp_path / "zones.csv"
        path.write_text("state,zone\n  Atlantis ,S2\nATLANTIS,S1\n")
        zones = load_zones(path)
        assert zones.to_dicts() == [{"state": "atlantis", "zone": "S1"}]


# =============================================================================
# RATE MATRIX
# =============================================================================

class TestRateMatrix:
    """Bundled rate matrix against the zone map."""

    def test_long_format(self):
        rates = load_rates()
        assert rates.columns == ["zone_from", "zone_to", "rate"]
        assert len(rates) == 81

    def test_known_rate(self):
        rates = load_rates()
        rate = rates.filter(
            (pl.col("zone_from") == "N1") & (pl.col("zone_to") == "W2")
        )["rate"][0]
        assert rate == pytest.approx(12.5)

    def test_every_zone_pair_priced(self):
        assert find_missing_rates() == []

    def test_gap_detected(self):
        rates = load_rates().filter(
            ~((pl.col("zone_from") == "E") & (pl.col("zone_to") == "S1"))
        )
        assert find_missing_rates(rates=rates) == [("E", "S1")]

    def test_rates_positive(self):
        assert (load_rates()["rate"] > 0).all()
