"""
Unit Tests for Surcharge Configuration

Run with: pytest freight/tests/test_surcharges.py -v
"""

import pytest
import polars as pl

import freight.surcharges as surcharges
from freight.models import OPTION_COLUMNS
from freight.settings import DEFAULT_SETTINGS
from freight.surcharges import (
    ALL,
    LINE_ITEMS,
    HANDLING_ABOVE_200,
    HANDLING_70_200,
    get_exclusivity_group,
    get_line_item,
    validate_surcharges,
)
from shared.surcharges import Surcharge, per_kg_with_minimum, percent_with_minimum


# =============================================================================
# CONFIGURATION
# =============================================================================

class TestConfiguration:
    """Surcharge registry integrity."""

    def test_valid(self):
        validate_surcharges()

    def test_every_line_item_fed(self):
        for item in LINE_ITEMS:
            assert get_line_item(item), item

    def test_handling_group_order(self):
        assert get_exclusivity_group("handling") == [HANDLING_ABOVE_200, HANDLING_70_200]

    def test_option_flags_are_option_columns(self):
        flags = {s.option_flag for s in ALL if s.option_flag is not None}
        assert flags == set(OPTION_COLUMNS.values())

    def test_other_bucket(self):
        names = {s.name for s in get_line_item("other")}
        assert names == {"HOLIDAY", "CSD", "TIME_SPECIFIC", "MALL_DELIVERY", "REATTEMPT"}


class TestValidation:
    """Misconfigured surcharges fail loudly."""

    def _with_extra(self, monkeypatch, surcharge):
        monkeypatch.setattr(surcharges, "ALL", ALL + [surcharge])

    def test_unknown_line_item(self, monkeypatch):
        class BAD(Surcharge):
            name = "BAD"
            line_item = "misc"

        self._with_extra(monkeypatch, BAD)
        with pytest.raises(ValueError, match="line_item 'misc'"):
            validate_surcharges()

    def test_group_without_priority(self, monkeypatch):
        class BAD(Surcharge):
            name = "BAD"
            line_item = "handling"
            exclusivity_group = "handling"

        self._with_extra(monkeypatch, BAD)
        with pytest.raises(ValueError, match="requires priority"):
            validate_surcharges()

    def test_duplicate_name(self, monkeypatch):
        class AWB_AGAIN(Surcharge):
            name = "AWB"
            line_item = "awb"

        self._with_extra(monkeypatch, AWB_AGAIN)
        with pytest.raises(ValueError, match="more than once"):
            validate_surcharges()

    def test_option_flag_prefix(self, monkeypatch):
        class BAD(Surcharge):
            name = "BAD"
            line_item = "other"
            option_flag = "cod"

        self._with_extra(monkeypatch, BAD)
        with pytest.raises(ValueError, match="must start with 'is_'"):
            validate_surcharges()


# =============================================================================
# BASE CLASS
# =============================================================================

class TestBase:
    """Shared surcharge helpers."""

    def test_column_names(self):
        assert HANDLING_70_200.flag_col() == "surcharge_handling_70_200"
        assert HANDLING_70_200.cost_col() == "cost_handling_70_200"

    def test_cost_not_implemented(self):
        class BARE(Surcharge):
            name = "BARE"
            line_item = "other"

        with pytest.raises(NotImplementedError):
            BARE.cost(DEFAULT_SETTINGS)

    def test_per_kg_with_minimum(self):
        df = pl.DataFrame({"chargeable_weight_kg": [10.0, 100.0]})
        result = df.select(per_kg_with_minimum(8, 500).alias("cost"))["cost"].to_list()
        assert result == [500.0, 800.0]

    def test_percent_with_minimum(self):
        df = pl.DataFrame({"invoice_value": [1000.0, 20000.0]})
        result = df.select(percent_with_minimum(1, 50).alias("cost"))["cost"].to_list()
        assert result == [50.0, 200.0]

    def test_option_flag_condition(self):
        df = pl.DataFrame({"is_cod": [True, False]})
        COD = next(s for s in ALL if s.name == "COD")
        assert df.select(COD.conditions(DEFAULT_SETTINGS))["is_cod"].to_list() == [True, False]
