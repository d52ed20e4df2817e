"""
Unit Tests for Serviceability Table Loading

Run with: pytest freight/tests/test_serviceability.py -v
"""

import pytest

from freight.data import (
    load_serviceability,
    lookup_serviceability,
    serviceability_frame,
    serviceability_records,
    ServiceabilityTableError,
    SERVICEABILITY_COLUMNS,
)
from freight.models import ServiceabilityRecord


CARRIER_EXPORT = b"""PIN CODE,PICK UP STATION,DELIVERY STATE/UT,DELIVERY CITY,PICK UP AVAILABLE,DELIVERY AVAILABLE,Zonal Code
110001,DEL,Delhi,New Delhi,Y,Y,N1
400001,BOM,Maharashtra,Mumbai,yes,N,
781001,GAU,Assam,Guwahati,TRUE,true,NE
560001,BLR,Karnataka,Bengaluru,N,,S1
"""


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def table():
    return load_serviceability(CARRIER_EXPORT)


# =============================================================================
# LOADING
# =============================================================================

class TestLoadServiceability:
    """Parsing the carrier export."""

    def test_columns(self, table):
        assert table.columns == SERVICEABILITY_COLUMNS
        assert len(table) == 4

    def test_headers_matched(self, table):
        row = table.row(0, named=True)
        assert row == {
            "pincode": "110001",
            "pickup_available": True,
            "delivery_available": True,
            "zone": "N1",
            "city": "New Delhi",
            "state": "Delhi",
        }

    def test_availability_values(self, table):
        records = serviceability_records(table)
        assert records["400001"].pickup_available is True
        assert records["400001"].delivery_available is False
        assert records["781001"].pickup_available is True
        assert records["781001"].delivery_available is True
        assert records["560001"].pickup_available is False
        assert records["560001"].delivery_available is False

    def test_blank_zone_kept_empty(self, table):
        assert serviceability_records(table)["400001"].zone == ""

    def test_blank_and_short_rows_become_empty_strings(self):
        data = b"PIN CODE,CITY,STATE,Zonal Code\n110001,,Delhi,\n400001,Mumbai\n"
        records = serviceability_records(load_serviceability(data))
        assert records["110001"] == ServiceabilityRecord(True, True, "", "", "Delhi")
        assert records["400001"] == ServiceabilityRecord(True, True, "", "Mumbai", "")

    def test_from_path(self, tmp_path):
        path = tmp_path / "serviceability.csv"
        path.write_bytes(CARRIER_EXPORT)
        assert len(load_serviceability(path)) == 4
        assert len(load_serviceability(str(path))) == 4

    def test_lowercase_headers(self):
        table = load_serviceability(b"pin code,delivery city\n110001,New Delhi\n")
        assert table["city"].to_list() == ["New Delhi"]

    def test_missing_availability_columns_default_available(self):
        table = load_serviceability(b"PIN CODE,CITY,STATE\n110001,New Delhi,Delhi\n")
        record = serviceability_records(table)["110001"]
        assert record.pickup_available is True
        assert record.delivery_available is True
        assert record.zone == ""

    def test_invalid_pincodes_skipped(self):
        data = b"PIN CODE,CITY\n110001,New Delhi\nABC123,Nowhere\n,Blank\n40 0001,Spaced\n"
        table = load_serviceability(data)
        assert table["pincode"].to_list() == ["110001"]

    def test_quotes_and_whitespace_stripped(self):
        data = b'PIN CODE,CITY\n" 110001 ", New Delhi \n'
        table = load_serviceability(data)
        assert table.row(0, named=True)["pincode"] == "110001"
        assert table.row(0, named=True)["city"] == "New Delhi"

    def test_later_row_wins(self):
        data = b"PIN CODE,CITY\n110001,Old Delhi\n110001,New Delhi\n"
        table = load_serviceability(data)
        assert table["city"].to_list() == ["New Delhi"]

    def test_missing_pincode_header(self):
        with pytest.raises(ServiceabilityTableError, match="PIN CODE"):
            load_serviceability(b"CITY,STATE\nNew Delhi,Delhi\n")

    def test_empty_file(self):
        with pytest.raises(ServiceabilityTableError):
            load_serviceability(b"")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            load_serviceability(b"CITY\nNew Delhi\n")


# =============================================================================
# LOOKUPS
# =============================================================================

class TestLookupServiceability:
    """Exact pincode lookups."""

    def test_found(self, table):
        record = lookup_serviceability(table, "781001")
        assert record == ServiceabilityRecord(True, True, "NE", "Guwahati", "Assam")

    def test_trimmed_query(self, table):
        assert lookup_serviceability(table, " 110001 ").city == "New Delhi"

    def test_not_found(self, table):
        assert lookup_serviceability(table, "999999") is None

    def test_prefix_not_matched(self, table):
        assert lookup_serviceability(table, "1100") is None

    def test_no_table(self):
        assert lookup_serviceability(None, "110001") is None

    def test_frame_from_records(self):
        records = {"110001": ServiceabilityRecord(True, False, "N1", "New Delhi", "Delhi")}
        frame = serviceability_frame(records)
        assert frame.columns == SERVICEABILITY_COLUMNS
        assert lookup_serviceability(frame, "110001") == records["110001"]

    def test_empty_frame(self):
        frame = serviceability_frame({})
        assert frame.is_empty()
        assert lookup_serviceability(frame, "110001") is None
