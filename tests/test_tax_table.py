from __future__ import annotations

import pytest

from hotel_pricer.pricing.tax import DEFAULT_TAX_RATES, RegionalTaxTable, region_for


def test_default_table_contents():
    table = RegionalTaxTable()
    assert table.as_dict() == {
        "US": 0.10,
        "EU": 0.20,
        "UK": 0.15,
        "JP": 0.08,
        "CA": 0.12,
        "DEFAULT": 0.05,
    }
    assert set(table) == set(DEFAULT_TAX_RATES)


@pytest.mark.parametrize(
    ("hotel_id", "expected"),
    [
        ("US12345", 0.10),
        ("EU98765", 0.20),
        ("JP11111", 0.08),
        ("uk55555", 0.15),
        ("ZZ00001", 0.05),
        ("X", 0.05),
    ],
)
def test_rate_for_hotel(hotel_id, expected):
    assert RegionalTaxTable().rate_for_hotel(hotel_id) == expected


def test_region_for_uppercases_prefix():
    assert region_for("ca-toronto-1") == "CA"
    assert region_for("Z") == "DEFAULT"
    assert region_for("") == "DEFAULT"
    assert region_for(None) == "DEFAULT"


def test_table_is_read_only():
    table = RegionalTaxTable()
    with pytest.raises(TypeError):
        table["US"] = 0.5  # type: ignore[index]
    exported = table.as_dict()
    exported["US"] = 0.5
    assert table["US"] == 0.10


def test_table_normalises_region_keys():
    table = RegionalTaxTable({"us": 0.07, "default": 0.01})
    assert table.rate_for("US") == 0.07
    assert table.default_rate == 0.01


def test_table_requires_default_entry():
    with pytest.raises(ValueError, match="DEFAULT"):
        RegionalTaxTable({"US": 0.10})


@pytest.mark.parametrize("rate", [-0.01, 1.0, 1.5, "0.1", True])
def test_table_rejects_out_of_range_rates(rate):
    with pytest.raises(ValueError):
        RegionalTaxTable({"US": rate, "DEFAULT": 0.05})
