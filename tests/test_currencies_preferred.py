"""Tests for regional preference tables (currencies/preferred.py)."""

from __future__ import annotations

import pytest

from moneylex.constants import DEFAULT_PREFERRED_CURRENCIES
from moneylex.currencies import (
    dollar_symbol,
    krone_symbol,
    pound_symbol,
    preferred_currencies,
    rupee_symbol,
    territory_currencies,
    yen_symbol,
)


class TestDollarSymbol:
    """Test dollar_symbol() regional choices."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [
            ("AG", "XCD"), ("AU", "AUD"), ("BS", "BSD"), ("BB", "BBD"), ("BZ", "BZD"),
            ("BM", "BMD"), ("BN", "BND"), ("CA", "CAD"), ("CO", "COP"), ("CU", "CUP"),
            ("DM", "XCD"), ("EC", "USD"), ("FM", "USD"), ("KY", "KYD"), ("FJ", "FJD"),
            ("GD", "XCD"), ("GY", "GYD"), ("HK", "HKD"), ("JM", "JMD"), ("KI", "AUD"),
            ("KN", "XCD"), ("LC", "XCD"), ("LR", "LRD"), ("MH", "USD"), ("MX", "MXN"),
            ("NA", "NAD"), ("NZ", "NZD"), ("SG", "SGD"), ("SB", "SBD"), ("SR", "SRD"),
            ("SV", "USD"), ("TL", "USD"), ("TW", "TWD"), ("TT", "TTD"), ("TV", "AUD"),
            ("VC", "XCD"), ("ZW", "USD"),
        ],
    )
    def test_regions(self, region: str, expected: str) -> None:
        assert dollar_symbol(region) == expected

    def test_does_not_switch_dinar_to_dollar(self) -> None:
        assert dollar_symbol("SD") == "USD"

    def test_case_insensitive(self) -> None:
        assert dollar_symbol("au") == "AUD"


class TestOtherFamilies:
    """Test pound, yen, krone and rupee choices."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [
            ("EG", "EGP"), ("FK", "FKP"), ("GI", "GIP"), ("GG", "GBP"), ("IM", "GBP"),
            ("JE", "GBP"), ("LB", "LBP"), ("SH", "SHP"), ("SS", "SSP"), ("SD", "SDG"),
            ("SY", "SYP"), ("GB", "GBP"),
        ],
    )
    def test_pound(self, region: str, expected: str) -> None:
        assert pound_symbol(region) == expected

    def test_yen(self) -> None:
        assert yen_symbol("CN") == "CNY"
        assert yen_symbol("JP") == "JPY"

    @pytest.mark.parametrize(
        ("region", "expected"),
        [("DK", "DKK"), ("FO", "DKK"), ("GL", "DKK"), ("IS", "ISK"), ("NO", "NOK"), ("SE", "SEK")],
    )
    def test_krone(self, region: str, expected: str) -> None:
        assert krone_symbol(region) == expected

    @pytest.mark.parametrize(
        ("region", "expected"),
        [("IN", "INR"), ("ID", "IDR"), ("MU", "MUR"), ("NP", "NPR"), ("PK", "PKR"), ("LK", "LKR")],
    )
    def test_rupee(self, region: str, expected: str) -> None:
        assert rupee_symbol(region) == expected


class TestPreferredCurrencies:
    """Test preferred_currencies() ranked family choices."""

    @pytest.mark.parametrize(
        ("region", "expected"),
        [
            ("GB", ("USD", "GBP", "JPY", "DKK", "INR")),
            ("AU", ("AUD", "GBP", "JPY", "DKK", "INR")),
            ("SD", ("USD", "SDG", "JPY", "DKK", "INR")),
            ("CN", ("USD", "GBP", "CNY", "DKK", "INR")),
            ("PK", ("USD", "GBP", "JPY", "DKK", "PKR")),
        ],
    )
    def test_regions(self, region: str, expected: tuple[str, ...]) -> None:
        assert preferred_currencies(region) == expected

    def test_no_region_is_global_default(self) -> None:
        assert preferred_currencies(None) == ("USD", "GBP", "JPY", "DKK", "INR")
        assert preferred_currencies() == DEFAULT_PREFERRED_CURRENCIES


class TestTerritoryCurrencies:
    """Test territory_currencies() CLDR lookups."""

    def test_single_currency_regions(self) -> None:
        assert territory_currencies("ZM") == ("ZMW",)
        assert territory_currencies("AU")[0] == "AUD"
        assert territory_currencies("de")[0] == "EUR"

    def test_unknown_region_is_empty(self) -> None:
        assert territory_currencies("QQ") == ()
