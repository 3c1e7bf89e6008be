"""Parsing of assay, mass and plain positive inputs."""

import pytest

from swu_calculator.config.constants import KG_PER_LB
from swu_calculator.core.errors import EnrichmentError, ParseError
from swu_calculator.core.parsing import parse_assay, parse_input, parse_mass, parse_positive


class TestParseAssay:
    @pytest.mark.parametrize("raw", ["5%", "5.0%", " 5 % ", "0.05", "1/20", " 1 / 20 "])
    def test_equivalent_spellings(self, raw):
        assert parse_assay(raw) == pytest.approx(0.05)

    def test_bare_number_follows_unit_hint(self):
        assert parse_assay("5", unit="percent") == pytest.approx(0.05)
        assert parse_assay("0.05", unit="fraction") == pytest.approx(0.05)

    def test_explicit_forms_override_unit_hint(self):
        assert parse_assay("5%", unit="fraction") == pytest.approx(0.05)
        assert parse_assay("1/20", unit="percent") == pytest.approx(0.05)

    @pytest.mark.parametrize("raw", ["0%", "100%", "-5", "abc", "1/0", "1/", "/2", "1/2/3", "0", "1", "nan", "inf", ""])
    def test_rejected(self, raw):
        with pytest.raises(ParseError):
            parse_assay(raw)

    def test_out_of_range_message(self):
        with pytest.raises(ParseError, match="between 0 and 1"):
            parse_assay("100%")

    def test_fraction_message(self):
        with pytest.raises(ParseError, match="Invalid fraction"):
            parse_assay("1/0")

    def test_unknown_unit(self):
        with pytest.raises(ParseError, match="Unsupported assay unit"):
            parse_assay("0.05", unit="ppm")


class TestParseMass:
    def test_inline_units(self):
        assert parse_mass("100 g") == pytest.approx(0.1)
        assert parse_mass("0.1 kg") == pytest.approx(0.1)
        assert parse_mass("5 lb") == pytest.approx(5 * KG_PER_LB)
        assert parse_mass("5LB") == pytest.approx(5 * KG_PER_LB)

    def test_bare_number_follows_unit_hint(self):
        assert parse_mass("2") == pytest.approx(2.0)
        assert parse_mass("2", unit="g") == pytest.approx(0.002)
        assert parse_mass("2", unit="lb") == pytest.approx(2 * KG_PER_LB)

    def test_inline_unit_wins(self):
        assert parse_mass("2 kg", unit="lb") == pytest.approx(2.0)

    @pytest.mark.parametrize("raw", ["-5", "0", "0 kg", "-5 kg", "abc", "1/0", ""])
    def test_rejected(self, raw):
        with pytest.raises(ParseError):
            parse_mass(raw)

    def test_unsupported_unit(self):
        with pytest.raises(ParseError, match="Unsupported mass unit"):
            parse_mass("5 tonnes")
        with pytest.raises(ParseError, match="Unsupported mass unit"):
            parse_mass("5", unit="oz")


class TestParsePositive:
    def test_accepts_positive(self):
        assert parse_positive("12.5") == 12.5
        assert parse_positive(" 1e3 ") == 1000.0

    @pytest.mark.parametrize("raw", ["0", "-5", "abc", "1/0", "inf", "nan", ""])
    def test_rejected(self, raw):
        with pytest.raises(ParseError):
            parse_positive(raw)


class TestParseInput:
    def test_dispatch(self):
        assert parse_input("5%", "assay") == pytest.approx(0.05)
        assert parse_input("500 g", "mass") == pytest.approx(0.5)
        assert parse_input("3", "scalar") == 3.0
        assert parse_input("3", "mass", "g") == pytest.approx(0.003)

    def test_unknown_kind_is_not_a_parse_error(self):
        with pytest.raises(ValueError) as excinfo:
            parse_input("3", "volume")
        assert not isinstance(excinfo.value, EnrichmentError)
