"""Mode registry and raw-text dispatch."""

import pytest

from swu_calculator.config.constants import KG_PER_LB
from swu_calculator.core.errors import OrderingError, ParseError
from swu_calculator.core.fuel_cycle import EnrichmentResult, feed_and_swu_for_product
from swu_calculator.core.modes import MODES, get_mode, parse_inputs, run_mode
from swu_calculator.core.optimizer import OptimumTails

ASSAYS = {"product_assay": "5%", "tails_assay": "0.3%", "feed_assay": "0.7%"}


class TestRegistry:
    def test_five_modes_numbered(self):
        assert sorted(spec.number for spec in MODES.values()) == [1, 2, 3, 4, 5]

    @pytest.mark.parametrize("key", [2, "2", "feed_swu"])
    def test_lookup(self, key):
        assert get_mode(key) is MODES["feed_swu"]

    def test_lookup_passes_spec_through(self):
        spec = MODES["eup_swu"]
        assert get_mode(spec) is spec

    @pytest.mark.parametrize("key", [0, 6, "7", "nope"])
    def test_unknown(self, key):
        with pytest.raises(KeyError):
            get_mode(key)

    def test_input_kinds(self):
        assert [s.kind for s in MODES["feed_swu"].inputs] == ["assay", "assay", "assay", "mass"]
        assert [s.kind for s in MODES["feed_eup_from_swu"].inputs][-1] == "scalar"
        assert MODES["optimum_tails"].input_names == ("product_assay", "feed_assay", "feed_price", "swu_price")


class TestRunMode:
    def test_mode_one_from_mapping(self):
        result = run_mode(1, ASSAYS)
        assert isinstance(result, EnrichmentResult)
        assert result.feed_kg == pytest.approx(11.75)

    def test_mode_two_from_sequence(self):
        result = run_mode("feed_swu", ["5%", "0.3%", "0.7%", "1000 g"])
        assert result.product_kg == pytest.approx(1.0)
        assert result.feed_kg == pytest.approx(11.75)

    def test_mode_three(self):
        result = run_mode(3, dict(ASSAYS, feed_mass="11.75"))
        assert result.product_kg == pytest.approx(1.0)

    def test_mode_four(self):
        expected = feed_and_swu_for_product(0.05, 0.003, 0.007, 4.0)
        result = run_mode(4, dict(ASSAYS, swu=str(expected.swu)))
        assert result.product_kg == pytest.approx(4.0)
        assert result.feed_kg == pytest.approx(expected.feed_kg)

    def test_mode_five(self):
        result = run_mode(5, ["5%", "0.7%", "50", "100"])
        assert isinstance(result, OptimumTails)
        assert 0 < result.tails_assay < 0.007

    def test_units_by_kind(self):
        result = run_mode(2, ["5", "0.3", "0.7", "2"], units={"assay": "percent", "mass": "lb"})
        assert result.product_kg == pytest.approx(2 * KG_PER_LB)
        assert result.feed_kg == pytest.approx(11.75 * 2 * KG_PER_LB)

    def test_unit_by_name_beats_kind(self):
        values = parse_inputs(1, ["5", "0.003", "0.7"], units={"assay": "percent", "tails_assay": "fraction"})
        assert values == pytest.approx((0.05, 0.003, 0.007))


class TestRunModeFailures:
    def test_missing_input(self):
        with pytest.raises(ParseError, match="feed_assay"):
            run_mode(1, {"product_assay": "5%", "tails_assay": "0.3%", "feed_assay": ""})

    def test_wrong_count(self):
        with pytest.raises(ParseError, match="expects 4 inputs"):
            run_mode(2, ["5%", "0.3%", "0.7%"])

    def test_parse_error_surfaces(self):
        with pytest.raises(ParseError):
            run_mode(1, ["abc", "0.3%", "0.7%"])

    def test_ordering_error_surfaces(self):
        with pytest.raises(OrderingError):
            run_mode(1, ["0.7%", "0.3%", "5%"])
