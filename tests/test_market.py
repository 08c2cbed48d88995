"""Tests for MarketGenerator, the commodity catalog and MarketSnapshot."""

from __future__ import annotations

import statistics
from dataclasses import FrozenInstanceError, replace

import pytest
from pydantic import TypeAdapter

from starfield.config import DEFAULT_ECONOMY_TYPES, MarketConfig
from starfield.core.commodities import (
    COMMODITIES, COMMODITY_REGISTRY, CommodityDefinition, EconomyEffect,
    commodity_unit, tech_level_number, tonnes_per_unit,
)
from starfield.core.enums import Unit
from starfield.core.fixed_stations import FIXED_STATIONS
from starfield.core.market import CommodityState, MarketSnapshot, apply_quantity_deltas
from starfield.core.models import Station, Vec2
from starfield.systems.market import MarketGenerator
from starfield.utils.fingerprint import fingerprint_market


def _station(**overrides) -> Station:
    fields = dict(
        id="station_3_-2", position=Vec2(1234.5, -567.25), size=60.0, color="#00FFFF",
        economy_type="Industrial", tech_level="TL3", station_type="coriolis",
        name="Test Dock", initial_angle=0.0, rotation_speed=0.5,
    )
    fields.update(overrides)
    return Station(**fields)


# ---------------------------------------------------------------------------
# Determinism
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_same_inputs_same_table(self):
        gen = MarketGenerator()
        station = _station()
        a = gen.generate(station, 42, 0)
        b = MarketGenerator().generate(station, 42, 0)
        assert a.entries() == b.entries()
        assert fingerprint_market(a) == fingerprint_market(b)

    def test_timestamp_is_suffix(self):
        snapshot = MarketGenerator().generate(_station(), 42, 7)
        assert snapshot.timestamp == 7

    def test_suffix_rolls_a_new_table(self):
        gen = MarketGenerator()
        station = _station()
        prints = {fingerprint_market(gen.generate(station, 42, s)) for s in range(10)}
        assert len(prints) == 10

    def test_world_seed_changes_table(self):
        gen = MarketGenerator()
        station = _station()
        assert gen.generate(station, 1, 0).entries() != gen.generate(station, 2, 0).entries()

    def test_name_and_id_do_not_affect_table(self):
        gen = MarketGenerator()
        a = gen.generate(_station(), 42, 0)
        b = gen.generate(_station(id="other", name="Elsewhere"), 42, 0)
        assert a.entries() == b.entries()

    def test_catalog_order_is_preserved(self):
        snapshot = MarketGenerator().generate(_station(tech_level="TL7"), 42, 0)
        order = [c.key for c in COMMODITIES if c.key in snapshot]
        assert list(snapshot) == order


# ---------------------------------------------------------------------------
# Tech gating
# ---------------------------------------------------------------------------

class TestTechGate:
    @pytest.mark.parametrize("tl", ["TL0", "TL1", "TL2", "TL3", "TL4"])
    def test_gold_absent_below_tl5(self, tl):
        gen = MarketGenerator()
        for seed in range(1, 50):
            assert "Gold" not in gen.generate(_station(tech_level=tl), seed, 0)

    @pytest.mark.parametrize("tl", ["TL5", "TL6", "TL7"])
    def test_gold_present_from_tl5(self, tl):
        gen = MarketGenerator()
        for seed in range(1, 50):
            assert "Gold" in gen.generate(_station(tech_level=tl), seed, 0)

    @pytest.mark.parametrize("economy", DEFAULT_ECONOMY_TYPES + ("Pirate",))
    @pytest.mark.parametrize("size", [0.0, 45.0, 90.0, 400.0])
    def test_gate_holds_for_every_economy_and_size(self, economy, size):
        gen = MarketGenerator()
        for tl in range(8):
            station = _station(tech_level=f"TL{tl}", economy_type=economy, size=size)
            allowed = {
                c.key for c in COMMODITIES
                if c.min_tech_level is None or tech_level_number(c.min_tech_level) <= tl
            }
            for seed in (1, 77, 4096):
                assert set(gen.generate(station, seed, 0)) <= allowed
            if tl <= 4:
                assert not {"Gold", "Platinum", "Alien Items"} & set(gen.generate(station, 5, 0))

    def test_ungated_commodities_always_present(self):
        snapshot = MarketGenerator().generate(_station(tech_level="TL0"), 9, 0)
        for key in ("Food", "Textiles", "Liquor", "Alloys", "Furs", "Minerals"):
            assert key in snapshot
        assert "Machinery" not in snapshot
        assert "Alien Items" not in snapshot


# ---------------------------------------------------------------------------
# Price and quantity model
# ---------------------------------------------------------------------------

class TestPricing:
    def test_expected_terms_scenario(self):
        gen = MarketGenerator()
        price, mean = gen.expected_terms(_station(), COMMODITY_REGISTRY["Food"])
        assert price == pytest.approx(14.0)
        assert mean == pytest.approx(40 * 0.6 * (60 / 45) ** 2)

    def test_generated_values_centre_on_expected_terms(self):
        gen = MarketGenerator()
        station = _station()
        prices, quantities = [], []
        for seed in range(1, 401):
            state = gen.generate(station, seed, 0).get("Food")
            prices.append(state.price)
            quantities.append(state.quantity)
        assert statistics.fmean(prices) == pytest.approx(14.0, abs=1.5)
        assert statistics.fmean(quantities) == pytest.approx(42.667, abs=4.0)

    def test_quantity_scales_with_size_squared(self):
        gen = MarketGenerator()
        small = _station(size=45.0, economy_type="High Tech")
        large = _station(size=90.0, economy_type="High Tech")
        small_total = large_total = 0
        for seed in range(1, 201):
            s = gen.generate(small, seed, 0).get("Minerals")
            big = gen.generate(large, seed, 0).get("Minerals")
            assert s.price == big.price
            small_total += s.quantity
            large_total += big.quantity
        assert 3.8 <= large_total / small_total <= 4.2

    def test_higher_tech_is_cheaper(self):
        gen = MarketGenerator()
        low = [gen.generate(_station(tech_level="TL1"), seed, 0).price_of("Food") for seed in range(1, 201)]
        high = [gen.generate(_station(tech_level="TL6"), seed, 0).price_of("Food") for seed in range(1, 201)]
        assert statistics.fmean(high) < statistics.fmean(low)

    def test_tech_adjustment_formula(self):
        gen = MarketGenerator()
        food = COMMODITY_REGISTRY["Food"]
        price, _ = gen.expected_terms(_station(tech_level="TL7", economy_type="Pirate"), food)
        assert price == pytest.approx(10 - 4 * 0.05 * 10)

    def test_price_floor_before_jitter(self):
        cheap = CommodityDefinition(
            key="Scrap", base_price=2, base_quantity=10,
            econ_effect={"Industrial": EconomyEffect(dp=-50, q_mult=1.0)},
        )
        price, _ = MarketGenerator(catalog=(cheap,)).expected_terms(_station(), cheap)
        assert price == 1.0

    @pytest.mark.parametrize("size", [0.0, -10.0, 30.0, float("nan"), float("inf")])
    def test_degenerate_sizes_use_reference_size(self, size):
        gen = MarketGenerator()
        reference = gen.generate(_station(size=45.0), 42, 0)
        assert gen.generate(_station(size=size), 42, 0).entries() == reference.entries()

    def test_values_are_bounded_integers(self):
        gen = MarketGenerator()
        for seed in range(1, 150):
            for tl in ("TL0", "TL7"):
                snapshot = gen.generate(_station(tech_level=tl, economy_type="Poor Agricultural"), seed, seed % 3)
                for _, state in snapshot.entries():
                    assert isinstance(state.price, int) and state.price >= 1
                    assert isinstance(state.quantity, int) and state.quantity >= 0

    def test_zero_quantity_commodity_is_omitted(self):
        catalog = (
            CommodityDefinition(key="Nothing", base_price=50, base_quantity=0),
            CommodityDefinition(key="Banned", base_price=50, base_quantity=10,
                                econ_effect={"Industrial": EconomyEffect(dp=0, q_mult=0.0)}),
            CommodityDefinition(key="Food", base_price=10, base_quantity=40),
        )
        snapshot = MarketGenerator(catalog=catalog).generate(_station(), 42, 0)
        assert list(snapshot) == ["Food"]

    def test_stock_rounding_to_zero_is_omitted(self):
        gen = MarketGenerator()
        station = _station(economy_type="Poor Agricultural", size=45.0)
        computers = COMMODITY_REGISTRY["Computers"]
        assert gen.expected_terms(station, computers) is None
        for seed in range(1, 101):
            assert "Computers" not in gen.generate(station, seed, 0)

    def test_half_unit_stock_is_kept(self):
        platinum = COMMODITY_REGISTRY["Platinum"]
        terms = MarketGenerator().expected_terms(_station(tech_level="TL6", size=45.0), platinum)
        assert terms is not None
        assert terms[1] == pytest.approx(0.5)

    def test_omitted_commodity_consumes_no_draws(self):
        food = CommodityDefinition(key="Food", base_price=10, base_quantity=40)
        gated = CommodityDefinition(key="Relics", base_price=10, base_quantity=40, min_tech_level="TL7")
        plain = MarketGenerator(catalog=(food,)).generate(_station(), 42, 0)
        with_gate = MarketGenerator(catalog=(gated, food)).generate(_station(), 42, 0)
        assert with_gate.get("Food") == plain.get("Food")

    def test_unknown_economy_uses_defaults(self):
        gen = MarketGenerator()
        pirate = FIXED_STATIONS[2]
        snapshot = gen.generate(pirate, 42, 0)
        assert "Food" in snapshot
        price, mean = gen.expected_terms(pirate, COMMODITY_REGISTRY["Food"])
        assert price == 10.0
        assert mean == pytest.approx(40 * (70 / 45) ** 2)

    def test_jitter_can_be_disabled(self):
        gen = MarketGenerator(MarketConfig(price_jitter=0.0, quantity_jitter=0.0))
        snapshot = gen.generate(_station(), 42, 0)
        assert snapshot.get("Food") == CommodityState(price=14, quantity=43)

    def test_malformed_tech_level_raises(self):
        with pytest.raises(ValueError):
            MarketGenerator().generate(_station(tech_level="high"), 42, 0)


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

class TestSnapshot:
    def test_table_is_read_only(self):
        snapshot = MarketGenerator().generate(_station(), 42, 0)
        with pytest.raises(TypeError):
            snapshot.table["Food"] = CommodityState(1, 1)  # type: ignore[index]

    def test_snapshot_is_frozen(self):
        snapshot = MarketGenerator().generate(_station(), 42, 0)
        with pytest.raises(FrozenInstanceError):
            snapshot.timestamp = 3  # type: ignore[misc]
        with pytest.raises(FrozenInstanceError):
            snapshot.get("Food").price = 1  # type: ignore[union-attr]

    def test_source_dict_is_copied(self):
        table = {"Food": CommodityState(10, 5)}
        snapshot = MarketSnapshot(timestamp=0, table=table)
        table["Food"] = CommodityState(99, 99)
        assert snapshot.price_of("Food") == 10

    def test_accessors(self):
        snapshot = MarketSnapshot(timestamp=2, table={"Food": CommodityState(10, 5)})
        assert snapshot.price_of("Food") == 10
        assert snapshot.quantity_of("Food") == 5
        assert snapshot.price_of("Gold") is None
        assert snapshot.quantity_of("Gold") is None
        assert len(snapshot) == 1
        assert "Food" in snapshot
        assert snapshot.keys() == ["Food"]

    def test_apply_quantity_deltas(self):
        baseline = MarketSnapshot(timestamp=1, table={
            "Food": CommodityState(10, 5), "Gold": CommodityState(150, 2),
        })
        merged = apply_quantity_deltas(baseline, {"Food": -8, "Gold": 3, "Furs": 10})
        assert merged.get("Food") == CommodityState(10, 0)
        assert merged.get("Gold") == CommodityState(150, 5)
        assert "Furs" not in merged
        assert merged.timestamp == 1
        assert baseline.quantity_of("Food") == 5

    def test_fingerprint_ignores_insertion_order(self):
        a = MarketSnapshot(0, {"Food": CommodityState(10, 5), "Gold": CommodityState(150, 2)})
        b = MarketSnapshot(0, {"Gold": CommodityState(150, 2), "Food": CommodityState(10, 5)})
        assert fingerprint_market(a) == fingerprint_market(b)
        assert fingerprint_market(a) != fingerprint_market(replace(a, timestamp=1))


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class TestCatalog:
    def test_catalog_size_and_keys(self):
        assert len(COMMODITIES) == 15
        assert len({c.key for c in COMMODITIES}) == 15
        assert COMMODITIES[0].key == "Food"

    @pytest.mark.parametrize("raw, expected", [("TL0", 0), ("TL5", 5), ("TL12", 12)])
    def test_tech_level_number(self, raw, expected):
        assert tech_level_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "TL", "tl3", "TL-1", "TL3a", None, 3])
    def test_tech_level_number_rejects_malformed(self, raw):
        with pytest.raises(ValueError):
            tech_level_number(raw)

    def test_units(self):
        assert commodity_unit("Gold") is Unit.KILOGRAMS
        assert commodity_unit("Gem-Stones") is Unit.GRAMS
        assert commodity_unit("Food") is Unit.TONNES
        assert commodity_unit("Unobtainium") is Unit.TONNES
        assert tonnes_per_unit("Food") == 1.0
        assert tonnes_per_unit("Platinum") == pytest.approx(0.001)
        assert tonnes_per_unit("Gem-Stones") == pytest.approx(1e-6)

    def test_definition_serializes(self):
        dumped = TypeAdapter(CommodityDefinition).dump_python(COMMODITY_REGISTRY["Gold"], mode="json")
        assert dumped["key"] == "Gold"
        assert dumped["unit"] == "kg"
        assert dumped["min_tech_level"] == "TL5"

    def test_food_economy_effects(self):
        food = COMMODITY_REGISTRY["Food"]
        assert food.effect_for("Poor Industrial") == EconomyEffect(dp=1, q_mult=0.7)
        assert food.effect_for("Industrial") == EconomyEffect(dp=4, q_mult=0.6)
        assert food.effect_for("Rich Industrial") == EconomyEffect(dp=2, q_mult=0.5)
        assert food.effect_for("Rich Agricultural") == EconomyEffect(dp=-2, q_mult=1.6)

    def test_effect_defaults(self):
        minerals = COMMODITY_REGISTRY["Minerals"]
        assert minerals.effect_for("Industrial") == EconomyEffect(dp=0.0, q_mult=1.0)
        assert COMMODITY_REGISTRY["Food"].effect_for("Industrial") == EconomyEffect(dp=4, q_mult=0.6)
