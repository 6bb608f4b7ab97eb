"""Tests for multi-crate scheduling and the guarantees every packing run keeps.

Tests cover:
- Queue ordering (length first, weight within tolerance)
- Determinism and conservation of items
- Weight, height and width bounds per crate and row
- Standing items only in the base layer
- Fit failure when nothing can be placed
"""

from __future__ import annotations

from collections import Counter

import pytest

from crates.domain import CrateConfig, Item, Orientation, pack
from crates.domain.services import CrateScheduler, sort_queue
from crates.application import demo_manifest, normalize_manifest


@pytest.fixture
def demo_items() -> list[Item]:
    return normalize_manifest(demo_manifest())


class TestSortQueue:
    def test_longest_first(self, make_item) -> None:
        items = [make_item(length=60), make_item(length=240), make_item(length=120)]
        assert [i.length for i in sort_queue(items)] == [240, 120, 60]

    def test_heaviest_first_within_tolerance(self, make_item) -> None:
        light_long = make_item(length=103, weight=10)
        heavy_short = make_item(length=100, weight=50)
        assert sort_queue([light_long, heavy_short]) == [heavy_short, light_long]

    def test_stable_for_equal_items(self, make_item) -> None:
        items = [make_item() for _ in range(5)]
        assert sort_queue(items) == items


class TestScheduler:
    def test_empty_input(self, default_config: CrateConfig) -> None:
        result = pack([], default_config)
        assert result.crates == ()
        assert result.succeeded

    def test_duplicate_uids_rejected(self, default_config: CrateConfig, make_item) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            pack([make_item(uid="A"), make_item(uid="A")], default_config)

    def test_crates_numbered_from_one(self, make_item) -> None:
        config = CrateConfig(max_weight=100)
        result = pack([make_item(weight=60) for _ in range(3)], config)
        assert [c.index for c in result.crates] == [1, 2, 3]

    def test_input_items_not_consumed(self, default_config: CrateConfig, demo_items) -> None:
        snapshot = list(demo_items)
        first = pack(demo_items, default_config)
        second = pack(demo_items, default_config)
        assert demo_items == snapshot
        assert first.placed_count == second.placed_count == len(demo_items)


class TestPackingProperties:
    def test_determinism(self, default_config: CrateConfig, demo_items) -> None:
        assert pack(demo_items, default_config) == pack(demo_items, default_config)

    def test_weight_bound(self, default_config: CrateConfig, demo_items) -> None:
        for crate in pack(demo_items, default_config).crates:
            assert crate.total_weight <= default_config.max_weight
            assert crate.total_weight == pytest.approx(
                sum(p.item.weight for p in crate.items)
            )

    def test_height_bound(self, default_config: CrateConfig, demo_items) -> None:
        for crate in pack(demo_items, default_config).crates:
            for placed in crate.items:
                assert placed.position.y + placed.dims.y / 2 <= default_config.max_height

    def test_width_bound(self, default_config: CrateConfig, demo_items) -> None:
        # Row footprints never leave the pallet's packable band
        left = default_config.safety_gap
        right = default_config.pallet_width - default_config.safety_gap
        lw = default_config.lumber_width
        for crate in pack(demo_items, default_config).crates:
            for placed in crate.items:
                half = placed.dims.x / 2
                framing = 0.0 if placed.is_standing else lw
                assert placed.position.x - half - framing >= left - 1e-9
                assert placed.position.x + half + framing <= right + 1e-9

    def test_conservation(self, default_config: CrateConfig, demo_items) -> None:
        result = pack(demo_items, default_config)
        assert result.succeeded
        placed = Counter(uid for crate in result.crates for uid in crate.item_uids)
        assert placed == Counter(item.uid for item in demo_items)

    def test_progress(self, default_config: CrateConfig, demo_items) -> None:
        result = pack(demo_items, default_config)
        assert all(crate.item_count > 0 for crate in result.crates)
        assert result.crate_count <= len(demo_items)

    def test_standing_only_in_base_layer(self, default_config: CrateConfig, demo_items) -> None:
        base = default_config.base_height
        for crate in pack(demo_items, default_config).crates:
            for placed in crate.items:
                if placed.orientation is Orientation.STANDING:
                    bottom = placed.position.y - placed.dims.y / 2
                    assert bottom == pytest.approx(base)


class TestScenarios:
    def test_single_long_item(self, default_config: CrateConfig, make_item) -> None:
        result = pack([make_item(length=240, width=4.5, height=4.5, weight=180)], default_config)

        assert result.crate_count == 1
        crate = result.crates[0]
        assert crate.item_count == 1
        assert crate.items[0].orientation is Orientation.FLAT
        assert crate.height > default_config.base_height

    def test_fifteen_short_items_stand_in_base_layer(
        self, default_config: CrateConfig, make_item
    ) -> None:
        items = [make_item(length=60, width=4, height=4, weight=45) for _ in range(15)]
        result = pack(items, default_config)

        assert result.crate_count == 1
        crate = result.crates[0]
        assert crate.item_count == 15
        assert all(p.orientation is Orientation.STANDING for p in crate.items)
        assert {p.position.y for p in crate.items} == {default_config.base_height + 30}

    def test_item_wider_than_pallet_fails(self, default_config: CrateConfig, make_item) -> None:
        item = make_item(length=120, width=90, height=90)
        result = pack([item], default_config)

        assert result.crates == ()
        assert result.error is not None
        assert result.error.unplaced_uids == (item.uid,)
        assert result.error.crates_completed == 0

    def test_fit_failure_keeps_completed_crates(
        self, default_config: CrateConfig, make_item
    ) -> None:
        good = make_item(length=240)
        bad = make_item(length=200, width=90, height=90)
        result = pack([good, bad], default_config)

        assert result.crate_count == 1
        assert result.crates[0].item_uids == (good.uid,)
        assert result.error is not None
        assert result.error.unplaced_uids == (bad.uid,)
        assert result.error.crates_completed == 1

    def test_weight_splits_into_multiple_crates(self, default_config: CrateConfig, make_item) -> None:
        items = [make_item(length=120, weight=600) for _ in range(10)]
        result = pack(items, default_config)

        assert result.succeeded
        assert [c.item_count for c in result.crates] == [4, 4, 2]
        assert all(c.total_weight <= default_config.max_weight for c in result.crates)
        assert result.placed_count == 10


class TestSchedulerInjection:
    def test_uses_given_builder(self, default_config: CrateConfig, make_item) -> None:
        from crates.domain import CrateBuilder

        builder = CrateBuilder(default_config)
        scheduler = CrateScheduler(default_config, builder=builder)
        assert scheduler.builder is builder
        assert scheduler.pack([make_item()]).placed_count == 1
