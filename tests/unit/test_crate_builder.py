"""Tests for the single-crate state machine."""

from __future__ import annotations

import pytest

from crates.domain import CrateConfig, LumberType, build_one
from crates.domain.services import CrateBuilder, CratePhase


class TestTransitions:
    def test_open_lays_base(self, default_config: CrateConfig, make_item) -> None:
        builder = CrateBuilder(default_config)
        state = builder.advance(builder.open([make_item()]))

        assert state.phase is CratePhase.ROW_FILLING
        assert state.layer_y == default_config.base_height
        assert [p.lumber_type for p in state.lumber] == [LumberType.BASE_RUNNER] * 3

    def test_fill_row_commits_weight_and_removes_items(
        self, default_config: CrateConfig, make_item
    ) -> None:
        builder = CrateBuilder(default_config)
        items = [make_item(weight=40), make_item(weight=60)]
        state = builder.advance(builder.advance(builder.open(items)))

        assert state.phase is CratePhase.ROW_CLOSED
        assert state.remaining == ()
        assert state.weight == 100
        assert state.pending_row is not None
        assert state.items == ()

    def test_place_row_raises_cursor(self, default_config: CrateConfig, make_item) -> None:
        builder = CrateBuilder(default_config)
        state = builder.open([make_item(height=4)])
        for _ in range(3):
            state = builder.advance(state)

        assert state.phase is CratePhase.ROW_FILLING
        assert state.layer_y == pytest.approx(8.5)
        assert state.height == pytest.approx(8.5)
        assert len(state.items) == 1
        assert state.pending_row is None

    def test_empty_row_closes_crate(self, default_config: CrateConfig) -> None:
        builder = CrateBuilder(default_config)
        state = builder.advance(builder.advance(builder.open([])))
        assert state.is_closed

    def test_closed_crate_cannot_advance(self, default_config: CrateConfig) -> None:
        builder = CrateBuilder(default_config)
        closed = builder.run([])
        with pytest.raises(ValueError, match="closed"):
            builder.advance(closed)

    def test_source_queue_untouched(self, default_config: CrateConfig, make_item) -> None:
        items = [make_item() for _ in range(3)]
        snapshot = list(items)
        CrateBuilder(default_config).run(items)
        assert items == snapshot


class TestBuild:
    def test_stacks_rows_until_height_runs_out(self, make_item) -> None:
        # Bulky items: one per row, each layer 43 in including rung clearance
        config = CrateConfig(max_height=100)
        items = [make_item(width=40, height=40, length=120, weight=10) for _ in range(3)]
        crate, remaining = CrateBuilder(config).build(items)

        assert crate.item_count == 2
        assert len(remaining) == 1
        assert [p.position.y for p in crate.items] == pytest.approx([21.5, 64.5])
        assert all(p.top <= config.max_height for p in crate.items)

    def test_crate_totals(self, default_config: CrateConfig, make_item) -> None:
        crate, remaining = CrateBuilder(default_config).build(
            [make_item(weight=30), make_item(weight=20)], index=3
        )
        assert crate.index == 3
        assert crate.total_weight == 50
        assert crate.height > default_config.base_height
        assert crate.wood_usage > 0
        assert remaining == ()

    def test_nothing_fits_yields_empty_crate(self, default_config: CrateConfig, make_item) -> None:
        item = make_item(width=90, height=90)
        crate, remaining = CrateBuilder(default_config).build([item])
        assert crate.item_count == 0
        assert remaining == (item,)

    def test_build_one(self, default_config: CrateConfig, make_item) -> None:
        crate = build_one([make_item()], default_config)
        assert crate.index == 1
        assert crate.item_count == 1
