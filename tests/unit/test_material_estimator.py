"""Tests for lumber usage and stock estimation."""

from __future__ import annotations

import pytest

from crates.domain import BoxLumber, DiagonalLumber, LumberEstimator, LumberType, Vector3
from crates.domain.services import wood_usage_feet


@pytest.fixture
def lumber() -> list:
    return [
        BoxLumber(LumberType.RAIL, Vector3(3.5, 1.5, 120), Vector3(0, 0, 0)),
        DiagonalLumber(Vector3(0, 0, 0), Vector3(0, 36, 48), 3.5, 1.5),
    ]


class TestWoodUsage:
    def test_sums_largest_extents_and_brace_lengths(self, lumber: list) -> None:
        assert wood_usage_feet(lumber) == 15.0

    def test_rounds_to_tenth(self) -> None:
        post = BoxLumber(LumberType.POST, Vector3(3.5, 5.0, 3.5), Vector3(0, 0, 0))
        assert wood_usage_feet([post]) == 0.4

    def test_exact_tie_rounds_up(self) -> None:
        # 4887 in is exactly 407.25 ft
        rail = BoxLumber(LumberType.RAIL, Vector3(3.5, 1.5, 4887.0), Vector3(0, 0, 0))
        assert wood_usage_feet([rail]) == 407.3

    def test_tie_in_mixed_pieces(self) -> None:
        # 1935 in = 161.25 ft
        pieces = [
            BoxLumber(LumberType.BASE_RUNNER, Vector3(3.5, 1.5, 1800.0), Vector3(0, 0, 0)),
            BoxLumber(LumberType.POST, Vector3(3.5, 135.0, 1.5), Vector3(0, 0, 0)),
        ]
        assert wood_usage_feet(pieces) == 161.3

    def test_empty(self) -> None:
        assert wood_usage_feet([]) == 0


class TestLumberEstimator:
    def test_breakdown_by_type(self, lumber: list) -> None:
        estimate = LumberEstimator().estimate(lumber)

        assert estimate.linear_feet == 15.0
        assert estimate.piece_counts == {LumberType.RAIL: 1, LumberType.DIAGONAL: 1}
        assert estimate.feet_by_type == {LumberType.RAIL: 10.0, LumberType.DIAGONAL: 5.0}
        assert estimate.piece_count == 2

    def test_type_feet_round_ties_up(self) -> None:
        rail = BoxLumber(LumberType.RAIL, Vector3(3.5, 1.5, 4887.0), Vector3(0, 0, 0))
        assert LumberEstimator().estimate([rail]).feet_by_type == {LumberType.RAIL: 407.3}

    def test_stock_count_includes_waste(self) -> None:
        # 96 in exactly: one board without waste, two with 10%
        rail = BoxLumber(LumberType.RAIL, Vector3(3.5, 1.5, 96), Vector3(0, 0, 0))
        assert LumberEstimator(waste_factor=0).estimate([rail]).stock_count == 1
        assert LumberEstimator().estimate([rail]).stock_count == 2

    def test_description(self, lumber: list) -> None:
        text = LumberEstimator().estimate(lumber).description
        assert "15.0 linear ft" in text
        assert "8 ft" in text
        assert "10% waste" in text

    def test_negative_waste_rejected(self) -> None:
        with pytest.raises(ValueError):
            LumberEstimator(waste_factor=-0.1)
