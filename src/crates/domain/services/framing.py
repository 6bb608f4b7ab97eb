"""Framing generation for crate bases and item cradles.

Every flat item gets its own cradle: a pair of posts and a rung at each
cradle point along its depth, optional diagonal braces between cradle
points, and a longitudinal rail on each side. Cradles are independent,
so neighbouring items never share or merge posts even when they coincide.

Coordinates follow the crate frame (x across, y up, z along the pallet).
"""

from __future__ import annotations

import logging

from ..entities import CrateConfig, LumberPiece
from ..value_objects import LumberType, Vector3
from .lumber import create_brace, create_lumber

logger = logging.getLogger(__name__)

__all__ = ["BASE_RUNNER_OFFSETS", "FramingGenerator"]

# Runner centers as fractions of the pallet width.
BASE_RUNNER_OFFSETS: tuple[float, ...] = (0.2, 0.5, 0.8)


class FramingGenerator:
    """Derives lumber for the crate base and for each flat item.

    Attributes:
        config: Crate configuration supplying stock size and spacing.
    """

    def __init__(self, config: CrateConfig) -> None:
        self.config = config

    def base_runners(self) -> list[LumberPiece]:
        """Create the three runners spanning the full pallet length."""
        config = self.config
        return [
            create_lumber(
                LumberType.BASE_RUNNER,
                config.lumber_width,
                config.lumber_thick,
                config.pallet_length,
                config.pallet_width * factor,
                config.lumber_thick / 2,
                config.pallet_length / 2,
            )
            for factor in BASE_RUNNER_OFFSETS
        ]

    def cradle_offsets(self, frame_length: float) -> list[float]:
        """Return cradle point offsets from the item's leading edge.

        Points step by ``framing_spacing`` from 0 up to and including the
        trailing edge. A spacing of zero yields only the two end points.

        Args:
            frame_length: Depth of the item along the pallet.

        Returns:
            Ascending offsets in inches.
        """
        spacing = self.config.framing_spacing
        if spacing <= 0:
            return [0.0, frame_length] if frame_length > 0 else [0.0]

        offsets: list[float] = []
        step = 0
        while step * spacing <= frame_length:
            offsets.append(step * spacing)
            step += 1
        return offsets

    def frame_item(self, left_x: float, dims: Vector3, layer_y: float) -> list[LumberPiece]:
        """Build the cradle around one flat item.

        Args:
            left_x: X coordinate of the item's left face.
            dims: Oriented item extents.
            layer_y: Height the item rests on.

        Returns:
            Posts, rungs and braces per cradle point, then the two rails.
        """
        config = self.config
        lumber_w = config.lumber_width
        lumber_t = config.lumber_thick

        frame_length = dims.z
        pocket_height = dims.y + lumber_t
        z_start = (config.pallet_length - frame_length) / 2
        left_post_x = left_x - lumber_w / 2
        right_post_x = left_x + dims.x + lumber_w / 2
        rung_width = (right_post_x - left_post_x) + lumber_w

        pieces: list[LumberPiece] = []
        offsets = self.cradle_offsets(frame_length)

        for i, offset in enumerate(offsets):
            z_pos = z_start + offset

            for post_x in (left_post_x, right_post_x):
                pieces.append(
                    create_lumber(
                        LumberType.POST,
                        lumber_w,
                        pocket_height,
                        lumber_w,
                        post_x,
                        layer_y + pocket_height / 2,
                        z_pos,
                    )
                )

            pieces.append(
                create_lumber(
                    LumberType.RUNG,
                    rung_width,
                    lumber_t,
                    lumber_w,
                    (left_post_x + right_post_x) / 2,
                    layer_y + pocket_height,
                    z_pos,
                )
            )

            # One brace per side, base of this cradle point to top of the next
            if config.add_bracing and i + 1 < len(offsets):
                next_z = z_start + offsets[i + 1]
                for post_x in (left_post_x, right_post_x):
                    pieces.append(
                        create_brace(
                            Vector3(post_x, layer_y, z_pos),
                            Vector3(post_x, layer_y + pocket_height, next_z),
                            lumber_w,
                            lumber_t,
                        )
                    )

        for post_x in (left_post_x, right_post_x):
            pieces.append(
                create_lumber(
                    LumberType.RAIL,
                    lumber_w,
                    lumber_t,
                    frame_length,
                    post_x,
                    layer_y + pocket_height + lumber_t,
                    config.pallet_length / 2,
                )
            )

        logger.debug(
            "Cradle at x=%.2f y=%.2f: %d cradle points, %d pieces",
            left_x,
            layer_y,
            len(offsets),
            len(pieces),
        )
        return pieces
