"""STL export functionality using numpy-stl."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

import numpy as np
from stl import mesh

from crates.domain import BoxLumber, Crate, DiagonalLumber, Vector3

logger = logging.getLogger(__name__)

# Two triangles per face, indices into the 8 corners from ``_corners``.
_TRIANGLES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (0, 2, 3),  # floor side
    (4, 6, 5), (4, 7, 6),  # top side
    (0, 5, 1), (0, 4, 5),  # front
    (2, 7, 3), (2, 6, 7),  # back
    (0, 7, 4), (0, 3, 7),  # left
    (1, 6, 2), (1, 5, 6),  # right
)


def _corners(center: np.ndarray, axes: np.ndarray, size: Sequence[float]) -> np.ndarray:
    """Corners of a box given its center, unit axes (rows) and full extents.

    Axes are ordered (across, up, along) and must be right-handed.
    """
    half = np.asarray(size, dtype=float) / 2
    signs = (
        (-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1),
        (-1, 1, -1), (1, 1, -1), (1, 1, 1), (-1, 1, 1),
    )
    return np.array([center + (np.array(s) * half) @ axes for s in signs])


class StlMeshBuilder:
    """Builds STL meshes for crate items and lumber.

    The crate frame is already Y-up (x across, y up, z along the pallet),
    which matches common STL viewers, so no axis swap is applied.
    """

    def build_box_mesh(self, dims: Vector3, center: Vector3) -> mesh.Mesh:
        """Create a mesh for an axis-aligned box."""
        return self._mesh(
            _corners(np.array(center.as_tuple()), np.eye(3), dims.as_tuple())
        )

    def build_brace_mesh(self, brace: DiagonalLumber, offset: Vector3) -> mesh.Mesh:
        """Create a mesh for a diagonal brace oriented from start to end.

        The brace's wide face stays horizontal, matching how it is nailed
        across the posts.
        """
        start = np.array(brace.start.as_tuple())
        end = np.array(brace.end.as_tuple())
        length = float(np.linalg.norm(end - start))
        along = (end - start) / length
        up = np.array([0.0, 1.0, 0.0])

        across = np.cross(up, along)
        if np.linalg.norm(across) < 1e-9:
            across = np.array([1.0, 0.0, 0.0])
        across = across / np.linalg.norm(across)
        normal = np.cross(along, across)

        center = (start + end) / 2 + np.array(offset.as_tuple())
        axes = np.array([across, normal, along])
        return self._mesh(
            _corners(center, axes, (brace.section_width, brace.section_thick, length))
        )

    @staticmethod
    def _mesh(vertices: np.ndarray) -> mesh.Mesh:
        box_mesh = mesh.Mesh(np.zeros(len(_TRIANGLES), dtype=mesh.Mesh.dtype))
        for i, (v0, v1, v2) in enumerate(_TRIANGLES):
            box_mesh.vectors[i] = [vertices[v0], vertices[v1], vertices[v2]]
        return box_mesh


class StlExporter:
    """Writes crates, items and framing to a single STL file.

    Crates are laid out side by side along X with ``crate_gap`` between
    them.
    """

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        crate_gap: float = 24.0,
        include_items: bool = True,
    ) -> None:
        self.mesh_builder = mesh_builder or StlMeshBuilder()
        self.crate_gap = crate_gap
        self.include_items = include_items

    def build_meshes(self, crates: Sequence[Crate], pallet_width: float) -> list[mesh.Mesh]:
        """Build one mesh per item and lumber piece across all crates."""
        meshes: list[mesh.Mesh] = []
        for crate in crates:
            shift = (crate.index - 1) * (pallet_width + self.crate_gap)
            offset = Vector3(shift, 0.0, 0.0)

            if self.include_items:
                for placed in crate.items:
                    meshes.append(
                        self.mesh_builder.build_box_mesh(
                            placed.dims, _shifted(placed.position, offset)
                        )
                    )

            for piece in crate.lumber:
                if isinstance(piece, BoxLumber):
                    meshes.append(
                        self.mesh_builder.build_box_mesh(
                            piece.dims, _shifted(piece.position, offset)
                        )
                    )
                else:
                    meshes.append(self.mesh_builder.build_brace_mesh(piece, offset))
        return meshes

    def export_to_file(
        self,
        crates: Sequence[Crate],
        pallet_width: float,
        filepath: Path | str,
    ) -> None:
        """Combine every mesh and save as binary STL.

        Raises:
            ValueError: If there is nothing to export.
        """
        meshes = self.build_meshes(crates, pallet_width)
        if not meshes:
            raise ValueError("No crates to export")

        combined = mesh.Mesh(np.concatenate([m.data for m in meshes]))
        combined.save(str(filepath))
        logger.info("Wrote %d meshes to %s", len(meshes), filepath)


def _shifted(v: Vector3, offset: Vector3) -> Vector3:
    return Vector3(v.x + offset.x, v.y + offset.y, v.z + offset.z)
