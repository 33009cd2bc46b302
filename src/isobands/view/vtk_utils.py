"""
VTK Utilities
Hand-off between the mesher buffers and pyvista datasets.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np
import pyvista as pv

from isobands.exceptions import InvalidInputError

if TYPE_CHECKING:
    import numpy.typing as npt
    from isobands.contouring.buffers import BandMesh
    from isobands.contouring.isolines import IsoLines

logger = logging.getLogger(__name__)


class VtkUtils:
    @staticmethod
    def to_polydata(mesh: BandMesh) -> pv.PolyData:
        """
        Convert a band mesh into a pyvista surface.

        Vertex colors are stored as point data ``"colors"`` and the iso-level of
        each triangle as cell data ``"levels"``.
        """
        if mesh.is_empty:
            return pv.PolyData()

        triangles = mesh.triangles
        faces = np.hstack((np.full((triangles.shape[0], 1), 3, dtype=np.int64), triangles)).ravel()
        polydata = pv.PolyData(mesh.points.copy(), faces)
        polydata.point_data["colors"] = mesh.vertex_colors.copy()
        polydata.cell_data["levels"] = mesh.levels.copy()
        return polydata

    @staticmethod
    def lines_to_polydata(lines: IsoLines) -> pv.PolyData:
        """Convert iso-lines into a pyvista line set with ``"colors"`` and ``"levels"``."""
        if lines.n_segments == 0:
            return pv.PolyData()

        points = lines.positions.reshape(-1, 3).copy()
        starts = np.arange(0, points.shape[0], 2, dtype=np.int64)
        cells = np.column_stack((np.full(starts.size, 2, dtype=np.int64), starts, starts + 1)).ravel()
        polydata = pv.PolyData(points, lines=cells)
        polydata.point_data["colors"] = lines.colors.reshape(-1, 3).copy()
        polydata.cell_data["levels"] = lines.levels.copy()
        return polydata

    @staticmethod
    def from_polydata(
        polydata: pv.PolyData,
        scalars: str
    ) -> Tuple[npt.NDArray[np.int64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Extract mesher input from a pyvista surface.

        Non-triangular faces are triangulated first.

        Args:
            polydata: Surface with a point-data scalar array.
            scalars: Name of the point-data array to contour.

        Returns:
            Flat triangle indices, flat positions and the scalar field.

        Raises:
            InvalidInputError: If the array is missing or not one scalar per point.
        """
        if scalars not in polydata.point_data:
            raise InvalidInputError(
                f"Point data '{scalars}' not found, available: {list(polydata.point_data.keys())}."
            )

        surface = polydata.triangulate()
        field = np.asarray(surface.point_data[scalars], dtype=np.float64)
        if field.ndim != 1:
            raise InvalidInputError(
                f"Point data '{scalars}' must hold one scalar per point, got shape {field.shape}."
            )

        indices = np.asarray(surface.faces, dtype=np.int64).reshape(-1, 4)[:, 1:].ravel()
        positions = np.asarray(surface.points, dtype=np.float64).ravel()
        logger.debug(f"Extracted {indices.size // 3} triangles and {field.size} values from '{scalars}'.")
        return indices, positions, field

    @staticmethod
    def plot_band_mesh(
        mesh: BandMesh,
        lines: Optional[IsoLines] = None,
        screenshot: Optional[str] = None,
        off_screen: bool = False,
    ) -> None:
        """
        Show a band mesh with its flat colors, optionally with iso-lines on top.

        Args:
            mesh: Band mesh to draw.
            lines: Optional iso-lines, drawn in black.
            screenshot: Optional path of a PNG to save.
            off_screen: Render without opening a window.
        """
        if mesh.is_empty:
            logger.warning("Band mesh is empty, nothing to render.")
            return

        plotter = pv.Plotter(off_screen=off_screen)
        plotter.add_mesh(
            VtkUtils.to_polydata(mesh),
            scalars="colors",
            rgb=True,
            lighting=False,
            show_edges=False,
        )
        if lines is not None and lines.n_segments:
            plotter.add_mesh(
                VtkUtils.lines_to_polydata(lines),
                color="black",
                line_width=1.5,
                show_scalar_bar=False,
            )
        plotter.show(screenshot=screenshot)
