"""Command-line interface: contour a demo surface and render it."""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pyvista as pv

from isobands.config import DEFAULT_BAND_COUNT, DEFAULT_LUT_NAME
from isobands.contouring import band_areas, build_iso_bands, build_iso_lines
from isobands.logging_config import setup_logging
from isobands.model.settings import BandSettings
from isobands.view.vtk_utils import VtkUtils

logger = logging.getLogger("isobands")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="isobands",
        description="Contour the height of a demo sphere into flat-colored bands.",
    )
    parser.add_argument("--bands", type=int, default=DEFAULT_BAND_COUNT, help="number of bands")
    parser.add_argument("--lut", default=DEFAULT_LUT_NAME, help="palette name")
    parser.add_argument("--reversed", action="store_true", help="reverse the palette")
    parser.add_argument("--min", type=float, default=0.0, help="lower bound of the normalized window")
    parser.add_argument("--max", type=float, default=1.0, help="upper bound of the normalized window")
    parser.add_argument("--resolution", type=int, default=30, help="sphere resolution")
    parser.add_argument("--workers", type=int, default=1, help="number of worker threads")
    parser.add_argument("--lines", action="store_true", help="draw iso-lines on top of the bands")
    parser.add_argument("--screenshot", default=None, help="save the rendering to this PNG file")
    parser.add_argument("--no-show", action="store_true", help="skip rendering")
    parser.add_argument("--verbose", action="store_true", help="log debug messages")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    sphere = pv.Sphere(theta_resolution=args.resolution, phi_resolution=args.resolution)
    sphere.point_data["height"] = sphere.points[:, 2]
    indices, positions, field = VtkUtils.from_polydata(sphere, "height")

    settings = BandSettings(
        min=args.min,
        max=args.max,
        band_count=args.bands,
        lut_name=args.lut,
        reversed=args.reversed,
    )
    mesh = build_iso_bands(indices, positions, field, settings, n_workers=args.workers)
    for level, area in band_areas(mesh).items():
        logger.info(f"Band {level:.3f}: area {area:.4f}")

    if args.no_show:
        return 0

    lines = build_iso_lines(indices, positions, field, settings) if args.lines else None
    VtkUtils.plot_band_mesh(mesh, lines=lines, screenshot=args.screenshot, off_screen=args.screenshot is not None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
