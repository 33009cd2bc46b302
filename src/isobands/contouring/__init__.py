from isobands.contouring.assembler import assemble_polygons
from isobands.contouring.buffers import BandMesh, PolygonBuffer
from isobands.contouring.classifier import classify_triangle
from isobands.contouring.isolines import IsoLines, build_iso_lines
from isobands.contouring.mesher import IsoBandMesher, build_iso_bands
from isobands.contouring.normalize import normalize_field
from isobands.contouring.segments import generate_segments
from isobands.contouring.stats import band_areas, triangle_areas

__all__ = [
    "assemble_polygons",
    "BandMesh",
    "PolygonBuffer",
    "classify_triangle",
    "IsoLines",
    "build_iso_lines",
    "IsoBandMesher",
    "build_iso_bands",
    "normalize_field",
    "generate_segments",
    "band_areas",
    "triangle_areas",
]
