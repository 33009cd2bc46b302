"""Filled iso-contour band meshing of scalar fields on triangle meshes."""
from isobands.contouring import (
    BandMesh,
    IsoBandMesher,
    IsoLines,
    band_areas,
    build_iso_bands,
    build_iso_lines,
    normalize_field,
)
from isobands.exceptions import InvalidInputError
from isobands.model import BandSettings, LookupTable, LOOKUP_TABLES

__all__ = [
    "BandMesh",
    "IsoBandMesher",
    "IsoLines",
    "band_areas",
    "build_iso_bands",
    "build_iso_lines",
    "normalize_field",
    "InvalidInputError",
    "BandSettings",
    "LookupTable",
    "LOOKUP_TABLES",
]
