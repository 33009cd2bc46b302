from isobands.model.geometry_primitives import Point3, IsoSegment, ClassifiedTriangle, BandPolygon
from isobands.model.lut import LookupTable, LOOKUP_TABLES, get_lookup_table
from isobands.model.settings import BandSettings

__all__ = [
    "Point3",
    "IsoSegment",
    "ClassifiedTriangle",
    "BandPolygon",
    "LookupTable",
    "LOOKUP_TABLES",
    "get_lookup_table",
    "BandSettings",
]
