"""Exceptions raised by the band mesher."""


class InvalidInputError(ValueError):
    """
    Raised when the mesh, the scalar field or the settings break the input
    contract (out-of-range indices, mismatched lengths, bad band count, unknown
    lookup table). Always raised before any output is produced.
    """
