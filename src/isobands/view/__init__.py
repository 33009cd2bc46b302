from isobands.view.vtk_utils import VtkUtils

__all__ = ["VtkUtils"]
