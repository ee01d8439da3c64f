"""Display modes for a triangulated shape."""

from __future__ import annotations

import enum


class ModeOption(enum.Enum):
    """What to compute and show for the current shape; listed in menu order."""

    RAW = "Raw"
    DELAUNAY = "Delaunay"
    CONVEX = "Convex"
    TESSELLATION = "Tessellation"
    CENTROID_NET = "CentroidNet"

    @classmethod
    def default(cls) -> ModeOption:
        return cls.RAW

    def __str__(self) -> str:
        return self.value

    def uses_refinement(self) -> bool:
        """True for modes that refine the mesh and take radius and area settings."""
        return self in (ModeOption.TESSELLATION, ModeOption.CENTROID_NET)

    def shows_polygons(self) -> bool:
        """True for modes whose result is a set of polygons rather than triangle meshes."""
        return self in (ModeOption.CONVEX, ModeOption.CENTROID_NET)