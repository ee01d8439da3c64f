"""Integer Delaunay edge flipping, convex decomposition, centroid nets and viewport helpers."""

__version__ = "0.1.0"