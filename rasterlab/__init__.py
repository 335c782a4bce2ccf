"""Classic raster graphics algorithms: lines, circles, Koch curves, transforms, fills, clipping and a moving scene."""

__version__ = "0.1.0"

__all__ = ["animation", "circle", "cli", "clipping", "fill", "koch", "lines", "transform"]