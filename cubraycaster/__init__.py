"""Grid raycasting maze explorer for .cub scene files, with doors, sprites, minimap and compass."""

__version__ = "0.1.0"
__all__ = ["__version__"]