"""Side-scrolling runner game: jump the chicken over the fire and score points."""

__version__ = "0.1.0"
__all__ = ["__version__"]