"""Prime-field scalars, vectors and polynomials, with a mod-ten digit type."""

__version__ = "0.1.0"
__all__ = ["app", "convert", "linalg", "modten", "polynomial", "scalar"]