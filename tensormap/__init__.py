"""Dense multilinear maps (tensors) of floats with flat storage and wrap-around indexing."""

__version__ = "0.1.0"
__all__ = ["multilinear"]