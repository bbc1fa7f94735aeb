"""Dense vectors, a row-major matrix container and vector operations with shape-checked errors."""

__version__ = "0.1.0"
__all__ = ["core", "vec", "mat", "ops"]