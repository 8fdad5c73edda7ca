"""Vector, matrix, quaternion and rotation helpers for navigation and attitude estimation."""

__version__ = "0.1.0"
__all__ = ["limits", "matrix_alg", "vector", "matrix", "quaternion", "dense", "dcm"]