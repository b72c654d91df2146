"""
Dense matrix module.

Public API:
    Matrix  - dense row-major float matrix with value semantics
"""

from pymatrix.matrix.matrix import Matrix

__all__ = [
    "Matrix",
]
