"""Fixed-size vector and matrix value types.

Vectors and matrices are plain tuples: callers own their inputs, every
function returns a freshly built value, and nothing is modified in place.
"""

from typing import Sequence, Tuple

from ..errors import DomainError, ErrorKind

Vector3 = Tuple[float, float, float]
Matrix3x3 = Tuple[Vector3, Vector3, Vector3]
PVVector = Tuple[Vector3, Vector3]


def as_vector(p: Sequence[float]) -> Vector3:
    """Copy a 3-element sequence into a Vector3.

    Raises:
        DomainError: If ``p`` does not have exactly three elements
    """
    if len(p) != 3:
        raise DomainError(
            ErrorKind.DIMENSION_MISMATCH, f"expected 3 components, got {len(p)}"
        )
    return (float(p[0]), float(p[1]), float(p[2]))


def as_matrix(r: Sequence[Sequence[float]]) -> Matrix3x3:
    """Copy a 3x3 nested sequence into a Matrix3x3.

    Raises:
        DomainError: If ``r`` is not 3x3
    """
    if len(r) != 3:
        raise DomainError(ErrorKind.DIMENSION_MISMATCH, f"expected 3 rows, got {len(r)}")
    return (as_vector(r[0]), as_vector(r[1]), as_vector(r[2]))


def as_pv(pv: Sequence[Sequence[float]]) -> PVVector:
    """Copy a (position, velocity) pair into a PVVector."""
    if len(pv) != 2:
        raise DomainError(
            ErrorKind.DIMENSION_MISMATCH, f"expected position and velocity, got {len(pv)}"
        )
    return (as_vector(pv[0]), as_vector(pv[1]))
