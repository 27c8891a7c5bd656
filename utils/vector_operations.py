from __future__ import annotations

import numpy as np

EPSILON: float = 1e-6 # tolerance for comparing spatial coordinates and the point/vector discriminant

# IEEE-754 results (inf, nan) flow through silently, the way plain float arithmetic would
_IEEE_SILENT = dict(divide="ignore", over="ignore", under="ignore", invalid="ignore")


def float_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def add_vectors(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    with np.errstate(**_IEEE_SILENT):
        return np.add(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def subtract_vectors(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    with np.errstate(**_IEEE_SILENT):
        return np.subtract(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def vector_length(v: np.ndarray) -> float: #Euclidean length over every component, w included
    with np.errstate(**_IEEE_SILENT):
        return float(np.linalg.norm(np.asarray(v, dtype=float)))


def vector_dot(a: np.ndarray, b: np.ndarray) -> float: #w takes part in the sum
    with np.errstate(**_IEEE_SILENT):
        return float(np.dot(np.asarray(a, dtype=float), np.asarray(b, dtype=float)))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: #cross product of the x, y, z parts only
    spatial_a = np.asarray(a, dtype=float)[:3]
    spatial_b = np.asarray(b, dtype=float)[:3]
    with np.errstate(**_IEEE_SILENT):
        return np.cross(spatial_a, spatial_b)


def scale_vector(v: np.ndarray, scalar: float) -> np.ndarray:
    with np.errstate(**_IEEE_SILENT):
        return np.asarray(v, dtype=float) * np.float64(scalar)


def divide_vector(v: np.ndarray, scalar: float) -> np.ndarray:
    """Divides every component by scalar with IEEE-754 semantics.
       A zero divisor gives +-inf (or nan for 0/0) instead of raising."""
    with np.errstate(**_IEEE_SILENT):
        return np.asarray(v, dtype=float) / np.float64(scalar)


def normalize_vector(v: np.ndarray) -> np.ndarray:
    """Rescales v to unit length. A zero-length input comes back as nan components."""
    vector_array = np.asarray(v, dtype=float)
    return divide_vector(vector_array, vector_length(vector_array))
