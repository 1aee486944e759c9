"""Vector validation and normalization shared by all embedding providers."""

import math
import numbers
from typing import Any, List

import numpy as np

from ..core.exceptions import InvalidEmbeddingResponseError


def normalize_vector(vector: List[float]) -> List[float]:
    """Scale ``vector`` to unit L2 length in place and return it.

    An all-zero vector cannot be scaled, so it becomes the first basis vector
    (``[1, 0, 0, ...]``). Empty vectors are returned untouched.
    """
    if not vector:
        return vector

    values = np.asarray(vector, dtype=np.float64)
    scale = float(np.max(np.abs(values)))

    if scale > 0:
        # Divide by the largest magnitude first so the norm cannot overflow
        scaled = values / scale
        vector[:] = (scaled / np.linalg.norm(scaled)).tolist()
    else:
        vector[0] = 1.0

    return vector


def validate_vector(raw: Any, source: str) -> List[float]:
    """Check that ``raw`` is a non-empty list of finite numbers and copy it as floats."""
    if raw is None:
        raise InvalidEmbeddingResponseError(
            f"Invalid response from {source} - missing embedding data", "missing"
        )

    if not isinstance(raw, list):
        raise InvalidEmbeddingResponseError(
            f"Invalid embedding returned from {source} - expected a list, got {type(raw).__name__}",
            "wrong_type",
        )

    if not raw:
        raise InvalidEmbeddingResponseError(
            f"Invalid embedding returned from {source} - empty vector", "empty"
        )

    for value in raw:
        # bool is an Integral but never a meaningful component
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidEmbeddingResponseError(
                f"Invalid embedding returned from {source} - non-numeric component {value!r}",
                "wrong_type",
            )
        if not math.isfinite(value):
            raise InvalidEmbeddingResponseError(
                f"Invalid embedding returned from {source} - non-finite component {value!r}",
                "wrong_type",
            )

    return [float(value) for value in raw]
