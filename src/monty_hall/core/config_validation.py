"""Shared helpers for strict declarative config validation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np


def validate_allowed_keys(
    mapping: Mapping[str, Any],
    *,
    field_name: str,
    allowed_keys: Iterable[str],
) -> None:
    """Validate that a mapping only contains allowed keys.

    Parameters
    ----------
    mapping : Mapping[str, Any]
        Configuration mapping to validate.
    field_name : str
        Human-readable path used in error messages.
    allowed_keys : Iterable[str]
        Allowed key names for ``mapping``.

    Raises
    ------
    ValueError
        If unknown keys are present.
    """

    allowed = set(str(key) for key in allowed_keys)
    unknown = sorted(str(key) for key in mapping if str(key) not in allowed)
    if unknown:
        raise ValueError(f"{field_name} has unknown keys: {unknown}")


def validate_positive_int(value: Any, *, field_name: str) -> int:
    """Validate a strictly positive integer count.

    Parameters
    ----------
    value : Any
        Candidate value.
    field_name : str
        Human-readable name used in error messages.

    Returns
    -------
    int
        ``value`` as a plain ``int``.

    Raises
    ------
    ValueError
        If ``value`` is a boolean, not an integer, or not ``>= 1``.
    """

    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{field_name} must be a positive integer, got {value!r}")
    if int(value) < 1:
        raise ValueError(f"{field_name} must be >= 1, got {int(value)}")
    return int(value)


def validate_optional_seed(value: Any, *, field_name: str = "seed") -> int | None:
    """Validate an optional non-negative integer RNG seed."""

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{field_name} must be a non-negative integer or null, got {value!r}")
    if int(value) < 0:
        raise ValueError(f"{field_name} must be >= 0, got {int(value)}")
    return int(value)


__all__ = ["validate_allowed_keys", "validate_optional_seed", "validate_positive_int"]
