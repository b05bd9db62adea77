"""Simulation configuration and its JSON/YAML file form.

A config file holds a single mapping with the optional keys ``n_trials`` and
``seed``; for example ``n_trials: 1000`` and ``seed: 7`` in YAML.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from monty_hall.core.config_validation import (
    validate_allowed_keys,
    validate_optional_seed,
    validate_positive_int,
)

DEFAULT_N_TRIALS = 100
CONFIG_KEYS: tuple[str, ...] = ("n_trials", "seed")
SUPPORTED_CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Runtime configuration for one simulated batch.

    Parameters
    ----------
    n_trials : int, optional
        Number of games to play. Defaults to ``100``.
    seed : int | None, optional
        Seed used to initialize the random generator. ``None`` uses
        NumPy's entropy source.

    Raises
    ------
    ValueError
        If ``n_trials`` is not a positive integer or ``seed`` is negative.
    """

    n_trials: int = DEFAULT_N_TRIALS
    seed: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "n_trials", validate_positive_int(self.n_trials, field_name="n_trials"))
        object.__setattr__(self, "seed", validate_optional_seed(self.seed))


def simulation_config_from_mapping(config: Mapping[str, Any]) -> SimulationConfig:
    """Build :class:`SimulationConfig` from a declarative mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Mapping with optional keys ``n_trials`` and ``seed``.

    Returns
    -------
    SimulationConfig
        Parsed config; missing keys take their defaults.

    Raises
    ------
    ValueError
        If unknown keys are present or values are invalid.
    """

    validate_allowed_keys(config, field_name="config", allowed_keys=CONFIG_KEYS)
    return SimulationConfig(
        n_trials=config.get("n_trials", DEFAULT_N_TRIALS),
        seed=config.get("seed"),
    )


def load_simulation_config(path: str | Path) -> SimulationConfig:
    """Read and validate a simulation config file.

    Parameters
    ----------
    path : str | pathlib.Path
        Config file path (`.json`, `.yaml`, or `.yml`).

    Returns
    -------
    SimulationConfig
        Parsed config; keys absent from the file take their defaults.

    Raises
    ------
    ValueError
        If the file type is unsupported, the root is not a mapping, or the
        mapping holds unknown keys or invalid values.
    """

    return simulation_config_from_mapping(load_config_mapping(path))


def load_config_mapping(path: str | Path) -> dict[str, Any]:
    """Read a config file into a plain mapping without validating its keys.

    An empty YAML document reads as ``{}`` so every key takes its default.

    Raises
    ------
    ValueError
        If suffix is unsupported or config root is not an object mapping.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in SUPPORTED_CONFIG_SUFFIXES:
        supported = ", ".join(SUPPORTED_CONFIG_SUFFIXES)
        raise ValueError(
            f"unsupported config file extension {suffix!r}; expected one of {supported}"
        )

    with config_path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle) if suffix == ".json" else yaml.safe_load(handle)

    if raw is None and suffix != ".json":
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"config root in {config_path.name} must be a JSON/YAML object")
    return raw


__all__ = [
    "CONFIG_KEYS",
    "DEFAULT_N_TRIALS",
    "SUPPORTED_CONFIG_SUFFIXES",
    "SimulationConfig",
    "load_config_mapping",
    "load_simulation_config",
    "simulation_config_from_mapping",
]
