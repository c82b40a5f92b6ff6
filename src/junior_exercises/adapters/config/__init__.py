"""Layered configuration: loading, ``--set`` overrides, display, exercise values."""

from __future__ import annotations

from .display import display_config
from .exercises import ExerciseSettings, load_exercise_inputs
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "ExerciseSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_exercise_inputs",
]
