"""Ports between the lesson domain and the adapters that feed and print it."""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, GetDefaultConfigPath, InitLogging, LoadExerciseInputs, WriteLines

__all__ = ["DisplayConfig", "GetConfig", "GetDefaultConfigPath", "InitLogging", "LoadExerciseInputs", "WriteLines"]
