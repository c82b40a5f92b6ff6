"""Start the lib_log_rich runtime from the ``[lib_log_rich]`` section.

The CLI root calls :func:`init_logging` once per invocation; standard
``logging`` records from every module are bridged into the runtime.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from junior_exercises import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; any other key
    is passed through to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(environment="classroom", console_level="INFO").model_extra
        {'console_level': 'INFO'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: Any = config.get("lib_log_rich", default={}) or {}
    settings = LoggingConfigModel.model_validate(section)
    passthrough = settings.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich unless it is already running.

    ``LOG_*`` variables from a ``.env`` file are honoured.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
