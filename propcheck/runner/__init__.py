"""Run configuration, run details and the trial driver."""

from .configuration import Parameters, VerbosityLevel
from .errors import ConfigLoadError, ConfigValidationError
from .loader import load_parameters, parse_parameters_from_string
from .models import ExecutionTree, RunDetails
from .runner import (
    async_check,
    check,
    parse_path,
    replay_path,
    resolve_parameters,
)

__all__ = [
    "ConfigLoadError",
    "ConfigValidationError",
    "ExecutionTree",
    "Parameters",
    "RunDetails",
    "VerbosityLevel",
    "async_check",
    "check",
    "load_parameters",
    "parse_parameters_from_string",
    "parse_path",
    "replay_path",
    "resolve_parameters",
]
