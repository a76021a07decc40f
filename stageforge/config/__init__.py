from .loader import load_project
from .templates import expand_template
from .types import (
    ConfigError,
    Pipeline,
    ProjectConfig,
    Task,
    Template,
    UnsupportedConfigFormatError,
    ValidationError,
)
from .validate import validate, validate_config

__all__ = [
    "load_project",
    "expand_template",
    "validate",
    "validate_config",
    "ProjectConfig",
    "Task",
    "Template",
    "Pipeline",
    "ConfigError",
    "UnsupportedConfigFormatError",
    "ValidationError",
]
