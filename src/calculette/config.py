"""
Calculator configuration.

Settings come from three layers, later ones overriding earlier ones:
1. Defaults declared on CalculatorConfig
2. A YAML or JSON file (CALCULETTE_CONFIG or an explicit path)
3. Environment variables

Environment variables:
    CALCULETTE_CONFIG - Path to a YAML/JSON configuration file
    CALCULETTE_LOG_LEVEL - Log level (debug, info, warning, error)
    CALCULETTE_MAX_EXPRESSION_LENGTH - Maximum expression length
    CALCULETTE_MAX_TOKEN_COUNT - Maximum number of tokens
    CALCULETTE_MAX_NESTING_DEPTH - Maximum parenthesis nesting
    CALCULETTE_MAX_EXPONENT - Maximum integer exponent magnitude
    CALCULETTE_MAX_INTEGER_BITS - Maximum bit length of integer values
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits

ENV_VAR_CONFIG = "CALCULETTE_CONFIG"
ENV_VAR_LOG_LEVEL = "CALCULETTE_LOG_LEVEL"
ENV_VAR_MAX_EXPRESSION_LENGTH = "CALCULETTE_MAX_EXPRESSION_LENGTH"
ENV_VAR_MAX_TOKEN_COUNT = "CALCULETTE_MAX_TOKEN_COUNT"
ENV_VAR_MAX_NESTING_DEPTH = "CALCULETTE_MAX_NESTING_DEPTH"
ENV_VAR_MAX_EXPONENT = "CALCULETTE_MAX_EXPONENT"
ENV_VAR_MAX_INTEGER_BITS = "CALCULETTE_MAX_INTEGER_BITS"

# Environment variable -> config field
_ENV_OVERRIDES = {
    ENV_VAR_LOG_LEVEL: "log_level",
    ENV_VAR_MAX_EXPRESSION_LENGTH: "max_expression_length",
    ENV_VAR_MAX_TOKEN_COUNT: "max_token_count",
    ENV_VAR_MAX_NESTING_DEPTH: "max_nesting_depth",
    ENV_VAR_MAX_EXPONENT: "max_exponent",
    ENV_VAR_MAX_INTEGER_BITS: "max_integer_bits",
}

logger = logging.getLogger(__name__)

LogLevel = Literal["debug", "info", "warning", "error", "critical"]


class CalculatorConfig(BaseModel):
    """Configuration for the calculator and its expression limits."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_level: LogLevel = "warning"

    max_expression_length: int = Field(
        DEFAULT_EXPRESSION_LIMITS.max_expression_length, gt=0
    )
    max_token_count: int = Field(DEFAULT_EXPRESSION_LIMITS.max_token_count, gt=0)
    max_nesting_depth: int = Field(DEFAULT_EXPRESSION_LIMITS.max_nesting_depth, gt=0)
    max_exponent: int = Field(DEFAULT_EXPRESSION_LIMITS.max_exponent, ge=0)

    # Integers of more than about 4300 decimal digits cannot be printed
    max_integer_bits: int = Field(
        DEFAULT_EXPRESSION_LIMITS.max_integer_bits, gt=0, le=14000
    )

    # Print the postfix form next to each result
    show_postfix: bool = False

    # Print the expression tree next to each result
    show_tree: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def to_limits(self) -> ExpressionLimits:
        return ExpressionLimits(
            max_expression_length=self.max_expression_length,
            max_token_count=self.max_token_count,
            max_nesting_depth=self.max_nesting_depth,
            max_exponent=self.max_exponent,
            max_integer_bits=self.max_integer_bits,
        )


def _load_file(path: Path) -> dict[str, Any]:
    """Reads a YAML or JSON mapping (JSON is a subset of YAML)."""
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return data


def load_config(
    path: Optional[str | Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CalculatorConfig:
    """
    Loads the calculator configuration.

    Args:
        path: Optional configuration file; defaults to $CALCULETTE_CONFIG
        env: Environment mapping; defaults to os.environ

    Raises:
        FileNotFoundError: If the configuration file does not exist
        pydantic.ValidationError: If a value is invalid
    """
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    config_path = path or env.get(ENV_VAR_CONFIG)
    if config_path:
        file_path = Path(config_path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")
        values.update(_load_file(file_path))
        logger.debug("config_file_loaded", extra={"path": str(file_path)})

    for env_var, field_name in _ENV_OVERRIDES.items():
        raw = env.get(env_var)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    return CalculatorConfig.model_validate(values)
