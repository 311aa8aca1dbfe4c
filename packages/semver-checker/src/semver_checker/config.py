# SPDX-License-Identifier: MIT
"""Parser configuration for semantic version parsing.

The only tunable is the maximum accepted input length, a bound that keeps
the work done per parse proportional to a small constant.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


class ConfigError(Exception):
    """Raised when parser configuration is invalid."""

    pass


# Longest input accepted by the parser (DoS bound)
DEFAULT_MAX_LENGTH = 64

# Largest value a core version field may hold (unsigned 32-bit)
UINT32_MAX = 4294967295

# Environment variable consulted by ParserConfig.from_env
MAX_LENGTH_ENV = "SEMVER_MAX_LENGTH"


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Configuration for the version parser.

    Attributes:
        max_length: Longest input string accepted; longer input is invalid
    """

    max_length: int = DEFAULT_MAX_LENGTH

    def __post_init__(self) -> None:
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ConfigError(f"max_length must be an integer, got {self.max_length!r}")
        if self.max_length < 1:
            raise ConfigError(f"max_length must be positive, got {self.max_length}")

    @classmethod
    def from_env(cls) -> "ParserConfig":
        """Create configuration from environment variables."""
        raw = os.getenv(MAX_LENGTH_ENV, "").strip()
        if not raw:
            return cls()

        try:
            max_length = int(raw)
        except ValueError:
            raise ConfigError(f"{MAX_LENGTH_ENV} must be an integer, got {raw!r}") from None

        return cls(max_length=max_length)
