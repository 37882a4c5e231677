"""Renderer settings, optionally read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotgraph.errors import ConfigurationError

BIN_DIR_ENV = "DOTGRAPH_BIN_DIR"
TIMEOUT_ENV = "DOTGRAPH_TIMEOUT"


@dataclass(slots=True, frozen=True)
class RendererConfig:
    bin_dir: Path | None = None
    timeout: float | None = None

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> RendererConfig:
        """Build a config from ``DOTGRAPH_BIN_DIR`` and ``DOTGRAPH_TIMEOUT``."""
        env = os.environ if environ is None else environ

        bin_dir = env.get(BIN_DIR_ENV) or None
        timeout_text = env.get(TIMEOUT_ENV) or None

        timeout = None
        if timeout_text is not None:
            try:
                timeout = float(timeout_text)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV} must be a number of seconds, got {timeout_text!r}",
                    cause=exc,
                ) from exc
            if timeout <= 0:
                raise ConfigurationError(f"{TIMEOUT_ENV} must be positive, got {timeout_text!r}")

        return cls(bin_dir=Path(bin_dir) if bin_dir else None, timeout=timeout)

    def executable(self, program: str) -> str:
        if self.bin_dir is None:
            return program
        return str(self.bin_dir / program)
