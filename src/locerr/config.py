"""TOML config loading for locerr.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TextIO

logger = logging.getLogger("locerr.config")

CONFIG_NAME = "locerr.toml"


class ColorMode(Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def resolve(self, stream: TextIO | None = None) -> bool:
        """Decide whether to emit color when writing to *stream*."""
        if self is ColorMode.ALWAYS:
            return True
        if self is ColorMode.NEVER:
            return False
        isatty = getattr(stream, "isatty", None)
        return bool(isatty is not None and isatty())


@dataclass
class RenderConfig:
    color: ColorMode = ColorMode.AUTO
    emphasize: bool = False
    base_dir: Path | None = None  # None: the working directory


def find_config(start_path: Path | None = None) -> Path:
    """Walk up directories to find locerr.toml. Raises FileNotFoundError."""
    path = (start_path or Path.cwd()).resolve()
    if path.is_file():
        path = path.parent
    while True:
        candidate = path / CONFIG_NAME
        if candidate.exists():
            logger.debug("using config %s", candidate)
            return candidate
        parent = path.parent
        if parent == path:
            raise FileNotFoundError(f"No {CONFIG_NAME} found in any parent directory")
        path = parent


def load_config(path: Path) -> RenderConfig:
    """Parse the [render] table of a locerr.toml file."""
    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = RenderConfig()

    if "render" in data:
        rnd = data["render"]
        color = rnd.get("color", "auto")
        try:
            mode = ColorMode(color)
        except ValueError:
            raise ValueError(
                f"{path}: invalid color mode {color!r} (expected auto, always or never)"
            ) from None
        base_dir = rnd.get("base_dir")
        config = RenderConfig(
            color=mode,
            emphasize=bool(rnd.get("emphasize", False)),
            base_dir=(path.parent / base_dir).resolve() if base_dir is not None else None,
        )

    return config
