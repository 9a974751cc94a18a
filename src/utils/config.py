"""Configuration helpers for the default applications loader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

DEFAULT_APPS_DIR = Path("/usr/share/mate-control-center/default-apps")


class AppConfig(BaseModel):
    """Application level configuration."""

    apps_dir: Path = Field(default=DEFAULT_APPS_DIR)
    languages: Optional[List[str]] = None


def load_config(path: Path) -> AppConfig:
    """Load configuration from a YAML file."""

    data: Dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig(**data)
