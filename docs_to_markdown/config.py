# === FILE: docs_to_markdown/config.py ===
"""
Loading and validation of crawler settings.
Pydantic describes the schema; YAML and JSON files are both accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DEFAULT_USER_AGENT = "DocsToMarkdownBot/1.0"


class CrawlerConfig(BaseModel):
    """Settings shared by every crawl started from one CLI invocation."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    output_dir: Path = Field(Path("output"), description="Directory the Markdown files are written to.")
    max_pages: int = Field(100, ge=1, description="Hard limit on successfully processed pages.")
    child_pages_only: bool = Field(False, description="Only follow links below the seed URL.")
    child_match: Literal["prefix", "segment"] = Field(
        "prefix", description="How child pages are matched against the seed URL."
    )
    relative_base: Literal["dirname", "directory"] = Field(
        "dirname", description="Directory plain relative links resolve against."
    )
    dedupe_queue: bool = Field(False, description="Skip links that are already waiting in the queue.")
    request_delay: float = Field(1.0, ge=0, description="Pause after every processed URL (seconds).")
    timeout: float = Field(30.0, gt=0, description="Timeout for a single request (seconds).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> CrawlerConfig:
    """
    Read YAML or JSON and return a validated CrawlerConfig.

    Without *path* the project default ``configs/default.yaml`` is used when it
    exists, otherwise the built-in defaults. An explicit path that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CrawlerConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlerConfig(**data)


def with_overrides(cfg: CrawlerConfig, **overrides: Any) -> CrawlerConfig:
    """Return a validated copy of *cfg*; ``None`` values leave a field untouched."""
    values = cfg.model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlerConfig(**values)


__all__ = ["CrawlerConfig", "load_config", "with_overrides", "ValidationError", "DEFAULT_USER_AGENT"]
