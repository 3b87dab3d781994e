# File: docs_to_markdown/storage.py
"""docs_to_markdown.storage: mapping page URLs to unique Markdown files in the output directory."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence, Union

from docs_to_markdown.logger import logger

__all__: Sequence[str] = (
    "derive_filename",
    "allocate_filename",
    "write_page",
    "ensure_output_dir",
)

_ORIGIN_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://[^/?#]*/?", re.IGNORECASE)
_QUERY_RE = re.compile(r"[?#].*$", re.DOTALL)
_UNSAFE_RE = re.compile(r'[/\\:*?"<>|]')
_MD_SUFFIX = ".md"
# Leaves room for the "_N" collision suffix within the usual 255-byte name limit.
_MAX_STEM_BYTES = 200


def derive_filename(url: str) -> str:
    """Build a filesystem-safe ``.md`` name from *url* (no uniqueness check).

    Long names are cut to at most ``_MAX_STEM_BYTES`` UTF-8 bytes before the
    extension.
    """
    name = _ORIGIN_RE.sub("", url, count=1)
    name = _QUERY_RE.sub("", name)
    name = _UNSAFE_RE.sub("_", name)
    if not name:
        name = "index"
    if name.lower().endswith(_MD_SUFFIX):
        stem, suffix = name[: -len(_MD_SUFFIX)], name[-len(_MD_SUFFIX):]
    else:
        stem, suffix = name, _MD_SUFFIX
    return _truncate(stem) + suffix


def _truncate(stem: str) -> str:
    raw = stem.encode("utf-8")
    if len(raw) <= _MAX_STEM_BYTES:
        return stem
    return raw[:_MAX_STEM_BYTES].decode("utf-8", errors="ignore")


def allocate_filename(url: str, output_dir: Union[str, Path]) -> str:
    """Return a name for *url* that no file in *output_dir* uses yet.

    Collisions get ``_1``, ``_2``, … inserted before the extension.
    """
    directory = Path(output_dir)
    candidate = derive_filename(url)
    base = candidate[: -len(_MD_SUFFIX)]
    counter = 1
    while (directory / candidate).exists():
        candidate = f"{base}_{counter}{_MD_SUFFIX}"
        counter += 1
    return candidate


def write_page(output_dir: Union[str, Path], url: str, markdown: str) -> Path:
    """Persist *markdown* for *url* under a freshly allocated name; return the path."""
    path = Path(output_dir) / allocate_filename(url, output_dir)
    path.write_text(markdown, encoding="utf-8")
    logger.info("Saved: %s", path)
    return path


def ensure_output_dir(path: Union[str, Path]) -> Path:
    """Create *path* (and parents) if missing. OSError propagates."""
    p = Path(path).expanduser()
    p.mkdir(parents=True, exist_ok=True)
    return p
