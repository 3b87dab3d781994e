# File: docs_to_markdown/report/__init__.py
"""docs_to_markdown.report: crawl reports written next to the Markdown output."""

from docs_to_markdown.report.manifest import build_manifest, render_manifest

__all__ = ["build_manifest", "render_manifest"]
