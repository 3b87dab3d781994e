# docs_to_markdown/report/manifest.py

"""
JSON manifest of a finished crawl.

Maps every saved page back to the URL it came from and lists the URLs that
could not be fetched.
"""
import json
from pathlib import Path
from typing import Any, Dict

from docs_to_markdown.crawler.models import CrawlSummary


def build_manifest(summary: CrawlSummary) -> Dict[str, Any]:
    """Return the manifest of *summary* as a JSON-serialisable dict."""
    return {
        'pages_processed': summary.pages_processed,
        'remaining': summary.remaining,
        'limit_reached': summary.limit_reached,
        'pages': [{'url': p.source_url, 'filename': p.saved_filename} for p in summary.pages],
        'failures': [{'url': f.url, 'reason': f.reason} for f in summary.failures],
    }


def render_manifest(summary: CrawlSummary, output_path: Path | str) -> Path:
    """
    Save the manifest of *summary* as JSON at *output_path*.

    :param summary: result of a crawl
    :param output_path: path of the JSON file
    :return: Path of the saved file

    Example:
    ```python
    from docs_to_markdown.report import render_manifest
    path = render_manifest(summary, 'output/manifest.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(build_manifest(summary), f, ensure_ascii=False, indent=2)

    return output
