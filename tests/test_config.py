# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from docs_to_markdown.config import CrawlerConfig, load_config, with_overrides


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("max_pages: 5\noutput_dir: site", ".yaml", None),
        (json.dumps({"max_pages": 5, "output_dir": "site"}), ".json", None),
        ("max_pages: 0", ".yaml", ValidationError),
        ("unknown_key: 1", ".yml", ValidationError),
        ("max_pages: [unclosed", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{not json", ".json", ValueError),
        ("max_pages = 5", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.max_pages == 5
        assert cfg.output_dir == Path("site")


def test_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == CrawlerConfig()
    assert cfg.max_pages == 100
    assert cfg.request_delay == 1.0
    assert cfg.child_match == "prefix"
    assert not cfg.child_pages_only
    assert not cfg.dedupe_queue
    assert cfg.relative_base == "dirname"


def test_default_file_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("request_delay: 0.5\n", encoding="utf-8")
    assert load_config(None).request_delay == 0.5


def test_explicit_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    cfg = CrawlerConfig()
    with pytest.raises(ValidationError):
        cfg.max_pages = 3


def test_child_match_values():
    assert CrawlerConfig(child_match="segment").child_match == "segment"
    with pytest.raises(ValidationError):
        CrawlerConfig(child_match="fuzzy")


def test_with_overrides():
    base = CrawlerConfig(max_pages=10, child_pages_only=True)
    cfg = with_overrides(base, max_pages=3, child_pages_only=None, request_delay=0)
    assert cfg.max_pages == 3
    assert cfg.child_pages_only is True
    assert cfg.request_delay == 0
    assert base.max_pages == 10
    with pytest.raises(ValidationError):
        with_overrides(base, max_pages=0)


def test_relative_base_values(tmp_path):
    cfg = load_config(write_file(tmp_path, "relative_base: directory\n", ".yaml"))
    assert cfg.relative_base == "directory"
    with pytest.raises(ValidationError):
        CrawlerConfig(relative_base="rfc3986")
