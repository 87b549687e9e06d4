# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from link_walker.config import CrawlConfig, load_config
from link_walker.crawler.models import CrawlParameters


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: http://example.com\nlinks_limit: 10", ".yaml", None),
        (json.dumps({"seed_url": "http://example.com", "links_limit": 10}), ".json", None),
        ("links_limit: -1", ".yaml", ValidationError),
        ("unknown_key: 1", ".yml", ValidationError),
        ("status_code_min: 300\nstatus_code_max: 200", ".yaml", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("seed_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlConfig)
        assert str(cfg.seed_url).rstrip("/") == "http://example.com"
        assert cfg.links_limit == 10


def test_defaults_without_file():
    cfg = load_config(None)
    assert cfg.seed_url is None
    assert (cfg.status_code_min, cfg.status_code_max) == (200, 299)
    assert cfg.links_limit == 0


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_config_is_frozen():
    cfg = CrawlConfig()
    with pytest.raises(ValidationError):
        cfg.links_limit = 5


def test_with_overrides_skips_none_and_revalidates():
    cfg = CrawlConfig(seed_url="http://example.com", links_limit=3)
    updated = cfg.with_overrides(links_limit=None, timeout=1.5)
    assert updated.links_limit == 3
    assert updated.timeout == 1.5
    with pytest.raises(ValidationError):
        cfg.with_overrides(status_code_min=500, status_code_max=400)


def test_parameters_from_config():
    cfg = CrawlConfig(timeout=3.0, status_code_max=399, only_same_host=False, links_limit=7)
    params = CrawlParameters.from_config(cfg, print)
    assert params.check_content is print
    assert params.timeout == 3.0
    assert params.accepted_statuses == (200, 399)
    assert params.only_same_host is False
    assert params.links_limit == 7
