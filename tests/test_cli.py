# File: tests/test_cli.py
"""Тесты для CLI с использованием click.testing.CliRunner.
Сетевые вызовы подменяются через monkeypatch на run_crawl.
"""
import asyncio
import inspect
import json

import pytest
import sitemap_crawler
import sitemap_crawler.cli as cli_module
import sitemap_crawler.engine as engine_module
from click.testing import CliRunner
from sitemap_crawler.cli import cli, collect_sitemaps
from sitemap_crawler.config import resolve_concurrency
from sitemap_crawler.crawler.models import CrawlError, CrawlSummary


@pytest.fixture()
def calls(monkeypatch):
    """Подменяем run_crawl: записываем аргументы вместо обхода."""
    recorded = []

    async def fake_run_crawl(sitemaps, cfg):
        recorded.append((list(sitemaps), cfg))
        return [CrawlSummary(url, 0, 0, 0) for url in sitemaps]

    monkeypatch.setattr(cli_module, "run_crawl", fake_run_crawl)
    return recorded


@pytest.mark.parametrize("value", [None, "", "abc", "0", "-3"])
def test_resolve_concurrency_defaults(value):
    assert resolve_concurrency(value) == 10


def test_resolve_concurrency_number():
    assert resolve_concurrency(" 25 ") == 25


def test_collect_sitemaps_merges_flags():
    assert collect_sitemaps(["http://a/s.xml"], "http://b/s.xml,,http://c/s.xml") == [
        "http://a/s.xml",
        "http://b/s.xml",
        "http://c/s.xml",
    ]


def test_version_option():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "SitemapCrawler" in result.output


@pytest.mark.parametrize("flag", ["--help", "-h", "-?"])
def test_help_option(flag):
    result = CliRunner().invoke(cli, [flag])
    assert result.exit_code == 0
    assert "--sitemaps" in result.output


def test_no_sitemaps_prints_help(calls):
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 1
    assert "No sitemap URLs provided!" in result.output
    assert "--sitemap" in result.output
    assert calls == []


def test_crawl_output_and_defaults(calls):
    result = CliRunner().invoke(
        cli, ["-sm", "http://a/s.xml", "--sitemaps", "http://b/s.xml", "-p", "abc"]
    )
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines == [
        "Crawling sitemaps: http://a/s.xml, http://b/s.xml",
        "Crawling done.",
    ]
    sitemaps, cfg = calls[0]
    assert sitemaps == ["http://a/s.xml", "http://b/s.xml"]
    assert cfg.max_concurrency == 10


def test_processors_flag_overrides_config(calls, tmp_path):
    cfg_file = tmp_path / "crawler.json"
    cfg_file.write_text(json.dumps({"max_concurrency": 4, "user_agent": "Agent/2.0"}), encoding="utf-8")

    result = CliRunner().invoke(cli, ["--config", str(cfg_file), "-sms", "http://a/s.xml", "-p", "7"])
    assert result.exit_code == 0
    _, cfg = calls[0]
    assert cfg.max_concurrency == 7
    assert cfg.user_agent == "Agent/2.0"


def test_invalid_processors_falls_back_to_config(calls, tmp_path):
    cfg_file = tmp_path / "crawler.yaml"
    cfg_file.write_text("max_concurrency: 4\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["-c", str(cfg_file), "-sm", "http://a/s.xml", "-p", "many"])
    assert result.exit_code == 0
    assert calls[0][1].max_concurrency == 4


def test_bad_config_exits_non_zero(calls, tmp_path):
    cfg_file = tmp_path / "crawler.yaml"
    cfg_file.write_text("max_concurrency: 0\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["-c", str(cfg_file), "-sm", "http://a/s.xml"])
    assert result.exit_code == 1
    assert calls == []


def test_sitemap_failure_exits_non_zero(monkeypatch):
    async def failing(sitemaps, cfg):
        raise CrawlError([(sitemaps[0], ValueError("bad xml"))])

    monkeypatch.setattr(cli_module, "run_crawl", failing)
    result = CliRunner().invoke(cli, ["-sm", "http://a/s.xml"])
    assert result.exit_code == 1
    assert "Crawling done." not in result.output
    assert "bad xml" in result.output


def test_cli_module_is_not_shadowed():
    assert inspect.ismodule(cli_module)
    assert cli_module.cli is cli
    assert sitemap_crawler.main_cli is cli


def test_help_uses_program_name():
    result = CliRunner().invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert result.output.startswith("Usage: sitemap-crawler [OPTIONS]")


def test_progress_lines_in_order(monkeypatch):
    async def fake_crawl_sitemap(url, config, report, echo):
        echo(f"Getting sitemap from {url}...")
        await asyncio.sleep(0.01)
        report("OK", f"{url}/page")
        return CrawlSummary(url, 1, 1, 0)

    monkeypatch.setattr(engine_module, "crawl_sitemap", fake_crawl_sitemap)
    result = CliRunner().invoke(cli, ["-sms", "http://a/s.xml,http://b/s.xml"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[:4] == [
        "Crawling sitemaps: http://a/s.xml, http://b/s.xml",
        "Getting sitemap from http://a/s.xml...",
        "Getting sitemap from http://b/s.xml...",
        "Waiting for crawlers to finish...",
    ]
    assert sorted(lines[4:6]) == ["OK\thttp://a/s.xml/page", "OK\thttp://b/s.xml/page"]
    assert lines[6:] == ["Crawling done."]
