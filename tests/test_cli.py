"""Tests for the ``folio`` CLI commands.

The command functions are invoked directly (Cyclopts leaves decorated
functions callable) so the tests exercise config loading, the build, and the
``wrote <path>`` output without parsing ``sys.argv``.
"""

from __future__ import annotations

import typing as typ

import pytest

from folio_site import cli

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_build_prints_written_paths(
    site_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``folio build`` writes the site and reports each artefact."""
    target = tmp_path / "dist"
    cli.build(
        config=site_root / "site.yaml", environment="development", output_dir=target
    )
    lines = capsys.readouterr().out.splitlines()
    assert (target / "index.html").exists()
    assert any(line.endswith("index.html") for line in lines)
    assert all(line.startswith("wrote ") for line in lines)


def test_build_in_production_minifies_scripts(
    site_root: Path, tmp_path: Path
) -> None:
    """Production mode routes inline scripts through the JS minifier."""
    layout = site_root / "src" / "_includes" / "script.jinja"
    layout.write_text(
        "<script>{{ source | jsmin | safe }}</script>\n", encoding="utf-8"
    )
    page = site_root / "src" / "script.html"
    page.write_text(
        "---\nlayout: script\nsource: \"var  answer = 40 + 2;  // note\"\n---\n",
        encoding="utf-8",
    )
    target = tmp_path / "dist"
    cli.build(
        config=site_root / "site.yaml", environment="production", output_dir=target
    )
    html = (target / "script" / "index.html").read_text(encoding="utf-8")
    assert "<script>var answer=40+2;</script>" in html


def test_serve_builds_then_serves(
    site_root: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """``folio serve`` builds first and hands the 404 document to the server."""
    calls: dict[str, typ.Any] = {}

    def _fake_serve(output_dir: Path, not_found: Path, **kwargs: typ.Any) -> None:
        calls.update(output_dir=output_dir, not_found=not_found, **kwargs)

    monkeypatch.setattr(cli, "serve_preview", _fake_serve)
    cli.serve(config=site_root / "site.yaml", port=9999)
    assert calls["port"] == 9999
    assert calls["not_found"].name == "404.html"
    assert calls["not_found"].exists(), "the 404 page should be built first"
