"""End-to-end tests for LocalizeRunner over real directories."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from localizecss import runner as runner_module
from localizecss.config import LocalizeConfig
from localizecss.discovery import discover_languages
from localizecss.errors import DirectoryListingError
from localizecss.runner import LocalizeRunner


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "localize"
    src.mkdir()
    (src / "en.csv").write_text(
        "selector,word\n.hello,Hello\n.bye,Goodbye\n.title:after,Title,color:red\n",
        encoding="utf-8",
    )
    (src / "ja.csv").write_text(
        "selector,word\n.hello,こんにちは\n.title:after,タイトル,color:red\n",
        encoding="utf-8",
    )
    (src / "fr.csv").write_text(
        "selector,word\n.hello,Bonjour\n.bye,Au revoir\n.title:after,Titre\n",
        encoding="utf-8",
    )
    (src / "notes.txt").write_text("not a table\n")
    (src / "nested.csv").mkdir()
    return src


def _runner(source_dir: Path, tmp_path: Path, **kwargs) -> LocalizeRunner:
    config = LocalizeConfig(
        source_dir=str(source_dir), dest_dir=str(tmp_path / "out"), **kwargs
    )
    return LocalizeRunner(config)


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class TestDiscovery:
    def test_only_csv_files(self, source_dir: Path) -> None:
        assert discover_languages(source_dir) == ["en", "fr", "ja"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryListingError) as excinfo:
            discover_languages(tmp_path / "absent")
        assert excinfo.value.directory == tmp_path / "absent"

    def test_bare_extension_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".csv").write_text("a,b\n")
        assert discover_languages(tmp_path) == []


# ---------------------------------------------------------------------------
# load()
# ---------------------------------------------------------------------------


class TestLoad:
    def test_languages(self, source_dir: Path, tmp_path: Path) -> None:
        runner = _runner(source_dir, tmp_path)
        assert runner.load() == ["en", "fr", "ja"]
        assert runner.default_selectors == ()

    def test_default_selectors_loaded(self, source_dir: Path, tmp_path: Path) -> None:
        runner = _runner(source_dir, tmp_path, skip_lines=1, default_language="en")
        runner.load()
        assert runner.default_selectors == (".hello:before", ".bye:before", ".title:after")

    def test_unreadable_default_gives_empty_set(self, source_dir: Path, tmp_path: Path) -> None:
        runner = _runner(source_dir, tmp_path, default_language="xx")
        runner.load()
        assert runner.default_selectors == ()

    def test_missing_source_raises(self, tmp_path: Path) -> None:
        runner = _runner(tmp_path / "absent", tmp_path)
        with pytest.raises(DirectoryListingError):
            runner.load()


# ---------------------------------------------------------------------------
# generate()
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_writes_one_file_per_language(self, source_dir: Path, tmp_path: Path) -> None:
        runner = _runner(source_dir, tmp_path, skip_lines=1, default_language="en")
        results = runner.run()
        assert [r.language for r in results] == ["en", "fr", "ja"]
        assert all(r.written for r in results)
        out = tmp_path / "out"
        assert sorted(p.name for p in out.iterdir()) == ["en.css", "fr.css", "ja.css"]

    def test_default_language_unscoped(self, source_dir: Path, tmp_path: Path) -> None:
        _runner(source_dir, tmp_path, skip_lines=1, default_language="en").run()
        css = (tmp_path / "out" / "en.css").read_text(encoding="utf-8")
        assert css == (
            '.hello:before{content:"Hello"}'
            '.bye:before{content:"Goodbye"}'
            '.title:after{content:"Title";color:red}'
        )

    def test_other_languages_scoped(self, source_dir: Path, tmp_path: Path) -> None:
        _runner(source_dir, tmp_path, skip_lines=1, default_language="en").run()
        css = (tmp_path / "out" / "fr.css").read_text(encoding="utf-8")
        assert css == (
            'body[lang="fr"] .hello:before{content:"Bonjour"}'
            'body[lang="fr"] .bye:before{content:"Au revoir"}'
            'body[lang="fr"] .title:after{content:"Titre"}'
        )

    def test_without_default_every_language_scoped(self, source_dir: Path, tmp_path: Path) -> None:
        results = _runner(source_dir, tmp_path, skip_lines=1).run()
        assert all(r.css.startswith("body[lang=") for r in results)
        assert all(r.diagnostics == [] for r in results)

    def test_header_row_kept_without_skip(self, source_dir: Path, tmp_path: Path) -> None:
        _runner(source_dir, tmp_path).run()
        css = (tmp_path / "out" / "fr.css").read_text(encoding="utf-8")
        assert css.startswith('body[lang="fr"] selector:before{content:"word"}')

    def test_missing_translations_reported(self, source_dir: Path, tmp_path: Path, caplog) -> None:
        runner = _runner(source_dir, tmp_path, skip_lines=1, default_language="en")
        with caplog.at_level(logging.WARNING, logger="localizecss"):
            results = runner.run()
        by_lang = {r.language: r for r in results}
        assert by_lang["ja"].missing == [".bye:before"]
        assert by_lang["fr"].missing == []
        assert by_lang["en"].missing == []
        # Missing items never block output.
        assert by_lang["ja"].written
        messages = [r.getMessage() for r in caplog.records]
        assert "Items missing: ja\n  .bye:before" in messages
        assert not any(m.startswith("Items missing: fr") for m in messages)

    def test_concurrent_reports_not_interleaved(self, tmp_path: Path, caplog) -> None:
        src = tmp_path / "src"
        src.mkdir()
        selectors = [f"s{i}" for i in range(20)]
        (src / "en.csv").write_text(
            "".join(f"{s},word{s}\n" for s in selectors), encoding="utf-8"
        )
        others = ["de", "es", "fr", "it", "ja", "ko"]
        for lang in others:
            (src / f"{lang}.csv").write_text("", encoding="utf-8")

        with caplog.at_level(logging.WARNING, logger="localizecss"):
            _runner(src, tmp_path, default_language="en").run()

        reports = [
            r.getMessage() for r in caplog.records
            if r.getMessage().startswith("Items missing:")
        ]
        assert len(reports) == len(others)
        expected_body = [f"  {s}:before" for s in selectors]
        for report in reports:
            header, *body = report.split("\n")
            assert header.removeprefix("Items missing: ") in others
            assert body == expected_body

    def test_worker_cap(self, source_dir: Path, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setattr(runner_module, "MAX_WORKERS", 1)
        results = _runner(source_dir, tmp_path, skip_lines=1).run()
        assert [r.language for r in results] == ["en", "fr", "ja"]
        assert all(r.written for r in results)

    def test_idempotent(self, source_dir: Path, tmp_path: Path) -> None:
        runner = _runner(source_dir, tmp_path, skip_lines=1, default_language="en")
        runner.run()
        first = {p.name: p.read_bytes() for p in (tmp_path / "out").iterdir()}
        runner.run()
        second = {p.name: p.read_bytes() for p in (tmp_path / "out").iterdir()}
        assert first == second

    def test_write_failure_isolated(self, source_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        out.mkdir()
        # A directory in the way makes fr.css unwritable.
        (out / "fr.css").mkdir()
        results = _runner(source_dir, tmp_path, skip_lines=1).run()
        by_lang = {r.language: r for r in results}
        assert by_lang["fr"].failed
        assert not by_lang["fr"].written
        assert by_lang["en"].written
        assert by_lang["ja"].written
        assert (out / "ja.css").is_file()

    def test_dry_run_writes_nothing(self, source_dir: Path, tmp_path: Path) -> None:
        results = _runner(source_dir, tmp_path, skip_lines=1, dry_run=True).run()
        assert not (tmp_path / "out").exists()
        assert not any(r.written for r in results)
        assert results[0].css.startswith('body[lang="en"] .hello:before')

    def test_empty_source_dir(self, tmp_path: Path) -> None:
        src = tmp_path / "empty"
        src.mkdir()
        assert _runner(src, tmp_path).run() == []

    def test_empty_csv_gives_empty_stylesheet(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()
        (src / "de.csv").write_text("")
        results = _runner(src, tmp_path).run()
        assert results[0].written
        assert (tmp_path / "out" / "de.css").read_text() == ""
