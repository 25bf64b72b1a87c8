"""LocalizeRunner: drive the CSV -> CSS conversion for every language."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from localizecss.config import OUTPUT_EXTENSION, SOURCE_EXTENSION, LocalizeConfig
from localizecss.discovery import discover_languages
from localizecss.model.diagnostic import Diagnostic, Severity
from localizecss.model.result import LanguageResult
from localizecss.model.style_map import StyleMap
from localizecss.parser import load_csv
from localizecss.stylesheet import build_style_map, render_css, scope_prefix, write_stylesheet
from localizecss.validation import check_completeness, report_missing

logger = logging.getLogger(__name__)

MAX_WORKERS = 32


class LocalizeRunner:
    """Orchestrator that wires discovery, parsing, checking and emission.

    ``load()`` must run before ``generate()``: it lists the source directory
    and, when a default language is configured, reads the default selector
    set every other language is checked against.
    """

    def __init__(self, config: LocalizeConfig | None = None) -> None:
        self.config = config or LocalizeConfig()
        self._languages: list[str] = []
        self._default_selectors: tuple[str, ...] = ()

    @property
    def languages(self) -> list[str]:
        return list(self._languages)

    @property
    def default_selectors(self) -> tuple[str, ...]:
        return self._default_selectors

    def source_path(self, language: str) -> Path:
        return Path(self.config.source_dir) / (language + SOURCE_EXTENSION)

    def output_path(self, language: str) -> Path:
        return Path(self.config.dest_dir) / (language + OUTPUT_EXTENSION)

    def load(self) -> list[str]:
        """Discover language files and load the default selector set.

        Raises DirectoryListingError if the source directory cannot be listed.
        """
        self._languages = discover_languages(self.config.source_dir)
        logger.info("Found %d language file(s): %s", len(self._languages), ", ".join(self._languages))

        default = self.config.default_language
        if default:
            records = load_csv(self.source_path(default), self.config.skip_lines)
            self._default_selectors = tuple(r.selector for r in records)
            logger.debug("Default language %s has %d selector(s)", default, len(self._default_selectors))
        else:
            self._default_selectors = ()
        return self.languages

    def convert(self, language: str) -> tuple[StyleMap, list[Diagnostic]]:
        """Parse and build one language's StyleMap, checking it if configured."""
        records = load_csv(self.source_path(language), self.config.skip_lines)
        style_map = build_style_map(records)

        diagnostics: list[Diagnostic] = []
        if self.config.default_language:
            diagnostics = check_completeness(language, style_map, self._default_selectors)
            report_missing(language, diagnostics)
        return style_map, diagnostics

    def process(self, language: str) -> LanguageResult:
        """Run the full parse -> build -> check -> emit chain for *language*."""
        style_map, diagnostics = self.convert(language)
        prefix = scope_prefix(language, self.config.default_language)
        css = render_css(style_map, prefix)

        result = LanguageResult(
            language=language,
            output_path=self.output_path(language),
            rule_count=len(style_map),
            css=css,
            diagnostics=diagnostics,
        )
        if self.config.dry_run:
            return result

        failure = write_stylesheet(result.output_path, css, language=language)
        if failure is not None:
            result.diagnostics.append(failure)
        else:
            result.written = True
        return result

    def generate(self) -> list[LanguageResult]:
        """Process every loaded language concurrently and join the results.

        A failure in one language is recorded on its result and never stops
        the others. Results are returned sorted by language.
        """
        if not self._languages:
            return []

        if not self.config.dry_run:
            try:
                Path(self.config.dest_dir).mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                # Each write will then fail and report on its own.
                logger.error("Cannot create %s: %s", self.config.dest_dir, exc)

        results: list[LanguageResult] = []
        with ThreadPoolExecutor(max_workers=min(len(self._languages), MAX_WORKERS)) as pool:
            futures = {pool.submit(self.process, lang): lang for lang in self._languages}
            for future in as_completed(futures):
                language = futures[future]
                try:
                    result = future.result()
                except Exception as exc:
                    logger.exception("Failed to generate %s", language)
                    result = LanguageResult(
                        language=language,
                        output_path=self.output_path(language),
                        diagnostics=[
                            Diagnostic(
                                rule="generation_failed",
                                severity=Severity.ERROR,
                                message=str(exc),
                                language=language,
                            )
                        ],
                    )
                results.append(result)

        return sorted(results, key=lambda r: r.language)

    def run(self) -> list[LanguageResult]:
        """Convenience wrapper: ``load()`` then ``generate()``."""
        self.load()
        return self.generate()
