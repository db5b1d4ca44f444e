"""
Parser Registry for Tree-sitter

Manages TypeScript/TSX parsers for the test-harness host.
"""

from pathlib import Path

from tree_sitter import Parser
from tree_sitter_language_pack import get_language

from lazy_transform.observability import get_logger

logger = get_logger(__name__)


class ParserRegistry:
    """
    Registry for language parsers.

    Supports:
    - TypeScript (.ts, .mts, .cts, .d.ts)
    - TSX (.tsx, and .js/.jsx, which the TSX grammar also covers)
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, object] = {}
        self._setup_languages()

    def _register_language(self, name: str, aliases: list[str] | None = None) -> None:
        lang = get_language(name)
        self._languages[name] = lang
        for alias in aliases or []:
            self._languages[alias] = lang
        logger.debug("parser_loaded", language=name, aliases=aliases or [])

    def _setup_languages(self):
        self._register_language("typescript", ["ts"])
        self._register_language("tsx", ["javascript", "js", "jsx"])

    def get_parser(self, language: str) -> Parser | None:
        """
        Get parser for the specified language.

        Args:
            language: Language name (typescript, tsx, javascript)

        Returns:
            Parser instance or None if language not supported
        """
        language = language.lower()

        if language in self._parsers:
            return self._parsers[language]

        lang = self._languages.get(language)
        if not lang:
            return None

        parser = Parser(lang)
        self._parsers[language] = parser
        return parser

    def detect_language(self, file_path: str | Path) -> str | None:
        """
        Detect language from file extension.

        Returns:
            Language name or None if not supported
        """
        name = str(file_path).lower()
        if name.endswith(".d.ts"):
            return "typescript"

        ext_map = {
            ".ts": "typescript",
            ".mts": "typescript",
            ".cts": "typescript",
            ".tsx": "tsx",
            ".js": "javascript",
            ".jsx": "javascript",
            ".mjs": "javascript",
        }
        return ext_map.get(Path(name).suffix)


_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Get the process-wide parser registry."""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
