"""
Source File representation
"""

from dataclasses import dataclass

from lazy_transform.exceptions import ParsingError


@dataclass
class SourceFile:
    """
    Represents a source code file.

    Attributes:
        file_path: Path as given to the program
        content: File content as string
        language: Programming language
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str
    encoding: str = "utf-8"

    @classmethod
    def from_content(cls, file_path: str, content: str, language: str | None = None) -> "SourceFile":
        """
        Create source file from content string.

        Args:
            file_path: File path
            content: Source code content
            language: Language override (detected from the extension if None)

        Raises:
            ParsingError: If the language cannot be detected
        """
        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(file_path)
            if language is None:
                raise ParsingError("Could not detect language", file_path)

        return cls(file_path=file_path, content=content, language=language)

    @property
    def content_bytes(self) -> bytes:
        return self.content.encode(self.encoding)
