"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/text_service.py
Text and file operations around the sorting core: line splitting with
line-ending preservation, reading/writing files, and trash backups.
"""
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from send2trash import send2trash

logger = logging.getLogger(__name__)

_PATTERN_EOL = re.compile(r'\r\n|\r|\n')

DEFAULT_EOL = "\n"


@dataclass
class TextDocument:
    """Lines of a text without their terminators, plus what is needed to rebuild it."""
    lines: List[str] = field(default_factory=list)
    eol: str = DEFAULT_EOL
    trailing_eol: bool = False


class TextService:
    """
    Converts between raw text and line lists, and moves text in and out of files.
    """

    @staticmethod
    def split_lines(text: str) -> TextDocument:
        """
        Split text on CRLF, CR and LF.
        The first line ending found becomes the document's line ending.
        A final line ending does not produce an extra empty line.
        """
        if not text:
            return TextDocument()

        first_eol = _PATTERN_EOL.search(text)
        eol = first_eol.group() if first_eol else DEFAULT_EOL

        lines = _PATTERN_EOL.split(text)
        trailing_eol = lines[-1] == ""
        if trailing_eol:
            lines.pop()

        return TextDocument(lines=lines, eol=eol, trailing_eol=trailing_eol)

    @staticmethod
    def join_lines(lines: List[str], eol: str = DEFAULT_EOL, trailing_eol: bool = False) -> str:
        if not lines:
            return ""
        text = eol.join(lines)
        return text + eol if trailing_eol else text

    @staticmethod
    def read_text(file_path: str, encoding: str = "utf-8") -> str:
        """Reads a whole file, keeping its line endings untouched."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise RuntimeError(f"Not a regular file: {path}")

        try:
            with open(path, "r", encoding=encoding, newline="") as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise RuntimeError(f"Cannot decode {path.name} as {encoding}: {e.reason}") from e
        except OSError as e:
            raise RuntimeError(f"Failed to read file: {e}") from e

    @staticmethod
    def write_text(file_path: str, text: str, encoding: str = "utf-8") -> None:
        """Writes text as-is (no newline translation)."""
        path = Path(file_path).resolve()
        try:
            with open(path, "w", encoding=encoding, newline="") as f:
                f.write(text)
        except OSError as e:
            raise RuntimeError(f"Failed to write file: {e}") from e
        logger.debug(f"Wrote {len(text)} characters to {path}")

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

    @classmethod
    def replace_with_backup(cls, file_path: str, text: str, encoding: str = "utf-8",
                            backup: bool = True) -> None:
        """
        Rewrites a file in place. With backup=True the previous version is moved
        to the system trash first, so it stays recoverable.
        """
        if backup:
            cls.move_to_trash(file_path)
            logger.debug(f"Moved previous version of {file_path} to trash")
        cls.write_text(file_path, text, encoding=encoding)
