"""Text splitting, file I/O and trash backup services."""

from .text_service import TextService, TextDocument

__all__ = ["TextService", "TextDocument"]
