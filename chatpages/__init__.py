"""
Paginates collections into pages of styled, interactive text lines for chat-style output.
"""

from . import config
from .builder import PaginationBuilder, PaginationOptions
from .errors import IllegalState, InvalidArgument, PaginationException
from .pagination import Pagination
from .renderer import DEFAULT_RENDERER, DefaultRenderer, PageCommandFunction, Renderer, RowRenderer
from .styles import CharacterAndStyle, iter_commands, run_command, show_text

__all__ = (
    "CharacterAndStyle",
    "DEFAULT_RENDERER",
    "DefaultRenderer",
    "IllegalState",
    "InvalidArgument",
    "PageCommandFunction",
    "Pagination",
    "PaginationBuilder",
    "PaginationException",
    "PaginationOptions",
    "Renderer",
    "RowRenderer",
    "iter_commands",
    "run_command",
    "show_text",
)
