"""
Renderers turn pagination state into styled text.

A renderer only knows how to draw individual pieces of a page (the header, the navigation buttons, and the two
alternate views). Where those pieces go is decided by the Pagination itself.
"""

from typing import Callable, Iterable, Optional, Protocol, TypeVar, Union, runtime_checkable

from rich.style import Style
from rich.text import Text

from .styles import GRAY, WHITE, run_command

T = TypeVar("T")

RenderedRow = Union[None, str, Text, Iterable[Union[str, Text]]]
RowRenderer = Callable[[Optional[T], int], RenderedRow]
"""Renders the item at a given absolute index into zero or more lines."""
PageCommandFunction = Callable[[int], str]
"""Returns the command that displays a given page."""


@runtime_checkable
class Renderer(Protocol):
    """The hooks a pagination renderer must provide. See DefaultRenderer for the stock behaviour."""

    def render_empty(self) -> Text:
        ...

    def render_unknown_page(self, page: int, pages: int) -> Text:
        ...

    def render_header(self, title: Text, page: int, pages: int) -> Text:
        ...

    def render_previous_page_button(self, character: str, style: Style, command: str) -> Text:
        ...

    def render_next_page_button(self, character: str, style: Style, command: str) -> Text:
        ...


class DefaultRenderer:
    """
    The stock renderer. Subclass it and override any single hook to change one piece of the output::

        class QuietRenderer(DefaultRenderer):
            def render_empty(self):
                return Text("Nothing here.")
    """

    GRAY_LEFT_ROUND_BRACKET = ("(", GRAY)
    GRAY_LEFT_SQUARE_BRACKET = ("[", GRAY)
    GRAY_RIGHT_ROUND_BRACKET = (")", GRAY)
    GRAY_RIGHT_SQUARE_BRACKET = ("]", GRAY)
    GRAY_FORWARD_SLASH = ("/", GRAY)

    def render_empty(self) -> Text:
        """Renders an empty result. No header or footer is rendered alongside it."""
        return Text("No results match.", style=GRAY)

    def render_unknown_page(self, page: int, pages: int) -> Text:
        """Renders a request for a page that does not exist. No header or footer is rendered alongside it."""
        return Text(f"Unknown page selected. {pages} total pages.", style=GRAY)

    def render_header(self, title: Text, page: int, pages: int) -> Text:
        return Text.assemble(
            " ",
            title,
            " ",
            self.GRAY_LEFT_ROUND_BRACKET,
            (str(page), WHITE),
            self.GRAY_FORWARD_SLASH,
            (str(pages), WHITE),
            self.GRAY_RIGHT_ROUND_BRACKET,
            " ",
        )

    def render_previous_page_button(self, character: str, style: Style, command: str) -> Text:
        return self._render_button(character, style, command)

    def render_next_page_button(self, character: str, style: Style, command: str) -> Text:
        return self._render_button(character, style, command)

    def _render_button(self, character: str, style: Style, command: str) -> Text:
        return Text.assemble(
            " ",
            self.GRAY_LEFT_SQUARE_BRACKET,
            (character, style + run_command(command)),
            self.GRAY_RIGHT_SQUARE_BRACKET,
            " ",
        )

    def __repr__(self):
        if self is DEFAULT_RENDERER:
            return "Pagination.DEFAULT_RENDERER"
        return f"<{type(self).__name__}>"


DEFAULT_RENDERER = DefaultRenderer()
