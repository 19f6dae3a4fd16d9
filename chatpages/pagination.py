import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, Iterable, List, TypeVar, Union

from rich.style import Style
from rich.text import Text

from .paging import get_page_bounds, get_total_pages, is_valid_page
from .renderer import PageCommandFunction, RenderedRow, Renderer, RowRenderer
from .styles import as_text, repeat_to_width

if TYPE_CHECKING:
    from .builder import PaginationBuilder

log = logging.getLogger(__name__)
T = TypeVar("T")


class Pagination(Generic[T]):
    """
    Renders pages of a collection as styled text lines: a header, the rows on that page, and a footer with
    navigation buttons.

    Instances are created with a PaginationBuilder and are immutable; a single Pagination can render any number of
    collections and pages.
    """

    __slots__ = (
        "_title",
        "_row_renderer",
        "_page_command",
        "_renderer",
        "_width",
        "_results_per_page",
        "_line_character",
        "_line_style",
        "_previous_button_character",
        "_previous_button_style",
        "_next_button_character",
        "_next_button_style",
    )

    def __init__(
        self,
        title: Text,
        row_renderer: RowRenderer[T],
        page_command: PageCommandFunction,
        *,
        renderer: Renderer,
        width: int,
        results_per_page: int,
        line: "tuple[str, Style]",
        previous_button: "tuple[str, Style]",
        next_button: "tuple[str, Style]",
    ):
        self._title = title
        self._row_renderer = row_renderer
        self._page_command = page_command
        self._renderer = renderer
        self._width = width
        self._results_per_page = results_per_page
        self._line_character, self._line_style = line
        self._previous_button_character, self._previous_button_style = previous_button
        self._next_button_character, self._next_button_style = next_button

    @staticmethod
    def builder() -> "PaginationBuilder":
        """Creates a new pagination builder with every option at its default."""
        from .builder import PaginationBuilder

        return PaginationBuilder()

    def to_builder(self) -> "PaginationBuilder":
        """
        Creates a builder holding this pagination's options.
        The title, row renderer and page command are not carried over: they are passed to build() again.
        """
        return (
            self.builder()
            .width(self._width)
            .results_per_page(self._results_per_page)
            .renderer(self._renderer)
            .line(lambda line: line.set_character(self._line_character).set_style(self._line_style))
            .previous_button(
                lambda button: button.set_character(self._previous_button_character).set_style(
                    self._previous_button_style
                )
            )
            .next_button(
                lambda button: button.set_character(self._next_button_character).set_style(self._next_button_style)
            )
        )

    # ==== options ====
    @property
    def title(self) -> Text:
        return self._title.copy()

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @property
    def width(self) -> int:
        return self._width

    @property
    def results_per_page(self) -> int:
        return self._results_per_page

    # ==== rendering ====
    def total_pages(self, content: Union[int, Iterable[T]]) -> int:
        """Returns the number of pages a collection (or a number of items) spans. There is always at least one."""
        total = content if isinstance(content, int) else len(_as_sequence(content))
        return get_total_pages(total, self._results_per_page)

    def render(self, content: Iterable[T], page: int) -> List[Text]:
        """
        Renders a page of *content*.

        :param content: The items to paginate. Iteration order is row order.
        :param page: The 1-indexed page to render.
        :returns: The header, the lines of each row on the page, and the footer. An empty collection renders
                  as the single empty line, and a page out of range as the single unknown page line.
        """
        content = _as_sequence(content)
        total = len(content)
        if total == 0:
            log.debug(f"Rendering empty view for {self._title.plain!r}")
            return [self._renderer.render_empty()]

        pages = get_total_pages(total, self._results_per_page)
        if not is_valid_page(page, pages):
            log.debug(f"Rendering unknown page {page} of {pages} for {self._title.plain!r}")
            return [self._renderer.render_unknown_page(page, pages)]

        lines = [self._render_header(page, pages)]
        start, end = get_page_bounds(total, page, self._results_per_page)
        for index in range(start, end):
            lines.extend(_as_lines(self._row_renderer(content[index], index)))
        lines.append(self._render_footer(page, pages))
        return lines

    def _render_header(self, page: int, pages: int) -> Text:
        header = as_text(self._renderer.render_header(self._title.copy(), page, pages))
        dashes = self._line((self._width - header.cell_len) // 2)
        return Text.assemble(dashes, header, dashes)

    def _render_footer(self, page: int, pages: int) -> Text:
        previous_button = Text()
        next_button = Text()
        if page > 1:
            previous_button = as_text(
                self._renderer.render_previous_page_button(
                    self._previous_button_character, self._previous_button_style, self._page_command(page - 1)
                )
            )
        if page < pages:
            next_button = as_text(
                self._renderer.render_next_page_button(
                    self._next_button_character, self._next_button_style, self._page_command(page + 1)
                )
            )
        divider = self._line(self._width - previous_button.cell_len - next_button.cell_len)
        return Text.assemble(previous_button, divider, next_button)

    def _line(self, width: int) -> Text:
        return repeat_to_width(self._line_character, width, self._line_style)

    def __repr__(self):
        return (
            f"<Pagination title={self._title.plain!r} width={self._width} "
            f"results_per_page={self._results_per_page} renderer={self._renderer!r}>"
        )


# ==== helpers ====
def _as_sequence(content: Iterable[T]) -> Sequence:
    if isinstance(content, Sequence):
        return content
    return list(content)


def _as_lines(rendered: RenderedRow) -> List[Text]:
    if rendered is None:
        return []
    if isinstance(rendered, (str, Text)):
        return [as_text(rendered)]
    return [as_text(line) for line in rendered]
