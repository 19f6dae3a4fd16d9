import logging
from typing import Callable, TypeVar, Union

from pydantic import Field, StrictInt, ValidationError, conint
from rich.text import Text

from . import config
from .errors import IllegalState, InvalidArgument
from .pagination import Pagination
from .renderer import DEFAULT_RENDERER, PageCommandFunction, Renderer, RowRenderer
from .styles import CharacterAndStyle, SettingsBaseModel, default_line, default_next_button, default_previous_button

log = logging.getLogger(__name__)
T = TypeVar("T")

CharacterAndStyleConfigurator = Callable[[CharacterAndStyle], object]


class PaginationOptions(SettingsBaseModel):
    width: StrictInt = Field(default_factory=lambda: config.WIDTH)
    results_per_page: conint(ge=0, strict=True) = Field(default_factory=lambda: config.RESULTS_PER_PAGE)
    line: CharacterAndStyle = Field(default_factory=default_line)
    previous_button: CharacterAndStyle = Field(default_factory=default_previous_button)
    next_button: CharacterAndStyle = Field(default_factory=default_next_button)


class PaginationBuilder:
    """
    Collects the options of a Pagination. Every option has a default; the title, row renderer and page command are
    required and are passed to build().

    Each setter returns the builder, so calls can be chained::

        pagination = (
            Pagination.builder()
            .results_per_page(10)
            .line(lambda line: line.set_character("="))
            .build("Spells", lambda spell, index: Text(spell.name), lambda page: f"!spells {page}")
        )
    """

    def __init__(self):
        self._options = PaginationOptions()
        self._renderer = DEFAULT_RENDERER

    def width(self, width: int) -> "PaginationBuilder":
        """Sets the width of the divider lines. Non-positive widths draw no divider."""
        self._set_option("width", width)
        return self

    def results_per_page(self, results_per_page: int) -> "PaginationBuilder":
        """Sets the number of results per page. 0 puts every result on a single page."""
        self._set_option("results_per_page", results_per_page)
        return self

    def renderer(self, renderer: Renderer) -> "PaginationBuilder":
        if renderer is None:
            raise InvalidArgument("The renderer must not be None.")
        if not isinstance(renderer, Renderer):
            raise InvalidArgument(f"{renderer!r} is not a pagination renderer.")
        self._renderer = renderer
        return self

    def line(self, configurator: CharacterAndStyleConfigurator) -> "PaginationBuilder":
        """Configures the character and style of the divider lines."""
        self._configure("line", configurator)
        return self

    def previous_button(self, configurator: CharacterAndStyleConfigurator) -> "PaginationBuilder":
        self._configure("previous_button", configurator)
        return self

    def next_button(self, configurator: CharacterAndStyleConfigurator) -> "PaginationBuilder":
        self._configure("next_button", configurator)
        return self

    def build(
        self, title: Union[str, Text], row_renderer: RowRenderer[T], page_command: PageCommandFunction
    ) -> Pagination[T]:
        """
        Builds a pagination from the current options.

        :param title: The title displayed in the header of each page.
        :param row_renderer: Renders an item and its absolute index into zero or more lines.
        :param page_command: Returns the command that displays a given page; bound to the navigation buttons.
        :raises IllegalState: if the title, row renderer or page command is missing.
        """
        if title is None:
            raise IllegalState("title")
        if row_renderer is None:
            raise IllegalState("row renderer")
        if page_command is None:
            raise IllegalState("page command")

        options = self._options
        title = Text(title) if isinstance(title, str) else title.copy()
        log.debug(
            f"Building pagination {title.plain!r} "
            f"(width={options.width}, results_per_page={options.results_per_page}, renderer={self._renderer!r})"
        )
        return Pagination(
            title,
            row_renderer,
            page_command,
            renderer=self._renderer,
            width=options.width,
            results_per_page=options.results_per_page,
            line=(options.line.character, options.line.style),
            previous_button=(options.previous_button.character, options.previous_button.style),
            next_button=(options.next_button.character, options.next_button.style),
        )

    # ==== helpers ====
    def _set_option(self, key, value):
        try:
            setattr(self._options, key, value)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid {key.replace('_', ' ')} {value!r}: {e!s}") from e

    def _configure(self, key, configurator):
        """Hands a copy of the current pair to the configurator, then stores the result."""
        if configurator is None:
            raise InvalidArgument(f"The {key.replace('_', ' ')} configurator must not be None.")
        pair = getattr(self._options, key).model_copy()
        try:
            configurator(pair)
        except ValidationError as e:
            raise InvalidArgument(f"Invalid {key.replace('_', ' ')}: {e!s}") from e
        self._set_option(key, pair)
