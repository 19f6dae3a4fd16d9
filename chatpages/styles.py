"""
Styles, character/style pairs, and click-target metadata for rendered pages.

Click and hover targets ride along as rich style metadata: the host application decides what to do with them.
"""

from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, constr, field_validator
from rich.cells import cell_len
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from . import config
from .errors import InvalidArgument

# ==== palette ====
GRAY = Style(color="grey66")
DARK_GRAY = Style(color="grey35")
WHITE = Style(color="bright_white")
RED = Style(color="bright_red")
GREEN = Style(color="bright_green")

# ==== navigation metadata ====
COMMAND_META_KEY = "command"
HOVER_META_KEY = "hover"


def run_command(command: str) -> Style:
    """Returns a style that binds *command* as the click target of whatever it is applied to."""
    return Style.from_meta({COMMAND_META_KEY: command})


def show_text(text: str) -> Style:
    """Returns a style that carries *text* as hover text."""
    return Style.from_meta({HOVER_META_KEY: text})


def iter_commands(text: Text) -> Iterator[Tuple[str, str]]:
    """Yields a (fragment, command) pair for each command-bound span of a rendered line, left to right."""
    plain = text.plain
    for span in sorted(text.spans, key=lambda s: s.start):
        style = span.style
        # string styles are parsed markup and can never carry metadata
        if isinstance(style, Style) and COMMAND_META_KEY in style.meta:
            yield plain[span.start : span.end], style.meta[COMMAND_META_KEY]


def as_text(line: Union[str, Text]) -> Text:
    if isinstance(line, Text):
        return line
    if isinstance(line, str):
        return Text(line)
    raise TypeError(f"Expected a str or rich Text, got {type(line).__name__}")


def repeat_to_width(character: str, width: int, style: Optional[Style] = None) -> Text:
    """
    Repeats *character* to fill at most *width* terminal cells.
    Wide characters fill fewer repetitions; a non-positive width yields an empty run.
    """
    cells = cell_len(character)
    count = max(0, width) // cells if cells else 0
    return Text(character * count, style=style or "")


# ==== character + style pairs ====
class SettingsBaseModel(BaseModel):
    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)


class CharacterAndStyle(SettingsBaseModel):
    """
    A mutable character and style pair, handed to the line and button configurators of a PaginationBuilder.

    Either assign the attributes directly or use the chainable setters::

        builder.line(lambda line: line.set_character("=").set_style("blue"))
    """

    character: constr(min_length=1, max_length=1)
    style: Style

    @field_validator("style", mode="before")
    @classmethod
    def parse_style(cls, value):
        if isinstance(value, str):
            try:
                return Style.parse(value)
            except StyleSyntaxError as e:
                raise ValueError(str(e)) from e
        return value

    def set_character(self, character: str) -> "CharacterAndStyle":
        try:
            self.character = character
        except ValidationError as e:
            raise InvalidArgument(f"Invalid character {character!r}: {e!s}") from e
        return self

    def set_style(self, style: Union[Style, str]) -> "CharacterAndStyle":
        try:
            self.style = style
        except ValidationError as e:
            raise InvalidArgument(f"Invalid style {style!r}: {e!s}") from e
        return self


def default_line() -> CharacterAndStyle:
    return CharacterAndStyle(character=config.LINE_CHARACTER, style=DARK_GRAY)


def default_previous_button() -> CharacterAndStyle:
    return CharacterAndStyle(
        character=config.PREVIOUS_PAGE_BUTTON_CHARACTER, style=RED + show_text("Previous Page")
    )


def default_next_button() -> CharacterAndStyle:
    return CharacterAndStyle(character=config.NEXT_PAGE_BUTTON_CHARACTER, style=GREEN + show_text("Next Page"))
