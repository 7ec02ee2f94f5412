import dataclasses
import enum
from typing import Any, Mapping, Optional, Tuple, Union

import disnake

from .pagination import get_page_choices, get_total_pages


@dataclasses.dataclass(frozen=True)
class ChoiceItem:
    """A single selectable option. Choices are identified by their value."""

    label: str
    value: str
    description: Optional[str] = None
    emoji: Optional[Union[str, disnake.PartialEmoji]] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]):
        return cls(
            label=d["label"],
            value=d.get("value", d["label"]),
            description=d.get("description"),
            emoji=d.get("emoji"),
        )

    def to_select_option(self) -> disnake.SelectOption:
        return disnake.SelectOption(label=self.label, value=self.value, description=self.description, emoji=self.emoji)


@dataclasses.dataclass(frozen=True)
class PagerState:
    """
    Everything needed to render one page of a menu.

    States are never mutated: moving to another page builds a new state with :meth:`with_page`.
    """

    items: Tuple[ChoiceItem, ...]
    page_size: int
    current_page: int
    control_id: str
    display_text: str

    @property
    def page_count(self) -> int:
        return get_total_pages(self.items, self.page_size)

    @property
    def page_items(self) -> list:
        return get_page_choices(self.items, self.current_page, self.page_size)

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 0

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.page_count - 1

    def with_page(self, page: int) -> "PagerState":
        return dataclasses.replace(self, current_page=page)


class NavigationAction(enum.Enum):
    SELECTED = "selected"
    PREV = "prev"
    NEXT = "next"
    NOOP = "noop"
    UNRECOGNIZED = "unrecognized"


@dataclasses.dataclass(frozen=True)
class NavigationEvent:
    """A component interaction on a menu, classified by what it asks the menu to do."""

    action: NavigationAction
    interaction: Any  # disnake.MessageInteraction
    value: Optional[str] = None  # only set for SELECTED

    @property
    def custom_id(self) -> Optional[str]:
        return self.interaction.data.custom_id
