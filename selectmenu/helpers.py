"""
Helper utilities for the select menu.
"""

import logging
from typing import Callable, Iterable

from . import constants
from .errors import DuplicateChoiceValue, InvalidControlId, InvalidPage, InvalidPageSize
from .models import ChoiceItem, NavigationAction, NavigationEvent

log = logging.getLogger(__name__)


# ==== custom ids ====
def prev_id(control_id: str) -> str:
    return f"{control_id}{constants.SUFFIX_PREV}"


def next_id(control_id: str) -> str:
    return f"{control_id}{constants.SUFFIX_NEXT}"


def nothing_id(control_id: str) -> str:
    return f"{control_id}{constants.SUFFIX_NOTHING}"


def classify_event(interaction, control_id: str) -> NavigationEvent:
    """
    Work out what a component interaction asks of the menu owning *control_id*.

    Args:
        interaction: The component interaction (anything with ``data.custom_id`` and ``values``)
        control_id: The control ID of the menu

    Returns:
        The classified event. Custom IDs that belong to neither the menu's select nor its
        navigation buttons are UNRECOGNIZED.
    """
    data = getattr(interaction, "data", None)
    custom_id = getattr(data, "custom_id", None)
    if not isinstance(custom_id, str):
        log.debug(f"Invalid custom_id type received: expected str, got {type(custom_id).__name__}")
        return NavigationEvent(NavigationAction.UNRECOGNIZED, interaction)

    if custom_id == control_id:
        values = getattr(interaction, "values", None)
        if not values:
            log.debug(f"Selection on {control_id!r} carried no values")
            return NavigationEvent(NavigationAction.UNRECOGNIZED, interaction)
        return NavigationEvent(NavigationAction.SELECTED, interaction, value=values[0])
    elif custom_id == prev_id(control_id):
        return NavigationEvent(NavigationAction.PREV, interaction)
    elif custom_id == next_id(control_id):
        return NavigationEvent(NavigationAction.NEXT, interaction)
    elif custom_id == nothing_id(control_id):
        return NavigationEvent(NavigationAction.NOOP, interaction)
    return NavigationEvent(NavigationAction.UNRECOGNIZED, interaction)


def interaction_check(message_id: int) -> Callable[..., bool]:
    """Returns a ``wait_for`` check accepting component interactions on the given message."""

    def check(interaction) -> bool:
        return interaction.message is not None and interaction.message.id == message_id

    return check


# ==== preconditions ====
def check_page_size(page_size: int):
    if not isinstance(page_size, int) or not 1 <= page_size <= constants.MAX_SELECT_OPTIONS:
        raise InvalidPageSize(page_size, constants.MAX_SELECT_OPTIONS)


def check_page(page: int, page_count: int):
    if not isinstance(page, int) or not 0 <= page < page_count:
        raise InvalidPage(page, page_count)


def check_control_id(control_id: str):
    if not isinstance(control_id, str) or not control_id:
        raise InvalidControlId()
    longest = max(len(suffix) for suffix in constants.NAVIGATION_SUFFIXES)
    if len(control_id) + longest > constants.MAX_CUSTOM_ID_LENGTH:
        raise InvalidControlId(
            f"Control ID must be at most {constants.MAX_CUSTOM_ID_LENGTH - longest} characters long "
            f"(got {len(control_id)})."
        )


def check_unique_values(items: Iterable[ChoiceItem]):
    seen = set()
    for item in items:
        if item.value in seen:
            raise DuplicateChoiceValue(item.value)
        seen.add(item.value)
