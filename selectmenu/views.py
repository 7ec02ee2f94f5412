"""
Discord UI components for the paged select menu.
"""

from typing import List

import disnake

from . import constants
from .helpers import next_id, nothing_id, prev_id
from .models import PagerState


def build_select(state: PagerState, expired: bool = False) -> disnake.ui.StringSelect:
    """The dropdown listing the current page's choices."""
    return disnake.ui.StringSelect(
        custom_id=state.control_id,
        options=[item.to_select_option() for item in state.page_items],
        disabled=expired,
    )


def build_navigation(state: PagerState, expired: bool = False) -> List[disnake.ui.Button]:
    """
    The previous / page indicator / next buttons.

    Previous and Next are disabled (and styled as danger) on the first and last page respectively.
    The page indicator is a label and is always disabled.
    """
    prev_button = disnake.ui.Button(
        label=constants.BUTTON_LABEL_PREVIOUS,
        style=disnake.ButtonStyle.danger if state.is_first_page else disnake.ButtonStyle.primary,
        disabled=expired or state.is_first_page,
        custom_id=prev_id(state.control_id),
    )
    page_indicator = disnake.ui.Button(
        label=constants.PAGE_INDICATOR_FORMAT.format(page=state.current_page + 1, total=state.page_count),
        style=disnake.ButtonStyle.success,
        disabled=True,
        custom_id=nothing_id(state.control_id),
    )
    next_button = disnake.ui.Button(
        label=constants.BUTTON_LABEL_NEXT,
        style=disnake.ButtonStyle.danger if state.is_last_page else disnake.ButtonStyle.primary,
        disabled=expired or state.is_last_page,
        custom_id=next_id(state.control_id),
    )
    return [prev_button, page_indicator, next_button]


def build_components(state: PagerState, expired: bool = False) -> List[disnake.ui.ActionRow]:
    """
    Build the control set for the state's current page.

    Layout:
        - Row 0: the select menu
        - Row 1: navigation buttons (only if there is more than one page)

    If *expired* is set every control is disabled.
    """
    rows = [disnake.ui.ActionRow(build_select(state, expired))]
    if state.page_count > 1:
        rows.append(disnake.ui.ActionRow(*build_navigation(state, expired)))
    return rows
