"""
Paged select menus for Discord.

This package provides a select menu that pages through any number of choices with previous/next buttons
and hands the chosen option to a callback.
"""

from .errors import (
    DuplicateChoiceValue,
    DuplicateControlId,
    InvalidArgument,
    InvalidControlId,
    InvalidPage,
    InvalidPageSize,
    SelectMenuException,
)
from .menu import PagedChooser, send_paged_menu
from .models import ChoiceItem, NavigationAction, NavigationEvent, PagerState
from .pagination import chunk, get_page_choices, get_total_pages
from .renderers import FreshRenderer, HintRenderer, InPlaceRenderer, Renderer
from .views import build_components

__all__ = (
    # Menu
    "PagedChooser",
    "send_paged_menu",
    # Models
    "ChoiceItem",
    "NavigationAction",
    "NavigationEvent",
    "PagerState",
    # Rendering
    "Renderer",
    "FreshRenderer",
    "InPlaceRenderer",
    "HintRenderer",
    "build_components",
    # Pagination
    "chunk",
    "get_page_choices",
    "get_total_pages",
    # Errors
    "SelectMenuException",
    "InvalidArgument",
    "InvalidPageSize",
    "InvalidPage",
    "DuplicateChoiceValue",
    "InvalidControlId",
    "DuplicateControlId",
)
