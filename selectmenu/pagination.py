"""
Pagination utilities for the select menu.

This module provides the page arithmetic behind the menu: splitting a list of choices into pages,
or fetching a single page without building the rest.
"""

from typing import List, Any, Sequence


def chunk(choices: Sequence[Any], page_size: int) -> List[List[Any]]:
    """
    Split choices into ordered pages of at most *page_size* elements.

    Every page but the last holds exactly *page_size* choices. An empty input yields no pages.

    :raises ValueError: if page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be at least 1, got {page_size}")
    return [list(choices[i : i + page_size]) for i in range(0, len(choices), page_size)]


def get_page_choices(choices: Sequence[Any], page: int, per_page: int) -> List[Any]:
    """Get choices for a specific page without creating all pages."""
    if page < 0:
        return []
    start_idx = page * per_page
    end_idx = start_idx + per_page
    return list(choices[start_idx:end_idx])


def get_total_pages(choices: Sequence[Any], per_page: int) -> int:
    """Calculate total pages needed for choices."""
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")
    return (len(choices) + per_page - 1) // per_page
