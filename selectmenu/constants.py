"""
Constants for the paged select menu.

Discord limits and user-facing strings live here so the menu, its views and its tests agree on them.
"""

# Discord limits
MAX_SELECT_OPTIONS = 25  # a string select holds at most 25 options
MAX_CUSTOM_ID_LENGTH = 100
DEFAULT_PAGE_SIZE = MAX_SELECT_OPTIONS

# Custom ID suffixes
SUFFIX_PREV = "--prev"
SUFFIX_NEXT = "--next"
SUFFIX_NOTHING = "--nothing"
NAVIGATION_SUFFIXES = (SUFFIX_PREV, SUFFIX_NEXT, SUFFIX_NOTHING)

# UI Labels
BUTTON_LABEL_PREVIOUS = "«"
BUTTON_LABEL_NEXT = "»"
PAGE_INDICATOR_FORMAT = "{page}/{total}"

# Messages
ERROR_UNAUTHORIZED_USER = "This menu belongs to someone else. Please start your own command to make a selection."
MSG_NO_OPTIONS = "No options to select."
MSG_NOTHING_HERE = "Psst, there's nothing to do here.\n\n||That button only shows which page you're on.||"
