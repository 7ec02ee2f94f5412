import os

# ==== paged select menu config / env vars ====
# seconds to wait for a component interaction before giving up; 0 or empty waits forever
SELECTION_TIMEOUT = float(os.getenv("SELECTMENU_TIMEOUT", "180") or 0) or None
# lifetime of the "nothing to do here" hint and the channel "no options" notice
HINT_DELETE_AFTER = float(os.getenv("SELECTMENU_HINT_DELETE_AFTER", "10"))
DEFAULT_DISPLAY_TEXT = os.getenv("SELECTMENU_DEFAULT_TEXT", "Select an option:")
