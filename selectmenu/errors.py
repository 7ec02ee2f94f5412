class SelectMenuException(Exception):
    """A base exception class."""

    def __init__(self, msg):
        super().__init__(msg)


class InvalidArgument(SelectMenuException):
    """Raised when a select menu is built with arguments it cannot honour."""
    pass


class InvalidPageSize(InvalidArgument):
    """Raised when the page size is below 1 or above the select option limit."""

    def __init__(self, page_size, maximum):
        super().__init__(f"Page size must be between 1 and {maximum}, not {page_size!r}.")
        self.page_size = page_size


class InvalidPage(InvalidArgument):
    """Raised when a page index lies outside the menu's pages."""

    def __init__(self, page, page_count):
        super().__init__(f"Page {page!r} is out of range for a menu with {page_count} page(s).")
        self.page = page
        self.page_count = page_count


class DuplicateChoiceValue(InvalidArgument):
    """Raised when two choices share the same value."""

    def __init__(self, value):
        super().__init__(f"Choice values must be unique, but {value!r} appears more than once.")
        self.value = value


class InvalidControlId(InvalidArgument):
    """Raised when a control ID is empty or too long to carry the navigation suffixes."""

    def __init__(self, msg=None):
        super().__init__(msg or "Control ID must be a non-empty string.")


class DuplicateControlId(SelectMenuException):
    """Raised when a menu is started with a control ID that a running menu already owns."""

    def __init__(self, control_id):
        super().__init__(f"A select menu with the control ID {control_id!r} is already running.")
        self.control_id = control_id
