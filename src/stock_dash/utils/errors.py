"""Custom exceptions."""


class DataRetrievalError(Exception):
    """Raised when a provider fails to return usable data."""


class ParseTimeFrameError(ValueError):
    """Raised when text cannot be parsed into a time frame."""


class EmptyTimeFrameError(ParseTimeFrameError):
    def __init__(self) -> None:
        super().__init__("cannot parse time frame from empty string")


class InvalidTimeFrameError(ParseTimeFrameError):
    def __init__(self, text: str) -> None:
        super().__init__(f"invalid time frame literal: {text!r}")
        self.text = text


class MenuItemNotFoundError(LookupError):
    """Raised when selecting an item that is not in the menu."""


class NoSelectionError(LookupError):
    """Raised when navigating a menu that has nothing selected."""


class MenuOverflowError(NotImplementedError):
    """Raised when hit-testing a menu with more items than visible rows."""
