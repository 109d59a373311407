"""Exceptions raised for invalid widget trees and font lookups."""


class WidgetConfigError(ValueError):
    """A widget or render setting is structurally invalid."""


class UnknownFontError(LookupError):
    """Requested font name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown font {name!r}")
