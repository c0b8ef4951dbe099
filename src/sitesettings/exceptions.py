"""Errors raised by the settings store."""

from __future__ import annotations

from typing import Iterable


class InvalidFormat(ValueError):
    """A setting definition carries fields outside the setting columns."""

    def __init__(self, unknown_fields: Iterable[str] = ()):
        self.unknown_fields = tuple(sorted(unknown_fields))
        if self.unknown_fields:
            message = f"Unknown setting fields: {', '.join(self.unknown_fields)}"
        else:
            message = "Setting definition is empty"
        super().__init__(message)
