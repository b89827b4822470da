"""pwfilter custom exceptions."""

from __future__ import annotations


class PWFilterConfigError(Exception):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, key: str = None):
        self.config_path = config_path
        self.key = key
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.key:
            msg += f" (key: {self.key})"
        return msg


class PWFilterInputError(Exception):
    """Raised when a findings file cannot be read or has the wrong shape."""

    def __init__(self, message: str, source: str = None):
        self.source = source
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.source:
            msg += f" (input: {self.source})"
        return msg
