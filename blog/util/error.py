"""Errors raised while wiring the application."""


class UtilError(Exception):
    """Base utility error."""


class ConfigurationError(UtilError):
    """A setting holds a value the current environment refuses to run with."""

    def __init__(self, setting: str, reason: str):
        self.setting = setting
        self.reason = reason
        super().__init__(f"{setting}: {reason}")
