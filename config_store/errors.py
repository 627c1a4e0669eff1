"""Errors raised by the configuration store."""


class ConfigLoadError(RuntimeError):
    """The settings source failed or returned something that is not a str->str mapping."""
