"""Exceptions for font-lister."""


class FontListerError(Exception):
    """Base exception for font-lister errors."""

    pass


class UnsupportedPlatformError(FontListerError):
    """Host operating system is not Windows, Linux or macOS."""

    pass


class FontSettingsError(FontListerError):
    """Base exception for settings errors."""

    pass


class FontSettingsFileError(FontSettingsError):
    """Error reading or parsing the settings file."""

    pass


class FontSettingsValidationError(FontSettingsError):
    """Error validating settings data."""

    pass
