"""font-lister: List installed fonts by installation scope.

This library enumerates font files in the well-known font directories of
Windows, Linux and macOS, for two scopes:
- Current user (e.g. ~/.local/share/fonts on Linux)
- All users (e.g. /usr/share/fonts on Linux)

Files are matched against case-insensitive glob patterns and returned as
FontRecord values. Scopes are searched in order, and a scope whose directory
does not exist ends the search.

Public API:
    FontLister: Main class for font enumeration
    list_fonts: Convenience function using the host platform and default table
    FontRecord: Name/path/scope record for one font file
    Platform, Scope: Enums for host platform and installation scope
    DEFAULT_DIRECTORIES: Platform/scope to directory template table
    load_directory_map: Layer a YAML settings file onto the directory table
    FontListerError, UnsupportedPlatformError, FontSettingsError: Exception types

Example:
    ```python
    from font_lister import FontLister, Scope

    lister = FontLister()
    for font in lister.list_fonts(names=["Arial*", "*.otf"], scopes=[Scope.CURRENT_USER, Scope.ALL_USERS]):
        print(font.name, font.scope, font.path)
    ```
"""

from .directories import DEFAULT_DIRECTORIES
from .directories import detect_platform
from .exceptions import FontListerError
from .exceptions import FontSettingsError
from .exceptions import FontSettingsFileError
from .exceptions import FontSettingsValidationError
from .exceptions import UnsupportedPlatformError
from .lister import FontLister
from .lister import list_fonts
from .models import FontRecord
from .models import Platform
from .models import Scope
from .settings import load_directory_map
from .utils import deep_merge

__version__ = "0.1.0"

__all__ = [
    "FontLister",
    "list_fonts",
    "FontRecord",
    "Platform",
    "Scope",
    "DEFAULT_DIRECTORIES",
    "detect_platform",
    "load_directory_map",
    "deep_merge",
    "FontListerError",
    "UnsupportedPlatformError",
    "FontSettingsError",
    "FontSettingsFileError",
    "FontSettingsValidationError",
]
