"""Font directory table and host platform detection."""

import logging
import platform as _platform

from .exceptions import UnsupportedPlatformError
from .models import Platform
from .models import Scope

logger = logging.getLogger(__name__)

FontDirectoryMap = dict[Platform, dict[Scope, str]]

DEFAULT_DIRECTORIES: FontDirectoryMap = {
    Platform.WINDOWS: {
        Scope.CURRENT_USER: r"%LOCALAPPDATA%\Microsoft\Windows\Fonts",
        Scope.ALL_USERS: r"%WINDIR%\Fonts",
    },
    Platform.LINUX: {
        Scope.CURRENT_USER: "~/.local/share/fonts",
        Scope.ALL_USERS: "/usr/share/fonts",
    },
    Platform.MACOS: {
        Scope.CURRENT_USER: "~/Library/Fonts",
        Scope.ALL_USERS: "/Library/Fonts",
    },
}

# platform.system() result -> Platform
_SYSTEM_NAMES = {
    "Windows": Platform.WINDOWS,
    "Linux": Platform.LINUX,
    "Darwin": Platform.MACOS,
}


def detect_platform() -> Platform:
    """Classify the host operating system.

    Returns:
        Platform of the running interpreter

    Raises:
        UnsupportedPlatformError: If the host is not Windows, Linux or macOS
    """
    system = _platform.system()
    try:
        detected = _SYSTEM_NAMES[system]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported platform: {system or 'unknown'}") from None
    logger.debug(f"Detected platform {detected.value} (platform.system() = {system!r})")
    return detected


def copy_directory_map(directories: FontDirectoryMap) -> FontDirectoryMap:
    """Return a copy of a directory map that can be modified independently."""
    return {plat: dict(scopes) for plat, scopes in directories.items()}
