"""Data models for font-lister."""

from dataclasses import dataclass
from enum import Enum


def _normalize(text: str) -> str:
    return text.replace("-", "").replace("_", "").replace(" ", "").lower()


class Platform(Enum):
    """Host operating system family.

    Values are the display strings used in logs and settings files.
    """

    WINDOWS = "Windows"
    LINUX = "Linux"
    MACOS = "MacOS"

    @classmethod
    def parse(cls, value: "Platform | str") -> "Platform":
        """Convert a member, display string or member name to a Platform.

        Matching ignores case and ``-``/``_`` separators, so ``"macos"``,
        ``"MacOS"`` and ``"mac_os"`` are all accepted.

        Raises:
            ValueError: If the value names no platform
        """
        if isinstance(value, cls):
            return value
        wanted = _normalize(str(value))
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.name)):
                return member
        raise ValueError(f"Unknown platform: {value!r}")


class Scope(Enum):
    """Font installation scope.

    Determines which directory tier is searched for fonts.
    """

    CURRENT_USER = "CurrentUser"
    ALL_USERS = "AllUsers"

    @classmethod
    def parse(cls, value: "Scope | str") -> "Scope":
        """Convert a member, display string or member name to a Scope.

        Raises:
            ValueError: If the value names no scope
        """
        if isinstance(value, cls):
            return value
        wanted = _normalize(str(value))
        for member in cls:
            if wanted in (_normalize(member.value), _normalize(member.name)):
                return member
        raise ValueError(f"Unknown scope: {value!r} (expected one of: {', '.join(m.value for m in cls)})")


@dataclass(frozen=True)
class FontRecord:
    """A font file found under one of the scope directories.

    Attributes:
        name: File name without its extension
        path: Absolute path to the font file
        scope: Display string of the scope the file was found under
    """

    name: str
    path: str
    scope: str

    def to_dict(self) -> dict[str, str]:
        return {"Name": self.name, "Path": self.path, "Scope": self.scope}
