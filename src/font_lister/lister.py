"""Font enumeration across per-user and system-wide font directories."""

import fnmatch
import logging
import os
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from pathlib import Path

from .directories import DEFAULT_DIRECTORIES
from .directories import FontDirectoryMap
from .directories import detect_platform
from .exceptions import FontListerError
from .models import FontRecord
from .models import Platform
from .models import Scope
from .utils import expand_path

logger = logging.getLogger(__name__)

DEFAULT_NAMES = ("*",)
DEFAULT_SCOPES = (Scope.CURRENT_USER,)


class FontLister:
    """Lists font files installed for the requested scopes.

    Each scope resolves to one directory through the directory table for the
    host platform. Files directly inside that directory are matched against
    every name pattern and one FontRecord is produced per match.

    Scopes are processed in order, and the first scope whose directory is
    missing ends the listing: records gathered for earlier scopes are
    returned and later scopes are not examined.

    Args:
        directories: Platform/scope to path template table (default: DEFAULT_DIRECTORIES)
        platform: Platform to resolve paths for (default: detected from the host)
        environ: Environment used to expand path templates (default: os.environ)
    """

    def __init__(
        self,
        directories: FontDirectoryMap | None = None,
        platform: Platform | str | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self.directories = directories if directories is not None else DEFAULT_DIRECTORIES
        self._platform = Platform.parse(platform) if platform is not None else None
        self.environ = environ if environ is not None else os.environ

    @property
    def platform(self) -> Platform:
        """Platform whose directories are searched.

        Raises:
            UnsupportedPlatformError: If no platform was given and the host is unsupported
        """
        if self._platform is None:
            return detect_platform()
        return self._platform

    # ===== Listing =====

    def list_fonts(
        self,
        names: Iterable[str] | str | None = None,
        scopes: Iterable[Scope | str] | Scope | str | None = None,
    ) -> list[FontRecord]:
        """List fonts matching any of the name patterns in the given scopes.

        Args:
            names: Glob patterns matched case-insensitively against file names (default: ``*``)
            scopes: Scopes to search, in order (default: CurrentUser)

        Returns:
            Records ordered by scope, then pattern, then file name

        Raises:
            UnsupportedPlatformError: If the host platform is not supported
            FontListerError: If an existing font directory cannot be read
            ValueError: If a scope string names no scope
        """
        return list(self.iter_fonts(names, scopes))

    def iter_fonts(
        self,
        names: Iterable[str] | str | None = None,
        scopes: Iterable[Scope | str] | Scope | str | None = None,
    ) -> Iterator[FontRecord]:
        """Lazily yield the records :meth:`list_fonts` would return.

        The platform is resolved and the inputs are read when this method is
        called, so an unsupported platform fails before any record is produced.
        """
        plat = self.platform
        patterns = _as_patterns(names)
        scope_list = _as_scopes(scopes)
        logger.debug(f"Listing fonts on {plat.value} for scopes {[s.value for s in scope_list]} matching {patterns}")
        return self._generate(plat, patterns, scope_list)

    def scope_to_path(self, scope: Scope | str) -> Path | None:
        """Get the font directory for a scope on the current platform.

        Args:
            scope: Scope enum value or name

        Returns:
            Expanded directory path, or None when the table has no usable entry
        """
        return self._scope_to_path(self.platform, Scope.parse(scope))

    # ===== Private Helpers =====

    def _generate(self, plat: Platform, patterns: list[str], scopes: list[Scope]) -> Iterator[FontRecord]:
        for scope in scopes:
            directory = self._scope_to_path(plat, scope)
            if directory is None or not directory.is_dir():
                logger.debug(f"Font directory for {scope.value} not found ({directory}); stopping")
                return

            files = _list_files(directory)
            logger.debug(f"Found {len(files)} files in {directory} ({scope.value})")

            for pattern in patterns:
                matched = 0
                for file_name, file_path in files:
                    if _matches(file_name, pattern):
                        matched += 1
                        yield FontRecord(name=os.path.splitext(file_name)[0], path=file_path, scope=scope.value)
                logger.debug(f"Pattern {pattern!r} matched {matched} files in {scope.value}")

    def _scope_to_path(self, plat: Platform, scope: Scope) -> Path | None:
        template = self.directories.get(plat, {}).get(scope)
        if template is None:
            logger.debug(f"No font directory configured for {plat.value}/{scope.value}")
            return None
        path = expand_path(template, self.environ)
        if path is None:
            logger.debug(f"Could not expand font directory template {template!r}")
            return None
        return Path(os.path.abspath(path))


def _list_files(directory: Path) -> list[tuple[str, str]]:
    """Return ``(name, absolute path)`` for regular files directly in ``directory``.

    Raises:
        FontListerError: If the directory cannot be read
    """
    try:
        with os.scandir(directory) as entries:
            files = [(entry.name, os.path.join(directory, entry.name)) for entry in entries if entry.is_file()]
    except OSError as e:
        raise FontListerError(f"Failed to list fonts in {directory}: {e}") from e
    files.sort(key=lambda item: (item[0].lower(), item[0]))
    return files


def _matches(file_name: str, pattern: str) -> bool:
    """Case-insensitive glob match against the file name, with or without its extension."""
    pattern = pattern.lower()
    file_name = file_name.lower()
    if fnmatch.fnmatchcase(file_name, pattern):
        return True
    stem = os.path.splitext(file_name)[0]
    return stem != file_name and fnmatch.fnmatchcase(stem, pattern)


def _as_patterns(names: Iterable[str] | str | None) -> list[str]:
    if names is None:
        return list(DEFAULT_NAMES)
    if isinstance(names, str):
        return [names]
    return list(names)


def _as_scopes(scopes: Iterable[Scope | str] | Scope | str | None) -> list[Scope]:
    if scopes is None:
        return list(DEFAULT_SCOPES)
    if isinstance(scopes, (str, Scope)):
        return [Scope.parse(scopes)]
    return [Scope.parse(scope) for scope in scopes]


def list_fonts(
    names: Iterable[str] | str | None = None,
    scopes: Iterable[Scope | str] | Scope | str | None = None,
) -> list[FontRecord]:
    """List installed fonts using the default directory table and the host platform.

    See :meth:`FontLister.list_fonts`.
    """
    return FontLister().list_fonts(names, scopes)
