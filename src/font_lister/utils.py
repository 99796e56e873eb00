"""Utility functions for font-lister."""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

# %NAME% (Windows style) and ${NAME}; a bare $ is literal
_ENV_REFERENCE = re.compile(r"%(?P<win>[A-Za-z_][A-Za-z0-9_()]*)%|\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)\}")


def deep_merge(base: dict[Any, Any], overlay: dict[Any, Any]) -> dict[Any, Any]:
    """Deep merge two dictionaries with overlay precedence.

    Recursively merges nested dictionaries. Non-dict values in overlay
    completely replace corresponding values in base, and a ``None`` value in
    overlay removes the key from the result.

    Args:
        base: Base dictionary
        overlay: Overlay dictionary (takes precedence)

    Returns:
        New merged dictionary (base and overlay are not modified)

    Examples:
        >>> base = {"linux": {"CurrentUser": "~/.local/share/fonts", "AllUsers": "/usr/share/fonts"}}
        >>> deep_merge(base, {"linux": {"CurrentUser": "~/.fonts"}})
        {'linux': {'CurrentUser': '~/.fonts', 'AllUsers': '/usr/share/fonts'}}

        >>> deep_merge(base, {"linux": {"AllUsers": None}})
        {'linux': {'CurrentUser': '~/.local/share/fonts'}}
    """
    result = base.copy()

    for key, value in overlay.items():
        if value is None:
            result.pop(key, None)
        elif key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def expand_path(template: str, environ: Mapping[str, str] | None = None) -> Path | None:
    """Expand environment references and a leading ``~`` in a path template.

    Both ``%VAR%`` and ``${VAR}`` references are substituted from
    ``environ`` (default: ``os.environ``), whatever the host platform. A
    bare ``$`` is kept literally, so ``/srv/$fonts`` is an ordinary path.

    Args:
        template: Path template such as ``%WINDIR%\\Fonts`` or ``~/Library/Fonts``
        environ: Mapping used to look up variables

    Returns:
        Expanded path, or None if the template is empty or references a
        variable that is not set
    """
    if not template:
        return None
    if environ is None:
        environ = os.environ

    missing: list[str] = []

    def substitute(match: re.Match[str]) -> str:
        name = match.group("win") or match.group("braced")
        value = environ.get(name)
        if not value:
            missing.append(name)
            return match.group(0)
        return value

    expanded = _ENV_REFERENCE.sub(substitute, template)
    if missing:
        return None

    if expanded == "~" or expanded.startswith(("~/", "~\\")):
        home = environ.get("HOME") or environ.get("USERPROFILE") or str(Path.home())
        expanded = home + expanded[1:]

    return Path(expanded)
