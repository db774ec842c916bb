"""Component version strings and the --version command-line option."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

__all__ = ["BuildInfo", "simple_version", "component_version", "output_version_if_needed"]


@dataclass(frozen=True)
class BuildInfo:
    """Identity of a built component."""

    name: str = "doclientkit"
    version: str = "0.1.0"
    builder: str = ""
    build_time: str = ""
    git_head_revision: str = ""
    git_head_name: str = ""


_DEFAULT_INFO = BuildInfo()

_VERSION_FLAGS = ("--version", "-v")
_VERSION_EXTRA_FLAG = "--version-extra"


def simple_version(info: BuildInfo | None = None) -> str:
    """The plain three-part version."""
    return (info or _DEFAULT_INFO).version


def component_version(include_extras: bool = True, info: BuildInfo | None = None) -> str:
    """The full version string.

    Format: [<builder>;]<name>/v<version>[+<build time>][.<git revision>][ (<git head name>)]
    """
    info = info or _DEFAULT_INFO
    text = f"{info.builder};" if info.builder else ""
    text += f"{info.name}/v{info.version}"
    if info.build_time:
        text += f"+{info.build_time}"
    if info.git_head_revision:
        text += ("." if info.build_time else "+") + info.git_head_revision
    if include_extras and info.git_head_name:
        text += f" ({info.git_head_name})"
    return text


def output_version_if_needed(
    argv: Sequence[str] | None = None,
    info: BuildInfo | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Print the version if argv is exactly one version option; return whether it was."""
    if argv is None:
        argv = sys.argv
    if stream is None:
        stream = sys.stdout
    if len(argv) != 2:
        return False
    option = argv[1]
    extended = option == _VERSION_EXTRA_FLAG
    if not (extended or option in _VERSION_FLAGS):
        return False
    print(component_version(extended, info), file=stream)
    return True