"""Open a target in the system's default browser."""

from __future__ import annotations

import subprocess
import sys


class BrowserError(RuntimeError):
    """The browser could not be started."""


def browser_command(target: str, platform: str | None = None) -> list[str]:
    """The command that opens ``target`` on the given platform."""
    name = (platform if platform is not None else sys.platform).lower()
    if name in ("win32", "windows"):
        return ["rundll32", "url.dll,FileProtocolHandler", target]
    if name == "darwin":
        return ["open", target]
    return ["xdg-open", target]


def browse(target: str, platform: str | None = None) -> subprocess.Popen:
    """Start the default browser on ``target`` without waiting for it."""
    command = browser_command(target, platform)
    try:
        return subprocess.Popen(command)
    except OSError as exc:
        raise BrowserError(f"could not open {target}: {exc}") from exc