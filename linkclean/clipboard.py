"""System clipboard integration.

There is no portable clipboard API, so the text is piped into whichever
platform tool is installed, trying them in order until one succeeds.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
import sys
from typing import List

from linkclean.config import settings


def get_clipboard_commands() -> List[List[str]]:
    """Return candidate clipboard commands, most specific first."""
    commands: List[List[str]] = []

    # 1. Explicit user preference
    if settings.clipboard_command:
        commands.append(shlex.split(settings.clipboard_command))

    # 2. Platform defaults
    if sys.platform == "darwin":
        commands.append(["pbcopy"])
    elif os.name == "nt":
        commands.append(["clip"])
    else:
        # clip.exe is reachable from inside WSL
        commands.append(["clip.exe"])
        if os.environ.get("WAYLAND_DISPLAY"):
            commands.append(["wl-copy"])
        commands.append(["xclip", "-selection", "clipboard"])
        commands.append(["xsel", "--clipboard", "--input"])

    return [cmd for cmd in commands if cmd and shutil.which(cmd[0])]


def copy_to_clipboard(text: str) -> bool:
    """Place *text* on the system clipboard.

    Returns ``True`` on success and ``False`` when no clipboard tool is
    installed or every candidate failed.
    """
    for cmd in get_clipboard_commands():
        try:
            subprocess.run(cmd, input=text, text=True, check=True, timeout=5)
        except (OSError, subprocess.SubprocessError) as exc:
            if settings.verbose:
                print(f"[clipboard] {cmd[0]} failed: {exc}", file=sys.stderr)
            continue
        return True
    return False
