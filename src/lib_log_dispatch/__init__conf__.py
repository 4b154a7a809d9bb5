"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_dispatch"
title = "Client-side log dispatch pipeline with stage chains and isolated fan-out"
version = "0.1.0"
author = "lib_log_dispatch contributors"
shell_command = "lib_log_dispatch"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to stdout).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_dispatch:\\n\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    emit = writer if writer is not None else sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
