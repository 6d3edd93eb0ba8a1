"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_log_deferred"
title = "Buffer log calls until a real logger exists, then replay them with their scopes"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_deferred"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_deferred"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (``print`` by default)."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label:<{pad}} = {value}\n" for label, value in fields)
    if writer is None:
        print("".join(lines), end="")
        return
    for line in lines:
        writer(line)
