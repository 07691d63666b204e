"""Prettier wrapper for generated source files.

Each file is piped through ``prettier --stdin-filepath <path>`` so Prettier
picks the parser from the output file name.  Options from
``FormatterConfig.options`` are translated into Prettier CLI flags.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import Any

from new_component.config import FormatterConfig
from new_component.errors import FormatError


def option_flags(options: dict[str, Any]) -> list[str]:
    """Translate Prettier options into CLI flags.

    Examples::

        {"singleQuote": True}       -> ["--single-quote"]
        {"semi": False}             -> ["--no-semi"]
        {"trailingComma": "es5"}    -> ["--trailing-comma=es5"]
        {"printWidth": 100}         -> ["--print-width=100"]
    """
    flags: list[str] = []
    for name, value in options.items():
        if value is None:
            continue
        flag = re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()
        if value is True:
            flags.append(f"--{flag}")
        elif value is False:
            flags.append(f"--no-{flag}")
        else:
            flags.append(f"--{flag}={value}")
    return flags


class PrettierFormatter:
    """Formats source text by running Prettier as a subprocess."""

    def __init__(self, config: FormatterConfig) -> None:
        self.config = config

    def build_command(self, file_path: str | Path) -> list[str]:
        """Return the full argument vector used to format *file_path*."""
        return [
            *self.config.command,
            "--stdin-filepath",
            str(file_path),
            *option_flags(self.config.options),
        ]

    async def format(self, source: str, file_path: str | Path) -> str:
        """Return *source* formatted as if it lived at *file_path*.

        Raises:
            FormatError: If Prettier cannot be started, times out, or exits
                with a non-zero status.
        """
        cmd = self.build_command(file_path)
        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise FormatError(
                f"Could not start formatter '{cmd[0]}': {exc.strerror or exc}", Path(file_path)
            ) from exc

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                process.communicate(source.encode("utf-8")), timeout=self.config.timeout
            )
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise FormatError(
                f"Formatter timed out after {self.config.timeout}s", Path(file_path)
            ) from exc

        if process.returncode != 0:
            detail = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
            raise FormatError(
                f"Formatter exited with status {process.returncode}: {detail}", Path(file_path)
            )

        return (stdout_bytes or b"").decode("utf-8")
