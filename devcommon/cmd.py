"""Run external commands and collect their combined output."""

from __future__ import annotations

import logging
import subprocess
from typing import Optional

log = logging.getLogger(__name__)

EMPTY_COMMAND_MESSAGE = "Please input cmd And Params to call execWrap2"


class DCmd:
    """Holds a tool path and the output of the last command run with it."""

    def __init__(self, adb_path: str) -> None:
        self.adb_path = adb_path
        self.current_cmd = ""
        self.result = ""

    def is_success(self, success_keyword: str) -> bool:
        """Tell whether the result is non-empty and holds ``success_keyword``."""
        return self.result != "" and success_keyword in self.result

    def is_result_empty(self) -> bool:
        """Tell whether the result is empty."""
        return self.result.replace("[\r\n]", "") == ""

    def printf(self, tag: str) -> "DCmd":
        """Print the result under ``tag`` and return self."""
        print("DCmd", tag + " " + self.result)
        return self


def _run(cmd: str, params: str, cwd: Optional[str]) -> str:
    argv = [cmd, *params.split(" ")]
    log.info("Exec: %s", " ".join(argv))
    completed = subprocess.run(argv, capture_output=True, cwd=cwd, check=False)
    stdout = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    return stdout + "\n" + stderr


def exec_line(cmd_and_params: str) -> str:
    """Run a space-separated command line and return stdout, a newline, then stderr."""
    if cmd_and_params == "":
        return EMPTY_COMMAND_MESSAGE
    cmd, _, params = cmd_and_params.partition(" ")
    return exec_cmd(cmd, params)


def exec_cmd(cmd: str, params: str) -> str:
    """Run ``cmd`` with ``params`` split on spaces; return stdout, a newline, then stderr."""
    return _run(cmd, params, None)


def exec_on_dir(cmd: str, params: str, exec_dir: str) -> str:
    """Like :func:`exec_cmd`, but run inside ``exec_dir``."""
    return _run(cmd, params, exec_dir)