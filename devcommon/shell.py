"""Query and launch Android apps from a shell running on the device itself."""

from __future__ import annotations

import logging
import subprocess
import time

from devcommon.adb import (
    EMPTY_COMMAND_MESSAGE,
    RESOLVER_TABLE_MARKER,
    _LAUNCHER,
    _decode,
    _listen_pattern,
    _running_pattern,
    _strip_crlf,
)

log = logging.getLogger(__name__)

_LAUNCH_SETTLE_SECONDS = 2


class DcShell:
    """Runs local shell commands and keeps the output of the last one in ``result``."""

    def __init__(self, root: bool = False, debug: bool = False) -> None:
        self.root = root
        self.debug = debug
        self.result = ""
        self.current_cmd = ""

    def _exec(self, cmd: str, params: str) -> str:
        argv = [cmd, *params.split(" ")]
        if self.debug:
            log.info("%s", " ".join(argv))
        try:
            completed = subprocess.run(argv, capture_output=True, check=False)
        except OSError as exc:
            return str(exc)
        result = _decode(completed.stdout) + "\n" + _decode(completed.stderr)
        if self.debug:
            log.info("%s", result)
        return result

    def _exec_line(self, cmd_and_params: str) -> str:
        if cmd_and_params == "":
            return EMPTY_COMMAND_MESSAGE
        if self.debug:
            log.info("%s", cmd_and_params)
        cmd, _, params = cmd_and_params.partition(" ")
        result = self._exec(cmd, params)
        if self.debug:
            log.info("exec ret: %s", result)
        return result

    def _run(self, command: str) -> str:
        self.current_cmd = command
        self.result = self._exec_line(command)
        return self.result

    def check_app_is_running(self, package_name: str) -> bool:
        """Tell whether a process with exactly this package name is running."""
        self._run("ps -A")
        pattern = _running_pattern(package_name)
        if pattern is None:
            return False
        return (
            self.result != ""
            and package_name in self.result
            and pattern.search(self.result) is not None
        )

    def check_port_is_listen(self, port: str) -> bool:
        """Tell whether something listens on an IPv6 wildcard TCP port."""
        self._run("netstat -anp")
        pattern = _listen_pattern(port)
        if pattern is None:
            return False
        return (
            self.result != ""
            and ":::" + port in self.result
            and pattern.search(self.result) is not None
        )

    def _start_launcher(self, package_name: str, settle: bool) -> bool:
        self._run("dumpsys package " + package_name)
        self.clear_crlf()
        if self.result == "" or RESOLVER_TABLE_MARKER not in self.result:
            return False
        match = _LAUNCHER.search(self.result)
        if match is None:
            log.warning("[-] not found activity on package: %s", package_name)
            return False
        component = match.group(1) + "/" + match.group(2)
        log.info("[+] find package: %s ,activity: %s", match.group(1), match.group(2))
        self._run("am start -n " + component)
        self.clear_crlf()
        if settle:
            time.sleep(_LAUNCH_SETTLE_SECONDS)
        return self.result != "" and "cmp=" + component in self.result

    def launch_app(self, package_name: str) -> bool:
        """Start the launcher activity of a package and give it two seconds to come up."""
        return self._start_launcher(package_name, settle=True)

    def launch_app_when_stopped(self, package_name: str) -> bool:
        """Start the launcher activity of a package unless it is already running."""
        if self.check_app_is_running(package_name):
            return True
        return self._start_launcher(package_name, settle=False)

    def clear_crlf(self) -> "DcShell":
        """Remove every carriage return and line feed from the result."""
        self.result = _strip_crlf(self.result)
        return self