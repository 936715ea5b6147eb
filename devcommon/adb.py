"""Drive an Android device through the adb command-line tool."""

from __future__ import annotations

import logging
import re
import subprocess
from typing import Optional, Pattern

log = logging.getLogger(__name__)

EMPTY_COMMAND_MESSAGE = "Please input cmd And Params to call execWrap2"
RESOLVER_TABLE_MARKER = "Activity Resolver Table:"
DEVICES_HEADER = "List of devices attached"

_CRLF = re.compile(r"[\r\n]")
_VERSION_CODE = re.compile(r"versionCode=(\d*?) ")
_LAUNCHER = re.compile(
    r"[a-z0-9]{3,10} ([a-zA-Z0-9\\._]*?)/([a-zA-Z0-9\\._]*?) filter [a-z0-9]{3,10}"
    r'[^/]*?Category: "android\.intent\.category\.LAUNCHER"'
)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _strip_crlf(text: str) -> str:
    return _CRLF.sub("", text)


def _listen_pattern(port: str) -> Optional[Pattern[str]]:
    try:
        return re.compile(":::" + port + r"[^\r\n]*?LISTEN")
    except re.error as exc:
        log.warning("[-] reg compile error: %s", exc)
        return None


def _running_pattern(package_name: str) -> Optional[Pattern[str]]:
    try:
        return re.compile(package_name.replace(".", r"\.") + r"(?:\n|\Z|\r)")
    except re.error as exc:
        log.warning("[-] reg compile error: %s", exc)
        return None


def exec_wrap(cmd: str, params: str) -> str:
    """Run ``cmd`` with ``params`` split on spaces; return stdout, a newline, then stderr.

    A command that cannot be started yields the error text instead of output.
    """
    argv = [cmd, *params.split(" ")]
    log.info("%s", " ".join(argv))
    try:
        completed = subprocess.run(argv, capture_output=True, check=False)
    except OSError as exc:
        return str(exc)
    result = _decode(completed.stdout) + "\n" + _decode(completed.stderr)
    log.info("%s", result)
    return result


def exec_wrap2(cmd_and_params: str) -> str:
    """Run a space-separated command line; see :func:`exec_wrap`."""
    if cmd_and_params == "":
        return EMPTY_COMMAND_MESSAGE
    log.info("%s", cmd_and_params)
    cmd, _, params = cmd_and_params.partition(" ")
    result = exec_wrap(cmd, params)
    log.info("exec ret: %s", result)
    return result


class DcAdb:
    """Runs adb commands and keeps the output of the last one in ``result``."""

    def __init__(self, adb_path: str) -> None:
        self.adb_path = adb_path
        self.current_cmd = ""
        self.result = ""

    def _run(self, params: str) -> str:
        self.current_cmd = self.adb_path + " " + params
        self.result = exec_wrap2(self.current_cmd)
        return self.result

    def adb(self, params: str) -> "DcAdb":
        """Run adb with arbitrary parameters."""
        self._run(params)
        return self

    def get_model(self) -> "DcAdb":
        """Query the device model property."""
        self._run("shell getprop ro.product.model")
        return self

    def clear_crlf(self) -> "DcAdb":
        """Remove every carriage return and line feed from the result."""
        self.result = _strip_crlf(self.result)
        return self

    def get_system_properties(self, key: str, default: str) -> "DcAdb":
        """Query a system property; an empty answer becomes ``default``."""
        self._run("shell getprop " + key)
        if self.result == "":
            self.result = default
        return self.clear_crlf()

    def get_android_version(self) -> "DcAdb":
        """Query the SDK level of the device."""
        self._run("shell getprop ro.build.version.sdk")
        return self

    def pull(self, remote_file_or_folder: str, local_file_or_folder: str) -> "DcAdb":
        """Copy a file or folder from the device."""
        self._run("pull " + remote_file_or_folder + " " + local_file_or_folder)
        return self

    def delete(self, remote_file_or_folder: str) -> "DcAdb":
        """Remove a file or folder on the device."""
        self._run("shell rm -rf " + remote_file_or_folder)
        return self

    def install(self, apk_path: str) -> "DcAdb":
        """Install an APK, allowing reinstall and downgrade."""
        self._run("install -r -d " + apk_path)
        return self

    def uninstall(self, package_name: str) -> "DcAdb":
        """Uninstall a package."""
        self._run("uninstall " + package_name)
        return self

    def get_version_code(self, package_name: str) -> int:
        """Return the installed version code of a package, or -1 if there is no answer.

        Raises ValueError when the answer carries no version code.
        """
        self._run("shell dumpsys package " + package_name + " | grep versionCode")
        self.clear_crlf()
        if self.is_result_empty():
            return -1
        match = _VERSION_CODE.search(self.result)
        if match is None:
            raise ValueError("no versionCode in: " + self.result)
        digits = match.group(1)
        return int(digits) if digits else 0

    def check_file_exist(self, remote_file_path: str) -> bool:
        """Tell whether a path exists on the device."""
        self._run("shell ls " + remote_file_path)
        self.clear_crlf()
        return self.result != "" and "No such file or directory" not in self.result

    def check_apk_exist(self, package_name: str) -> bool:
        """Tell whether a package is installed."""
        self._run("shell pm list package")
        self.clear_crlf()
        return self.result != "" and package_name in self.result

    def check_port_is_listen(self, port: str) -> bool:
        """Tell whether the device listens on an IPv6 wildcard TCP port."""
        self._run("shell netstat -anp")
        pattern = _listen_pattern(port)
        if pattern is None:
            return False
        return (
            self.result != ""
            and ":::" + port in self.result
            and pattern.search(self.result) is not None
        )

    def check_apk_is_running(self, package_name: str) -> bool:
        """Tell whether a process with exactly this package name is running."""
        self._run("shell ps -A | grep " + package_name)
        pattern = _running_pattern(package_name)
        if pattern is None:
            return False
        return (
            self.result != ""
            and package_name in self.result
            and pattern.search(self.result) is not None
        )

    def launch_app(self, package_name: str) -> bool:
        """Start the launcher activity of a package unless it is already running."""
        if self.check_apk_is_running(package_name):
            return True
        self._run("shell dumpsys package " + package_name)
        self.clear_crlf()
        if self.result == "" or RESOLVER_TABLE_MARKER not in self.result:
            return False
        match = _LAUNCHER.search(self.result)
        if match is None:
            log.warning("[-] not found activity on package: %s", package_name)
            return False
        component = match.group(1) + "/" + match.group(2)
        log.info("[+] find package: %s ,activity: %s", match.group(1), match.group(2))
        self._run("shell am start -n " + component)
        self.clear_crlf()
        return self.result != "" and "cmp=" + component in self.result

    def check_devices_exist(self) -> bool:
        """Tell whether adb lists at least one attached device."""
        self._run("devices")
        self.clear_crlf()
        offset = self.result.rfind(DEVICES_HEADER) + len(DEVICES_HEADER) - 1
        return self.result != "" and "device" in self.result[offset:]

    def get_external_storage(self) -> "DcAdb":
        """Query the external storage path of the device."""
        self._run("shell echo $EXTERNAL_STORAGE")
        return self

    def forward_tcp(self, local_port: int, remote_port: int) -> "DcAdb":
        """Forward a local TCP port to a device TCP port."""
        self._run(f"forward tcp:{local_port} tcp:{remote_port}")
        return self

    def is_success(self, success_keyword: str) -> bool:
        """Tell whether the result is non-empty and holds ``success_keyword``."""
        return self.result != "" and success_keyword in self.result

    def is_failed(self, failed_keyword: str) -> bool:
        """Tell whether the result is non-empty and holds ``failed_keyword``."""
        return self.result != "" and failed_keyword in self.result

    def is_result_empty(self) -> bool:
        """Tell whether the result is blank."""
        return self.result.strip() == ""

    def printf(self, tag: str) -> "DcAdb":
        """Print the result under ``tag`` and return self."""
        print("DcAdb", tag + " " + self.result)
        return self