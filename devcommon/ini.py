"""Typed access to one section of an INI preference file."""

from __future__ import annotations

import configparser
import os

DEFAULT_FILE = "preference.ini"
_DEFAULT_SECTION = "DEFAULT"

_TRUE = {"1", "t", "T", "true", "TRUE", "True", "YES", "yes", "Yes", "y", "ON", "on", "On"}
_FALSE = {"0", "f", "F", "false", "FALSE", "False", "NO", "no", "No", "n", "OFF", "off", "Off"}

_files: dict[str, configparser.ConfigParser] = {}


def _load(path: str) -> configparser.ConfigParser:
    key = os.path.abspath(path)
    parser = _files.get(key)
    if parser is None:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
        parser = configparser.ConfigParser(
            interpolation=None,
            strict=False,
            default_section="\x00devcommon-none",
        )
        parser.optionxform = str
        parser.read_string(f"[{_DEFAULT_SECTION}]\n" + text, source=path)
        _files[key] = parser
    return parser


def _parse_int64(text: str) -> int:
    """Parse an integer the way a base-0 64-bit parse reads it."""
    if not text or text != text.strip():
        raise ValueError(f"invalid integer: {text!r}")
    body = text[1:] if text[0] in "+-" else text
    if not body:
        raise ValueError(f"invalid integer: {text!r}")
    if body[:2].lower() in ("0x", "0o", "0b"):
        value = int(body, 0)
    elif len(body) > 1 and body[0] == "0":
        value = int(body[1:], 8)
    else:
        value = int(body, 10)
    if text[0] == "-":
        value = -value
    if not -(1 << 63) <= value < (1 << 63):
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


class DcIni:
    """One named section of an INI file; files are loaded once and shared."""

    def __init__(self, name: str, path: str = DEFAULT_FILE) -> None:
        self.name = name
        self._parser = _load(path)
        if not self._parser.has_section(name):
            self._parser.add_section(name)
        self._section = self._parser[name]

    def get_string(self, key: str, default: str = "") -> str:
        """Return the value for ``key``, or ``default`` when it is missing."""
        return self._section.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return ``key`` read as a boolean, or ``default`` when it cannot be."""
        value = self._section.get(key, "")
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        return default

    def _get_int(self, key: str) -> int:
        return _parse_int64(self._section.get(key, ""))

    def get_int(self, key: str, default: int = 0) -> int:
        """Return ``key`` as a 32-bit integer, or ``default`` when it cannot be read."""
        try:
            return _wrap(self._get_int(key), 32)
        except ValueError:
            return default

    def get_long(self, key: str, default: int = 0) -> int:
        """Return ``key`` as a 64-bit integer, or ``default`` when it cannot be read."""
        try:
            return self._get_int(key)
        except ValueError:
            return default

    def get_short(self, key: str, default: int = 0) -> int:
        """Return ``key`` as a 16-bit integer, or ``default`` when it cannot be read."""
        try:
            return _wrap(self._get_int(key), 16)
        except ValueError:
            return default

    def put_string(self, key: str, value: str) -> "DcIni":
        """Set ``key`` to ``value`` in memory."""
        self._section[key] = value
        return self

    def put_bool(self, key: str, value: bool) -> "DcIni":
        """Set ``key`` to ``true`` or ``false`` in memory."""
        self._section[key] = "true" if value else "false"
        return self

    def put_int(self, key: str, value: int) -> "DcIni":
        """Set ``key`` to the decimal form of ``value`` in memory."""
        self._section[key] = str(value)
        return self