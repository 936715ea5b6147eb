"""Everyday developer helpers: files, archives, hashing, byte packing, sockets, INI access and command and adb wrappers."""

__version__ = "0.1.0"