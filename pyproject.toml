[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "devcommon"
version = "0.1.0"
description = "Everyday developer helpers: files, archives, hashing, byte packing, sockets, subprocess and adb wrappers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "files", "zip", "md5", "adb", "sockets", "subprocess", "ini"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["devcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
