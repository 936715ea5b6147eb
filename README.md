# devcommon

A grab bag of small helpers for day-to-day tooling scripts. It uses only the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is inside

| Module | Purpose |
| --- | --- |
| `devcommon.core` | File and directory helpers, zip/unzip, MD5, UUIDs, environment flags, receiving a byte count from a connection into a file |
| `devcommon.binary` | Packing signed and unsigned 16/32/64-bit integers to big- or little-endian bytes |
| `devcommon.bytesutil` | `bytes_copy` for bounded buffer copies, `reader_copy` for reading a stream into a buffer |
| `devcommon.memory` | `mem_cpy` and `mem_cmp`, in the style of the C functions |
| `devcommon.debug` | `log_i`, `log_w`, `log_d`, `log_e`, `get_line`, `new_error`: logging that tags messages with the caller's location |
| `devcommon.task` | `Task`: start callables in threads and wait for all of them |
| `devcommon.cmd` | `exec_line`, `exec_cmd`, `exec_on_dir`: run external commands and collect stdout and stderr |
| `devcommon.httputil` | `try_get`: retry an HTTP GET every half second until it connects or times out |
| `devcommon.ini` | `DcIni`: typed access to one section of an INI file |
| `devcommon.adb` | `DcAdb`: a chainable wrapper around the `adb` command line |
| `devcommon.shell` | `DcShell`: checks run in a shell on the device, such as whether an app is running, whether a port is listening, or launching an app |
| `devcommon.conn` | `DCConn`: a socket wrapper that prints a stack trace and a hex dump of the first 20 bytes of every read |
| `devcommon.tcp` | `DCSTcp`: exact-length reads and writes over a socket or stream |
| `devcommon.netutil` | `get_server_listener`, `get_tcp_server_listener`, `get_udp_conn`, `get_tcp_conn`, `check_port`, and the `SocketInfo` dataclass |

## Examples

```python
from devcommon.core import md5_string, file_name_prefix, file_name_suffix, zip_dir, unzip
from devcommon.binary import uint32_to_bytes_big_endian
from devcommon.memory import mem_cmp

md5_string("hello")                      # '5d41402abc4b2a76b9719d911017c592'
file_name_prefix("/tmp/report.txt")      # 'report'
file_name_suffix("/tmp/report.txt")      # '.txt'
uint32_to_bytes_big_endian(1)            # b'\x00\x00\x00\x01'
mem_cmp(b"\x34\x23", b"\x34\x23", 2)     # 0

zip_dir("build/output", "output.zip")
unzip("output.zip", "restored")
```

Running commands and talking to a device:

```python
from devcommon.cmd import exec_cmd
from devcommon.adb import DcAdb

print(exec_cmd("git", "status"))

device = DcAdb("adb")
if device.check_devices_exist():
    print(device.get_model().clear_crlf().result)
    device.forward_tcp(8080, 8080)
```

Command output is returned as one string: stdout, a newline, then stderr.
Arguments are split on single spaces, so quoting is not interpreted.

Running work in parallel:

```python
from devcommon.task import Task

task = Task()
task.go(lambda: print("one")).go(lambda: print("two")).wait()
```

`Task.wait` re-raises the first exception raised by any of the callables, and
`Task.go` starts nothing more once one has failed.

## Errors

Most helpers raise ordinary Python exceptions (`OSError`, `EOFError`,
`TimeoutError`, `ValueError` and the like). A few report in other ways:

- `core.get_bytes` returns `False` when the file cannot be created or the
  connection ends early.
- `core.file_create` returns `None` when the path already exists.
- `adb.exec_wrap` and the `DcAdb` and `DcShell` methods put the error text in
  `result` when a command cannot be started.
- `DcAdb.get_version_code` returns `-1` when there is no answer, and raises
  `ValueError` when the answer carries no version code.
- `DcIni` getters return the given default when a value is missing or cannot
  be read as the asked type.

## What it does not do

- There is no command-line program; everything is used from Python.
- `DcIni` changes made with `put_string`, `put_bool` and `put_int` stay in
  memory; nothing is written back to the INI file.
- `DcShell` keeps its `root` flag but does not use it to gain root privileges.