# ascendkit

Building blocks for tools that monitor Ascend NPU devices. It contains the
following modules:

- `ascendkit.filecheck` checks paths before they are used. It rejects paths
  with characters outside letters, digits and `-_./~`, and paths that are too
  long or too deep. It also rejects symlinks (unless allowed), group- or
  world-writable files, files owned by anyone other than root or the current
  user, setuid/setgid bits, and files over a size limit in megabytes. Failures
  raise `FileCheckError`. Its functions are `real_file_checker`,
  `real_dir_checker`, `path_string_checker`, `verify_file`, `safe_chmod`,
  `file_checker`, `normal_file_check` and `string_checker`.
- `ascendkit.paths` provides `is_dir`, `is_file`, `is_exist`, `is_lexist`,
  `is_softlink`, `check_path`, `make_sure_dir`, `check_mode`,
  `check_owner_and_permission`, `parse_lib_path` and `get_driver_lib_path`.
  `get_driver_lib_path` looks for a library first in `LD_LIBRARY_PATH`. It then
  falls back to `/sbin/ldconfig --print-cache` piped through `/bin/grep`. The
  library and every directory above it must be owned by root and must not be
  group- or world-writable.
- `ascendkit.files` provides the following:
  - `read_limit_bytes` reads a bounded number of bytes from a path that
    `check_path` accepts.
  - `load_file` reads up to 10 MiB. It returns `None` for an empty or missing
    path.
  - `copy_file` and `copy_dir` copy files and keep their permission bits.
- `ascendkit.textutil` provides the following:
  - `replace_prefix` and `mask_prefix` mask the first two characters of a
    string.
  - `get_sha256_code` returns a raw SHA-256 digest.
  - `reverse_string` reverses a string.
- `ascendkit.password` provides `validate_password` and
  `check_password_complexity`. Both raise `PasswordError`.
- `ascendkit.netutil` provides `client_ip`, which works out the client
  address. It tries `X-Forwarded-For`, then `X-Real-Ip`, then the peer
  `host:port`.
- `ascendkit.constants` holds device limits, chip type names and board IDs. It
  also defines the `DcmiDeviceType` and `FaultState` enums.
- `ascendkit.types` holds dataclasses for chips, boards, memory, HBM, ECC,
  PCIe, network and HCCS statistics, virtual-device resources and ping-mesh
  tasks.
- `ascendkit.devutils` holds validators and helpers for that data. These cover
  card, device and virtual-device IDs, chip-name and board-ID classification,
  virtual-device templates and ping-mesh parameter checks (which raise
  `InvalidOperateError`). It also has copy helpers.
- `ascendkit.watcher` provides `FileWatcher` and `get_file_watcher_queues`.
  They deliver `watchdog` change events for the watched files through queues.

## Installation

```
pip install ascendkit
```

## Examples

Safe file reading:

```python
from ascendkit.files import load_file, read_limit_bytes
from ascendkit.filecheck import real_file_checker, FileCheckError

data = load_file("/etc/npu-exporter/config.yaml")   # None if the path is missing
head = read_limit_bytes("/etc/hostname", 64)

try:
    real_path = real_file_checker("/etc/npu-exporter/config.yaml", True, False, 1)
except FileCheckError as err:
    print("refused:", err)
```

Path helpers:

```python
from ascendkit.paths import is_dir, make_sure_dir, get_driver_lib_path

is_dir("/tmp/")                  # True
make_sure_dir("/var/log/npu/")   # creates /var/log/npu with mode 0700 if missing
lib = get_driver_lib_path("libdcmi.so")   # raises ValueError if no trusted copy is found
```

Strings and passwords:

```python
from ascendkit.textutil import mask_prefix, reverse_string, get_sha256_code
from ascendkit.password import validate_password, PasswordError

mask_prefix("./testdata/cert/ca.crt")   # '****testdata/cert/ca.crt'
reverse_string("abc")                    # 'cba'
len(get_sha256_code(b"data"))            # 32

password = "password"
try:
    validate_password("operator", password)
except PasswordError as err:
    print(err)   # password complex not meet the requirement
```

Client address:

```python
from ascendkit.netutil import client_ip

client_ip({"X-Forwarded-For": "10.0.0.1, 10.0.0.2"}, "127.0.0.1:8080")   # '10.0.0.1'
client_ip({}, "127.0.0.1:8080")                                         # '127.0.0.1'
```

Device helpers:

```python
from ascendkit.types import ChipInfo
from ascendkit.devutils import get_dev_type, get_npu_name, is_valid_template_name

chip = ChipInfo(type="Ascend", name="910B3", version="V1")
get_npu_name(chip)                              # '910B3-Ascend-V1' (name-type-version)
get_dev_type("910B3", 0x28)                     # 'Ascend910B'
is_valid_template_name("Ascend310P", "vir04")   # True
```

Watching a file:

```python
from ascendkit.watcher import FileWatcher

with FileWatcher() as watcher:
    watcher.watch_file("/etc/npu-exporter/config.yaml")
    event = watcher.events.get(timeout=30)   # a watchdog event object
```

## What this package does not do

The package does not talk to NPU devices or their driver. It has no metrics
exporter, no HTTP server and no command-line program. The data types and
validators describe values that some other component must obtain.

## Running the tests

```
pip install "ascendkit[test]"
pytest
```