# teeio_utils

Helpers used when validating PCIe IDE (Integrity and Data Encryption)
setups. The package provides three modules:

- `teeio_utils.parsing`: checking and parsing bus/device/function strings,
  decimal lists, byte values and log level names.
- `teeio_utils.config`: a model of a test configuration (ports, switches,
  topologies, configurations) with lookups that only return enabled entries.
- `teeio_utils.device`: reading and writing 32-bit values in a device's PCI
  configuration space through an open file descriptor, a hex dump of that
  space, and a few byte-buffer helpers.

## Installation

```
pip install .
```

## Parsing values

```python
from teeio_utils.parsing import (
    parse_bdf_string, is_valid_bdf, decimal_str_to_array,
    convert_hex_str_to_uint8, get_ide_log_level_from_string, LogLevel,
)

is_valid_bdf("2a:00.0")            # True
bdf = parse_bdf_string("2a:00.0")  # Bdf(bus=42, device=0, function=0)
str(bdf)                           # "2a:00.0"
decimal_str_to_array("1,2,3,4", 8) # [1, 2, 3, 4]
convert_hex_str_to_uint8("0x1f")   # 31
get_ide_log_level_from_string("info") is LogLevel.INFO
```

- `is_valid_bdf` and `is_valid_dev_func` check the shapes `bb:dd.f` and
  `dd.f` with hexadecimal digits.
- `parse_bdf_string` returns a `Bdf` and raises `ValueError` on a malformed
  string.
- `decimal_str_to_array(text, size=None)` raises `ValueError` on an empty
  string, a non-decimal element, or more than `size` elements;
  `valid_decimal_int_array` returns a bool instead.
- `convert_hex_str_to_uint8` accepts `0x` hexadecimal, leading-zero octal or
  decimal text and raises `ValueError` when the value is malformed or above
  255.
- `get_ide_log_level_from_string` maps `"error"`, `"warn"`, `"info"` and
  `"verbose"` to `LogLevel`; anything else gives `LogLevel.WARN`.
  `get_ide_log_level_string` gives the name back, or `"na"` for an unknown
  level.
- `find_char_in_str` and `revert_find_char_in_str` return the first or last
  index of a character, or -1.
- `validate_file_name` returns True if the file exists and its name is at
  most `MAX_FILE_NAME` (256) characters long.

## Looking up configuration entries

```python
from teeio_utils.config import IdePort, IdeSwitch, TestConfig, get_port_id_from_name

ports = [IdePort(1, "rootport", "2a:00.0"), IdePort(2, "endpoint", "2b:00.0", enabled=False)]
cfg = TestConfig(ports=ports, switches=[IdeSwitch(1, "switch1", ports=[IdePort(3, "dsp")])])

cfg.port_by_name("rootport").bdf   # "2a:00.0"
cfg.port_by_id(2)                  # None: the port is disabled
cfg.switch_by_name("switch1").has_port(3)  # True
get_port_id_from_name(ports, "endpoint")   # None
```

`TestConfig` offers `port_by_id`, `port_by_name`, `switch_by_id`,
`switch_by_name`, `has_switch`, `topology_by_id` and `configuration_by_id`;
`IdeSwitch` offers `port_by_id`, `port_by_name` and `has_port`. Lookups by
id return None for ids of zero or below. `is_valid_port` and
`get_port_id_from_name` look at the first port with the given name and
report it only if it is enabled.

## Configuration space access

`teeio_utils.device` works on a file descriptor that the caller has already
opened:

- `pci_read_32(fd, offset, registry=None)` and
  `pci_write_32(fd, offset, value, registry=None)` read and write
  little-endian dwords. With a `DeviceRegistry`, each access is logged at
  debug level under the device's registered name.
- `DeviceRegistry` maps descriptors to device names (`register`,
  `unregister`, `name_of`); it holds at most 32 entries and raises
  `RegistryFullError` beyond that.
- `dump_cfg_space_to_file(filepath, fd)` writes a hex dump of the first
  4 KiB, 16 bytes per line, and returns False if fewer bytes could be read.
- `calculate_checksum(table)` returns the byte sum of an ACPI table modulo
  256.
- `reg_memcpy_dw(dst, src)` copies a buffer into a writable buffer of the
  same size one dword at a time; `revert_copy_by_dw(src)` returns the bytes
  with their dword order reversed. Both require sizes that are multiples
  of 4.

## What this package does not do

It has no command-line tool and runs no IDE tests: it does not open
configuration-space files, map register blocks or set up IDE streams
itself, and it does not read test configurations from files. Callers build
`TestConfig` objects and open descriptors themselves.

## Running the tests

```
pip install .[test]
pytest
```