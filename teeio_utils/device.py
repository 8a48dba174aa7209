"""PCI configuration-space access and register-block helpers."""

from __future__ import annotations

import logging
import os
import struct

logger = logging.getLogger(__name__)

MAX_SUPPORT_DEVICE_NUM = 32
CFG_SPACE_SIZE = 0x1000

_DWORD = struct.Struct("<I")


class RegistryFullError(RuntimeError):
    """Raised when no more devices can be registered."""


class DeviceRegistry:
    """Maps open configuration-space descriptors to device names."""

    def __init__(self, capacity: int = MAX_SUPPORT_DEVICE_NUM) -> None:
        self._capacity = capacity
        self._names: dict[int, str] = {}

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, fd: object) -> bool:
        return fd in self._names

    @staticmethod
    def _check_fd(fd: int) -> None:
        if fd <= 0:
            raise ValueError(f"invalid file descriptor: {fd}")

    def register(self, fd: int, name: str) -> None:
        """Record the device name for ``fd``."""
        self._check_fd(fd)
        if name is None:
            raise ValueError("device name is required")
        known = self._names.get(fd)
        if known is not None:
            if known != name:
                raise ValueError(f"fd {fd} is already registered as {known!r}")
            return
        if len(self._names) >= self._capacity:
            raise RegistryFullError(f"at most {self._capacity} devices are supported")
        self._names[fd] = name

    def unregister(self, fd: int) -> None:
        """Forget ``fd``; unknown descriptors are ignored."""
        self._check_fd(fd)
        self._names.pop(fd, None)

    def name_of(self, fd: int) -> str | None:
        """The device name registered for ``fd``, or None."""
        self._check_fd(fd)
        return self._names.get(fd)


def _read_at(fd: int, offset: int, count: int) -> bytes:
    os.lseek(fd, offset, os.SEEK_SET)
    return os.read(fd, count)


def pci_read_32(fd: int, offset: int, registry: DeviceRegistry | None = None) -> int:
    """Read a dword from configuration space at ``offset``.

    When a registry is given, the access is logged with the device's name.
    """
    if fd <= 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    data = _read_at(fd, offset, _DWORD.size)
    if len(data) != _DWORD.size:
        raise OSError(f"short read at offset 0x{offset:04x}")
    (value,) = _DWORD.unpack(data)
    if registry is not None:
        name = registry.name_of(fd)
        if name is not None:
            logger.debug("PCI_READ  : 0x%04x => 0x%08x (%s)", offset, value, name)
    return value


def pci_write_32(
    fd: int, offset: int, value: int, registry: DeviceRegistry | None = None
) -> None:
    """Write a dword to configuration space at ``offset``."""
    if fd <= 0:
        raise ValueError(f"invalid file descriptor: {fd}")
    os.lseek(fd, offset, os.SEEK_SET)
    os.write(fd, _DWORD.pack(value))
    if registry is not None:
        name = registry.name_of(fd)
        if name is not None:
            logger.debug("PCI_WRITE : 0x%04x <= 0x%08x (%s)", offset, value, name)


def dump_cfg_space_to_file(filepath: str | os.PathLike, fd: int) -> bool:
    """Write a hex dump of the 4 KiB configuration space to ``filepath``.

    Returns False if the space could not be read completely; the bytes
    read so far are still written.
    """
    data = _read_at(fd, 0, CFG_SPACE_SIZE)
    with open(filepath, "w") as out:
        logger.info("Successful open file %s for writing!", filepath)
        out.write("        00 01 02 03 04 05 06 07 08 09 0A 0B 0C 0D 0E 0F\n")
        out.write("        -----------------------------------------------\n")
        for pos, byte in enumerate(data):
            if pos % 16 == 0:
                out.write(f"0x{pos:04x}: ")
            out.write(f"{byte:02x}")
            out.write("\n" if (pos + 1) % 16 == 0 else " ")
    if len(data) != CFG_SPACE_SIZE:
        logger.info("configuration space of %s ended at 0x%04x", filepath, len(data))
        return False
    logger.info("Successful dumped cfg space to file %s", filepath)
    return True


def reg_memcpy_dw(dst, src) -> None:
    """Copy ``src`` into the writable buffer ``dst`` one dword at a time."""
    dst_view = memoryview(dst).cast("B")
    src_view = memoryview(src).cast("B")
    if dst_view.nbytes != src_view.nbytes:
        raise ValueError("source and destination sizes differ")
    if dst_view.nbytes % 4:
        raise ValueError("size must be a multiple of 4 bytes")
    dst_words = dst_view.cast("I")
    for index, word in enumerate(src_view.cast("I")):
        dst_words[index] = word


def revert_copy_by_dw(src: bytes) -> bytes:
    """Return ``src`` with the order of its dwords reversed."""
    if not src or len(src) % 4:
        raise ValueError("size must be a non-zero multiple of 4 bytes")
    words = [src[pos:pos + 4] for pos in range(0, len(src), 4)]
    return b"".join(reversed(words))


def calculate_checksum(table: bytes) -> int:
    """Byte sum of an ACPI table, modulo 256."""
    return sum(table) & 0xFF