"""Test configuration model and lookups of ports, switches and topologies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class IdePort:
    """A PCIe port named in the test configuration."""

    id: int
    port_name: str
    bdf: str = ""
    enabled: bool = True


@dataclass
class IdeSwitch:
    """A switch and the ports that belong to it."""

    id: int
    name: str
    ports: list[IdePort] = field(default_factory=list)
    enabled: bool = True

    def port_by_id(self, port_id: int) -> IdePort | None:
        """The enabled port with this id, or None."""
        if port_id <= 0:
            return None
        return next((p for p in self.ports if p.enabled and p.id == port_id), None)

    def port_by_name(self, name: str | None) -> IdePort | None:
        """The enabled port with this name, or None."""
        if name is None:
            return None
        return next((p for p in self.ports if p.enabled and p.port_name == name), None)

    def has_port(self, port_id: int) -> bool:
        return self.port_by_id(port_id) is not None


@dataclass
class Topology:
    """A topology entry of the test configuration."""

    id: int
    type: str = ""
    connection: str = ""
    enabled: bool = True


@dataclass
class Configuration:
    """A configuration entry of the test configuration."""

    id: int
    name: str = ""
    enabled: bool = True


@dataclass
class TestConfig:
    """The whole parsed test configuration."""

    __test__ = False

    ports: list[IdePort] = field(default_factory=list)
    switches: list[IdeSwitch] = field(default_factory=list)
    topologies: list[Topology] = field(default_factory=list)
    configurations: list[Configuration] = field(default_factory=list)

    def port_by_id(self, port_id: int) -> IdePort | None:
        if port_id <= 0:
            return None
        return next((p for p in self.ports if p.id == port_id and p.enabled), None)

    def port_by_name(self, name: str | None) -> IdePort | None:
        if name is None:
            return None
        return next((p for p in self.ports if p.port_name == name and p.enabled), None)

    def switch_by_id(self, switch_id: int) -> IdeSwitch | None:
        if switch_id <= 0:
            return None
        return next((s for s in self.switches if s.id == switch_id and s.enabled), None)

    def switch_by_name(self, name: str | None) -> IdeSwitch | None:
        if name is None:
            return None
        return next((s for s in self.switches if s.name == name and s.enabled), None)

    def has_switch(self, switch_id: int) -> bool:
        return self.switch_by_id(switch_id) is not None

    def topology_by_id(self, topology_id: int) -> Topology | None:
        if topology_id <= 0:
            return None
        return next(
            (t for t in self.topologies if t.id == topology_id and t.enabled), None
        )

    def configuration_by_id(self, configuration_id: int) -> Configuration | None:
        if configuration_id <= 0:
            return None
        return next(
            (c for c in self.configurations if c.id == configuration_id and c.enabled),
            None,
        )


def _first_named(ports: Iterable[IdePort], name: str) -> IdePort | None:
    return next((p for p in ports if p.port_name == name), None)


def is_valid_port(ports: Iterable[IdePort] | None, name: str | None) -> bool:
    """True if the first port with this name is enabled."""
    if ports is None or name is None:
        return False
    port = _first_named(ports, name)
    return port is not None and port.enabled


def get_port_id_from_name(ports: Iterable[IdePort] | None, name: str | None) -> int | None:
    """Id of the first port with this name if it is enabled, else None."""
    if ports is None or name is None:
        return None
    port = _first_named(ports, name)
    if port is None or not port.enabled:
        return None
    return port.id