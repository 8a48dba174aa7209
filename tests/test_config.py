import pytest

from teeio_utils.config import (
    Configuration,
    IdePort,
    IdeSwitch,
    TestConfig,
    Topology,
    get_port_id_from_name,
    is_valid_port,
)


@pytest.fixture
def ports():
    return [
        IdePort(id=1, port_name="rootport", bdf="2a:00.0"),
        IdePort(id=2, port_name="endpoint", bdf="2b:00.0"),
        IdePort(id=3, port_name="spare", bdf="2c:00.0", enabled=False),
    ]


@pytest.fixture
def switch():
    return IdeSwitch(
        id=1,
        name="sw1",
        ports=[
            IdePort(id=1, port_name="up"),
            IdePort(id=2, port_name="down"),
            IdePort(id=3, port_name="off", enabled=False),
        ],
    )


@pytest.fixture
def config(ports, switch):
    return TestConfig(
        ports=ports,
        switches=[switch, IdeSwitch(id=2, name="sw2", enabled=False)],
        topologies=[Topology(id=1), Topology(id=2, enabled=False)],
        configurations=[Configuration(id=1), Configuration(id=2, enabled=False)],
    )


def test_is_valid_port(ports):
    assert is_valid_port(ports, "rootport") is True
    assert is_valid_port(ports, "spare") is False
    assert is_valid_port(ports, "missing") is False
    assert is_valid_port(None, "rootport") is False
    assert is_valid_port(ports, None) is False


def test_port_id_from_name(ports):
    for port in ports:
        expected = port.id if port.enabled else None
        assert get_port_id_from_name(ports, port.port_name) == expected
    assert get_port_id_from_name(ports, "missing") is None
    assert get_port_id_from_name(None, "rootport") is None


def test_config_port_lookup(config, ports):
    assert config.port_by_id(2) is ports[1]
    assert config.port_by_name("rootport") is ports[0]
    assert config.port_by_id(3) is None
    assert config.port_by_name("spare") is None
    assert config.port_by_id(0) is None
    assert config.port_by_name(None) is None


def test_config_switch_lookup(config, switch):
    assert config.switch_by_id(1) is switch
    assert config.switch_by_name("sw1") is switch
    assert config.switch_by_id(2) is None
    assert config.switch_by_name("sw2") is None
    assert config.has_switch(1) is True
    assert config.has_switch(2) is False
    assert config.has_switch(-1) is False


def test_config_topology_and_configuration(config):
    assert config.topology_by_id(1) is config.topologies[0]
    assert config.topology_by_id(2) is None
    assert config.topology_by_id(0) is None
    assert config.configuration_by_id(1) is config.configurations[0]
    assert config.configuration_by_id(2) is None
    assert config.configuration_by_id(5) is None


def test_switch_port_lookup(switch):
    assert switch.port_by_id(2) is switch.ports[1]
    assert switch.port_by_name("up") is switch.ports[0]
    assert switch.port_by_id(3) is None
    assert switch.port_by_name("off") is None
    assert switch.port_by_id(0) is None
    assert switch.port_by_name(None) is None
    assert switch.has_port(1) is True
    assert switch.has_port(3) is False