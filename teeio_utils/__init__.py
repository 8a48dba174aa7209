"""Helpers for PCIe IDE validation: value parsing, test configuration lookups and config-space access."""

__version__ = "0.1.0"
__all__ = ["parsing", "config", "device"]