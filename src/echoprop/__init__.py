"""echoprop: observable attributes with validation and replay for Python."""

from importlib.metadata import version as _version

__version__ = _version("echoprop")

from echoprop.config import ConfigurationError, EchoConfig
from echoprop.stream import ReplayStream, StreamView
from echoprop.prop import EchoProp, create_echo_prop, create_reactive_property
from echoprop.group import create_echo_props, create_reactive_properties

__all__ = [
    "ConfigurationError",
    "EchoConfig",
    "EchoProp",
    "ReplayStream",
    "StreamView",
    "create_echo_prop",
    "create_echo_props",
    "create_reactive_property",
    "create_reactive_properties",
]
