"""
lxc-config - LXC container configuration model and serializer.

Builds lxc.container.conf(5) content from a typed configuration value,
starting from a default template and emitting ``key: value`` lines.
"""

__version__ = "1.0.0"

# Re-export key components for easier access
from lxcconfig.models.config import Arch, IdMapEntry, LxcConfig, MacVlanMode, NetworkType
from lxcconfig.models.settings import RendererSettings
from lxcconfig.render.serializer import render
from lxcconfig.settings import configure, load_settings

__all__ = [
    "Arch",
    "IdMapEntry",
    "LxcConfig",
    "MacVlanMode",
    "NetworkType",
    "RendererSettings",
    "configure",
    "load_settings",
    "render",
]
