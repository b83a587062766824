"""Pydantic models for the configuration and its rendering options."""

from lxcconfig.models.config import Arch, IdMapEntry, LxcConfig, MacVlanMode, NetworkType
from lxcconfig.models.settings import RendererSettings

__all__ = [
    "Arch",
    "IdMapEntry",
    "LxcConfig",
    "MacVlanMode",
    "NetworkType",
    "RendererSettings",
]
