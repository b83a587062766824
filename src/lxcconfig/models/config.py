"""LXC container configuration model.

Field semantics follow lxc.container.conf(5). Every field is optional and a
field holding its type's zero value ("" / 0 / [] / {}) is treated as unset
and left out of the rendered output. A legitimate zero (``pts = 0``) is
therefore indistinguishable from an unset field.
"""

from enum import Enum
from ipaddress import IPv4Interface, IPv6Interface
from typing import Dict, List, Literal, Optional, Union, TYPE_CHECKING
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from lxcconfig.models.settings import RendererSettings


class NetworkType(str, Enum):
    """Kind of network virtualization used for the container."""
    VETH = "veth"
    VLAN = "vlan"
    MACVLAN = "macvlan"
    PHYS = "phys"


class Arch(str, Enum):
    """Container platform architecture."""
    X86 = "x86"
    I686 = "i686"
    X86_64 = "x86_64"
    AMD64 = "amd64"


class MacVlanMode(str, Enum):
    """Mode of a macvlan interface."""
    PRIVATE = "private"
    VEPA = "vepa"
    BRIDGE = "bridge"


class IdMapEntry(BaseModel):
    """Structured user/group id mapping (``u 0 100000 100000``)."""
    kind: Literal["u", "g"] = Field(..., description="u for user ids, g for group ids")
    container_id: int = Field(..., description="First id inside the container")
    host_id: int = Field(..., description="First id on the host")
    count: int = Field(..., description="Number of consecutive ids to map")


class LxcConfig(BaseModel):
    """LXC container configuration."""
    id_map: List[Union[IdMapEntry, str]] = Field(default_factory=list)
    network_type: Union[NetworkType, str] = Field(default="")
    network_link: str = Field(default="", description="Host interface for real traffic")
    network_flags: str = Field(default="", description="Action to do for the network, e.g. up")
    network_name: str = Field(default="", description="Interface name inside the container")
    network_mac_address: str = Field(default="", description="Interface hardware address")
    address_v4: List[IPv4Interface] = Field(default_factory=list)
    address_v6: List[IPv6Interface] = Field(default_factory=list)
    macvlan_mode: Union[MacVlanMode, str] = Field(default="")
    apparmor_profile: str = Field(default="")
    rootfs: str = Field(default="", description="Root file system location")
    utsname: str = Field(default="", description="Container hostname")
    arch: Union[Arch, str] = Field(default="")
    include: List[str] = Field(default_factory=list)
    pts: int = Field(default=0, description="Maximum pseudo ttys for a private pts instance")
    tty: int = Field(default=0, description="Number of ttys available to the container")
    mount: List[str] = Field(default_factory=list, description="fstab format files")
    mount_entry: int = Field(default=0)
    cap_drop: str = Field(default="")
    cgroup: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    @classmethod
    def default(cls) -> "LxcConfig":
        """Create a configuration pre-populated with common values.

        The result is a starting point, not a complete configuration;
        callers are expected to override fields before use.
        """
        return cls(
            id_map=["u 0 100000 100000", "g 0 100000 100000"],
            network_type=NetworkType.VETH,
            network_link="lxcbr0",
            apparmor_profile="unconfined",
            arch=Arch.X86,
        )

    def render(self, settings: Optional["RendererSettings"] = None) -> str:
        """Render the configuration as lxc.container.conf lines."""
        from lxcconfig.render.serializer import render
        return render(self, settings)

    def __str__(self) -> str:
        return self.render()
