"""Field registry mapping model attributes to lxc.container.conf keys."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class FieldCategory(Enum):
    """How a field's value turns into output lines."""
    STRING = "string"
    INTEGER = "integer"
    ID_MAP = "id_map"
    ADDRESS_LIST = "address_list"
    PATH_LIST = "path_list"
    MAPPING = "mapping"


@dataclass(frozen=True)
class FieldSpec:
    """Static metadata for one configuration field."""
    attr: str
    key: str
    category: FieldCategory
    element_format: Optional[str] = None


ID_MAP_FORMAT = "{{ kind }} {{ container_id }} {{ host_id }} {{ count }}"

# Order here is output line order.
FIELDS = (
    FieldSpec("id_map", "lxc.id_map", FieldCategory.ID_MAP, ID_MAP_FORMAT),
    FieldSpec("network_type", "lxc.network.type", FieldCategory.STRING),
    FieldSpec("network_link", "lxc.network.link", FieldCategory.STRING),
    FieldSpec("network_flags", "lxc.network.flags", FieldCategory.STRING),
    FieldSpec("network_name", "lxc.network.name", FieldCategory.STRING),
    FieldSpec("network_mac_address", "lxc.network.hwaddr", FieldCategory.STRING),
    FieldSpec("address_v4", "lxc.network.ipv4", FieldCategory.ADDRESS_LIST),
    FieldSpec("address_v6", "lxc.network.ipv6", FieldCategory.ADDRESS_LIST),
    FieldSpec("macvlan_mode", "lxc.network.macvlan.mode", FieldCategory.STRING),
    FieldSpec("apparmor_profile", "lxc.aa_profile", FieldCategory.STRING),
    FieldSpec("rootfs", "lxc.rootfs", FieldCategory.STRING),
    FieldSpec("utsname", "lxc.utsname", FieldCategory.STRING),
    FieldSpec("arch", "lxc.arch", FieldCategory.STRING),
    FieldSpec("include", "lxc.include", FieldCategory.PATH_LIST),
    FieldSpec("pts", "lxc.pts", FieldCategory.INTEGER),
    FieldSpec("tty", "lxc.tty", FieldCategory.INTEGER),
    FieldSpec("mount", "lxc.mount", FieldCategory.PATH_LIST),
    FieldSpec("mount_entry", "lxc.mount.entry", FieldCategory.INTEGER),
    FieldSpec("cap_drop", "lxc.cap.drop", FieldCategory.STRING),
    FieldSpec("cgroup", "lxc.cgroup", FieldCategory.MAPPING),
)

_BY_ATTR: Dict[str, FieldSpec] = {spec.attr: spec for spec in FIELDS}


def get_field(attr: str) -> FieldSpec:
    """Get field spec by attribute name."""
    return _BY_ATTR[attr]
