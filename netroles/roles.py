"""Network role classification for NICs and networks.

A role (admin, external, internal, manta or any custom tag) is matched
against NIC tags case-insensitively (ASCII letters only). A tag may also be
rack-scoped, in which case it carries a "_rack_<id>" suffix:

    admin            -> admin
    admin_rack_12    -> admin
    ADMIN_RACK_az-1  -> admin
    administrator    -> (no role)

The extractors return the requested value from the first NIC in role,
or None when nothing matches. None of these functions modify their input.
"""
from __future__ import annotations

import ipaddress
import logging
import re
from enum import Enum
from typing import Any, Iterable, Mapping

from netroles.schemas import (
    InterfaceRecord,
    Network,
    Nic,
    SysInfo,
    VmMetadata,
    coerce,
)

logger = logging.getLogger(__name__)

RACK_SUFFIX = r"(_rack_[A-Z0-9_-]+)?"

# Sysinfo "System Type" of mock/simulated compute nodes
VIRTUAL_SYSTEM_TYPE = "Virtual"


class NetworkRole(str, Enum):
    """Well-known network roles."""
    ADMIN = "admin"
    EXTERNAL = "external"
    INTERNAL = "internal"
    MANTA = "manta"


def _role_name(role: NetworkRole | str) -> str:
    if isinstance(role, NetworkRole):
        return role.value
    return role


def tag_matches_role(tag: str | None, role: NetworkRole | str) -> bool:
    """Check whether a NIC tag names the role, with or without a rack suffix."""
    if not tag:
        return False
    pattern = re.escape(_role_name(role)) + RACK_SUFFIX
    return re.fullmatch(pattern, tag, re.IGNORECASE | re.ASCII) is not None


def is_valid_ip_address(value: Any) -> bool:
    """Check whether value parses as an IPv4 or IPv6 address."""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


# --- Predicates ---

def is_nic_tagged(nic: Nic | Mapping[str, Any], tag: NetworkRole | str) -> bool:
    """Check whether a NIC's nic_tag belongs to the given role."""
    nic = coerce(Nic, nic)
    return tag_matches_role(nic.nic_tag, tag)


def is_nic_admin(nic: Nic | Mapping[str, Any]) -> bool:
    return is_nic_tagged(nic, NetworkRole.ADMIN)


def is_nic_external(nic: Nic | Mapping[str, Any]) -> bool:
    return is_nic_tagged(nic, NetworkRole.EXTERNAL)


def is_nic_manta(nic: Nic | Mapping[str, Any]) -> bool:
    return is_nic_tagged(nic, NetworkRole.MANTA)


def is_net_tagged(net: Network | Mapping[str, Any], tag: NetworkRole | str) -> bool:
    """Check whether a network (or network pool) belongs to the given role.

    A network is in the role if any of these hold:
    1. Its name is exactly the role name.
    2. Its name or nic_tag is the role name with an optional rack suffix
       (e.g. "external_rack_02").
    3. It is a pool and one of its nic_tags_present matches as in (2).
    """
    net = coerce(Network, net)
    name = _role_name(tag)

    if net.name == name:
        return True

    if tag_matches_role(net.name, name) or tag_matches_role(net.nic_tag, name):
        return True

    if net.nic_tags_present:
        return any(tag_matches_role(t, name) for t in net.nic_tags_present)

    return False


def is_net_admin(net: Network | Mapping[str, Any]) -> bool:
    return is_net_tagged(net, NetworkRole.ADMIN)


def is_net_external(net: Network | Mapping[str, Any]) -> bool:
    return is_net_tagged(net, NetworkRole.EXTERNAL)


def is_net_internal(net: Network | Mapping[str, Any]) -> bool:
    return is_net_tagged(net, NetworkRole.INTERNAL)


def is_net_manta(net: Network | Mapping[str, Any]) -> bool:
    return is_net_tagged(net, NetworkRole.MANTA)


# --- From a NICs array (sdc:nics metadata) ---

def nic_from_nics(
    nics: Iterable[Nic | Mapping[str, Any]] | None,
    role: NetworkRole | str,
) -> Nic | None:
    """Return the first NIC in the given role, or None."""
    for nic in nics or ():
        nic = coerce(Nic, nic)
        if is_nic_tagged(nic, role):
            return nic
    return None


def extract_from_nics(
    nics: Iterable[Nic | Mapping[str, Any]] | None,
    field: str,
    role: NetworkRole | str,
) -> Any:
    """Return a field of the first NIC in the given role.

    Args:
        nics: NIC records, in priority order
        field: NIC attribute to return (e.g. "ip", "mac")
        role: Role or custom tag to look for

    Returns:
        The field's value, or None if no NIC matches or the field is unset.
    """
    nic = nic_from_nics(nics, role)
    if nic is None:
        logger.debug(f"No NIC tagged {_role_name(role)!r} found")
        return None
    return getattr(nic, field, None)


def admin_ip_from_nics_array(nics: Iterable[Nic | Mapping[str, Any]] | None) -> str | None:
    return extract_from_nics(nics, "ip", NetworkRole.ADMIN)


# --- From VM metadata ---

def extract_from_vm_metadata(
    vm: VmMetadata | Mapping[str, Any],
    field: str,
    role: NetworkRole | str,
) -> Any:
    """Return a field of the first NIC in the given role from VM metadata."""
    vm = coerce(VmMetadata, vm)
    return extract_from_nics(vm.nics, field, role)


def admin_ip_from_vm_metadata(vm: VmMetadata | Mapping[str, Any]) -> str | None:
    """Return the singleton 'ip' of the VM's admin NIC."""
    return extract_from_vm_metadata(vm, "ip", NetworkRole.ADMIN)


def external_ip_from_vm_metadata(vm: VmMetadata | Mapping[str, Any]) -> str | None:
    return extract_from_vm_metadata(vm, "ip", NetworkRole.EXTERNAL)


def manta_ip_from_vm_metadata(vm: VmMetadata | Mapping[str, Any]) -> str | None:
    return extract_from_vm_metadata(vm, "ip", NetworkRole.MANTA)


def admin_mac_from_vm_metadata(vm: VmMetadata | Mapping[str, Any]) -> str | None:
    return extract_from_vm_metadata(vm, "mac", NetworkRole.ADMIN)


# --- From compute node sysinfo ---

def admin_nic_from_sysinfo(sysinfo: SysInfo | Mapping[str, Any]) -> InterfaceRecord | None:
    """Return the sysinfo interface record carrying the admin NIC tag.

    The admin tag is "Admin NIC Tag" when set, otherwise "admin". It is
    matched exactly against each interface's "NIC Names".
    """
    sysinfo = coerce(SysInfo, sysinfo)
    admin_tag = sysinfo.admin_nic_tag or NetworkRole.ADMIN.value

    for iface_name, iface in (sysinfo.network_interfaces or {}).items():
        if admin_tag in (iface.nic_names or []):
            logger.debug(f"Admin NIC tag {admin_tag!r} found on {iface_name}")
            return iface

    return None


def admin_ip_from_sysinfo(sysinfo: SysInfo | Mapping[str, Any]) -> str | None:
    """Return a compute node's admin IP from its sysinfo.

    "Admin IP" may be set to "dhcp", so it is only used when it is a valid
    address. Otherwise the admin interface's ip4addr is returned.
    """
    sysinfo = coerce(SysInfo, sysinfo)

    if sysinfo.admin_ip and is_valid_ip_address(sysinfo.admin_ip):
        return sysinfo.admin_ip

    if sysinfo.admin_ip:
        logger.debug(
            f"Admin IP {sysinfo.admin_ip!r} is not an address, "
            "falling back to network interfaces"
        )

    nic = admin_nic_from_sysinfo(sysinfo)
    if nic is not None:
        return nic.ip4addr

    return None


def agent_ip_from_sysinfo(sysinfo: SysInfo | Mapping[str, Any]) -> str | None:
    """Return the address agents on a compute node should be reached at.

    Mock compute nodes report "System Type" "Virtual" and carry their own
    "CN Agent IP". For all others this is the admin IP; use
    admin_ip_from_sysinfo() directly when that is what is wanted.
    """
    sysinfo = coerce(SysInfo, sysinfo)

    if sysinfo.system_type == VIRTUAL_SYSTEM_TYPE and sysinfo.has_cn_agent_ip:
        return sysinfo.cn_agent_ip

    return admin_ip_from_sysinfo(sysinfo)
