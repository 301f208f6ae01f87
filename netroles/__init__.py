"""Network role lookup and classification.

This package identifies NICs and networks by role (admin, external,
internal, manta or a custom tag) in:
- Compute node sysinfo
- VM metadata NIC lists
- Raw NIC arrays and NAPI network objects
"""

from netroles.roles import (
    NetworkRole,
    admin_ip_from_nics_array,
    admin_ip_from_sysinfo,
    admin_ip_from_vm_metadata,
    admin_mac_from_vm_metadata,
    admin_nic_from_sysinfo,
    agent_ip_from_sysinfo,
    external_ip_from_vm_metadata,
    extract_from_nics,
    extract_from_vm_metadata,
    is_net_admin,
    is_net_external,
    is_net_internal,
    is_net_manta,
    is_net_tagged,
    is_nic_admin,
    is_nic_external,
    is_nic_manta,
    is_nic_tagged,
    manta_ip_from_vm_metadata,
    nic_from_nics,
)
from netroles.schemas import InterfaceRecord, Network, Nic, SysInfo, VmMetadata
from netroles.version import __version__

__all__ = [
    "__version__",
    # Roles
    "NetworkRole",
    # Records
    "InterfaceRecord",
    "Network",
    "Nic",
    "SysInfo",
    "VmMetadata",
    # From sysinfo
    "admin_nic_from_sysinfo",
    "admin_ip_from_sysinfo",
    "agent_ip_from_sysinfo",
    # From VM metadata
    "admin_ip_from_vm_metadata",
    "external_ip_from_vm_metadata",
    "manta_ip_from_vm_metadata",
    "admin_mac_from_vm_metadata",
    "extract_from_vm_metadata",
    # From NICs arrays
    "admin_ip_from_nics_array",
    "extract_from_nics",
    "nic_from_nics",
    # NIC predicates
    "is_nic_admin",
    "is_nic_external",
    "is_nic_manta",
    "is_nic_tagged",
    # Network predicates
    "is_net_admin",
    "is_net_external",
    "is_net_internal",
    "is_net_manta",
    "is_net_tagged",
]
