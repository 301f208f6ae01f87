"""Record types for the data this package reads.

These Pydantic models describe compute node sysinfo, VM metadata and
NAPI network/NIC objects. They are owned by other services; every known
field is optional and unknown keys are kept so a partial or newer record
still validates.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, Field


class Record(BaseModel):
    """Base for externally defined records."""

    class Config:
        extra = "allow"
        populate_by_name = True


RecordT = TypeVar("RecordT", bound=Record)


def coerce(model: type[RecordT], value: Any) -> RecordT:
    """Return value as an instance of model, validating mappings.

    Raises pydantic.ValidationError if a known field has the wrong type.
    """
    if isinstance(value, model):
        return value
    return model.model_validate(value)


# --- NAPI objects ---

class Nic(Record):
    """A NIC as found in VM metadata, sdc:nics or NAPI."""
    nic_tag: str | None = None  # Role tag, possibly rack-scoped (e.g. "admin_rack_12")
    ip: str | None = None
    ip4addr: str | None = None
    mac: str | None = None


class Network(Record):
    """A NAPI network or network pool."""
    name: str | None = None
    nic_tag: str | None = None
    nic_tags_present: list[str] | None = None  # Only set on network pools


# --- VM metadata ---

class VmMetadata(Record):
    """VM metadata; only the NIC list is consulted."""
    nics: list[Nic] | None = None


# --- Compute node sysinfo ---

class InterfaceRecord(Record):
    """One entry of sysinfo "Network Interfaces"."""
    nic_names: list[str] | None = Field(default=None, alias="NIC Names")
    ip4addr: str | None = None


class SysInfo(Record):
    """A compute node's sysinfo blob.

    Sysinfo uses human-readable keys; they are mapped to snake_case
    attributes through field aliases.
    """
    admin_nic_tag: str | None = Field(default=None, alias="Admin NIC Tag")
    admin_ip: str | None = Field(default=None, alias="Admin IP")
    system_type: str | None = Field(default=None, alias="System Type")
    cn_agent_ip: str | None = Field(default=None, alias="CN Agent IP")
    network_interfaces: dict[str, InterfaceRecord] | None = Field(
        default=None, alias="Network Interfaces"
    )

    @property
    def has_cn_agent_ip(self) -> bool:
        """True if "CN Agent IP" was supplied at all, even as an empty value."""
        return "cn_agent_ip" in self.model_fields_set
