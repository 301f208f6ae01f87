"""Tests for record types (schemas.py)."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from netroles.schemas import InterfaceRecord, Network, Nic, SysInfo, VmMetadata, coerce


class TestSysInfo:
    """Tests for SysInfo key aliases."""

    def test_sysinfo_keys_map_to_attributes(self):
        sysinfo = SysInfo.model_validate({
            "Admin NIC Tag": "sdcadmin",
            "Admin IP": "dhcp",
            "System Type": "Virtual",
            "CN Agent IP": "10.1.1.1",
            "Network Interfaces": {
                "e1000g0": {"NIC Names": ["admin"], "ip4addr": "10.0.0.5", "Link Status": "up"},
            },
            "UUID": "564d0f6e-0000-0000-0000-000000000000",
        })

        assert sysinfo.admin_nic_tag == "sdcadmin"
        assert sysinfo.admin_ip == "dhcp"
        assert sysinfo.system_type == "Virtual"
        assert sysinfo.cn_agent_ip == "10.1.1.1"
        iface = sysinfo.network_interfaces["e1000g0"]
        assert iface.nic_names == ["admin"]
        assert iface.ip4addr == "10.0.0.5"

    def test_populate_by_name(self):
        sysinfo = SysInfo(admin_ip="10.0.0.9", system_type="SunOS")
        assert sysinfo.admin_ip == "10.0.0.9"

    def test_has_cn_agent_ip(self):
        assert SysInfo.model_validate({"CN Agent IP": None}).has_cn_agent_ip
        assert SysInfo.model_validate({"CN Agent IP": "10.1.1.1"}).has_cn_agent_ip
        assert not SysInfo.model_validate({}).has_cn_agent_ip

    def test_empty_sysinfo(self):
        sysinfo = SysInfo.model_validate({})
        assert sysinfo.network_interfaces is None
        assert sysinfo.admin_nic_tag is None


class TestCoerce:
    """Tests for coerce()."""

    def test_returns_model_instance_unchanged(self):
        nic = Nic(nic_tag="admin")
        assert coerce(Nic, nic) is nic

    def test_validates_mapping(self):
        net = coerce(Network, {"name": "pool1", "nic_tags_present": ["admin"], "uuid": "abc"})
        assert isinstance(net, Network)
        assert net.nic_tags_present == ["admin"]

    def test_nested_nics(self):
        vm = coerce(VmMetadata, {"nics": [{"nic_tag": "admin", "ip": "10.0.0.1", "primary": True}]})
        assert isinstance(vm.nics[0], Nic)
        assert vm.nics[0].model_dump()["primary"] is True

    def test_wrong_type_raises(self):
        with pytest.raises(ValidationError):
            coerce(InterfaceRecord, {"NIC Names": "admin"})

    def test_mapping_is_not_mutated(self):
        data = {"nics": [{"nic_tag": "admin"}]}
        coerce(VmMetadata, data)
        assert data == {"nics": [{"nic_tag": "admin"}]}
