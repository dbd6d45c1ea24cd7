import dataclasses
import json

import pytest

from ascendkit.types import (
    BandwidthInfo,
    CgoSocTotalResource,
    CgoVDevQueryInfo,
    ChipInfo,
    DevProcessInfo,
    DevProcInfo,
    ECCInfo,
    HbmAggregateInfo,
    HbmInfo,
    HccsStatisticInfo,
    HccspingMeshOperate,
    MemoryInfo,
    NpuNetInfo,
    PCIEBwStat,
    PcieStatValue,
    VirtualDevInfo,
)


def test_memory_info_to_dict_keys_and_values():
    info = MemoryInfo(memory_size=10, memory_available=4, frequency=7, utilization=40)
    assert info.to_dict() == {
        "memory_size": 10,
        "memory_available": 4,
        "memory_frequency": 7,
        "memory_utilization": 40,
    }


def test_hbm_info_to_dict_keys_and_values():
    info = HbmInfo(memory_size=32, frequency=1600, usage=8, temp=45, bandwidth_util_rate=20)
    assert info.to_dict() == {
        "memory_size": 32,
        "hbm_frequency": 1600,
        "memory_usage": 8,
        "hbm_temperature": 45,
        "hbm_bandwidth_util": 20,
    }


def test_chip_info_to_dict_keys_and_values():
    info = ChipInfo(type="Ascend", name="910B3", version="V1", npu_name="n", aicore_cnt=20)
    assert info.to_dict() == {
        "chip_type": "Ascend",
        "chip_name": "910B3",
        "chip_version": "V1",
        "npu_name": "n",
        "aicore_cnt": 20,
    }


def test_bandwidth_info_json_round_trip():
    info = BandwidthInfo(tx_value=1.5, rx_value=2.25)
    decoded = json.loads(json.dumps(info.to_dict()))
    assert BandwidthInfo(tx_value=decoded["tx_value"], rx_value=decoded["rx_value"]) == info


@pytest.mark.parametrize("cls", [MemoryInfo, HbmInfo, ChipInfo, BandwidthInfo])
def test_to_dict_has_one_key_per_field(cls):
    assert len(cls().to_dict()) == len(dataclasses.fields(cls))


def test_defaults_are_zero_values():
    assert HbmInfo().to_dict()["memory_size"] == 0
    assert ChipInfo().name == ""
    assert NpuNetInfo().optical_info is None
    assert HbmAggregateInfo().ecc_info is None


def test_list_defaults_are_independent():
    first = HccsStatisticInfo()
    second = HccsStatisticInfo()
    first.tx_cnt.append(5)
    assert second.tx_cnt == []
    assert first.tx_cnt == [5]


def test_nested_defaults_are_independent():
    first = CgoVDevQueryInfo()
    second = CgoVDevQueryInfo()
    first.base.reserved.append(1)
    first.computing.aic = 2.0
    assert second.base.reserved == []
    assert second.computing.aic == 0.0


def test_pcie_stat_equality_and_replace():
    stat = PCIEBwStat(pcie_rx_p_bw=PcieStatValue(1, 3, 2))
    changed = dataclasses.replace(stat, pcie_tx_p_bw=PcieStatValue(4, 6, 5))
    assert changed.pcie_rx_p_bw == stat.pcie_rx_p_bw
    assert changed != stat
    assert changed.pcie_tx_p_bw.pcie_max_bw == 6


def test_hbm_aggregate_holds_parts():
    hbm = HbmInfo(memory_size=64)
    ecc = ECCInfo(enable_flag=1, single_bit_error_cnt=3)
    agg = HbmAggregateInfo(hbm_info=hbm, ecc_info=ecc)
    assert agg.hbm_info.memory_size == 64
    assert agg.ecc_info.single_bit_error_cnt == 3


def test_dev_process_info_asdict_round_trip():
    info = DevProcessInfo(dev_proc_array=[DevProcInfo(pid=12, mem_usage=3.5)], proc_num=1)
    as_dict = dataclasses.asdict(info)
    rebuilt = DevProcessInfo(
        dev_proc_array=[DevProcInfo(**item) for item in as_dict["dev_proc_array"]],
        proc_num=as_dict["proc_num"],
    )
    assert rebuilt == info


def test_virtual_dev_info_nested_total():
    total = CgoSocTotalResource(vdev_num=2, vdev_id=[100, 101])
    info = VirtualDevInfo(total_resource=total)
    assert info.total_resource.vdev_id == [100, 101]
    assert info.vdev_info == []


def test_hccsping_mesh_operate_fields():
    op = HccspingMeshOperate(dst_addr="addr", pkt_size=1792, task_id=1)
    assert dataclasses.asdict(op)["pkt_size"] == 1792
    assert op.timeout == 0
    assert op.dst_addr == "addr"