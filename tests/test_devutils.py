import pytest

from ascendkit import constants as c
from ascendkit import devutils as du
from ascendkit.types import (
    BoardInfo,
    ChipInfo,
    DevProcessInfo,
    DevProcInfo,
    HbmInfo,
    HccsStatisticInfo,
    HccspingMeshOperate,
)


def default_operate() -> HccspingMeshOperate:
    return HccspingMeshOperate(
        dst_addr="1111",
        pkt_size=c.MIN_PKT_SIZE,
        pkt_send_num=c.MIN_PKT_SEND_NUM,
        pkt_interval=c.MIN_PKT_INTERVAL,
        task_interval=c.MIN_TASK_INTERVAL,
        task_id=c.INTERNAL_PING_MESH_TASK_ID,
    )


@pytest.mark.parametrize("values", [[1, 2], [1.0, 2.0]])
def test_deep_copy_slice_makes_new_list(values):
    copied = du.deep_copy_slice(values)
    assert copied == values
    assert copied is not values


def test_deep_copy_slice_unsupported_returns_same():
    values = (1, 2)
    assert du.deep_copy_slice(values) is values


def test_is_valid_port_id():
    assert du.is_valid_port_id(1) is False
    assert du.is_valid_port_id(c.DEFAULT_PING_MESH_PORT_ID) is True


def test_is_valid_task_id():
    assert du.is_valid_task_id(c.INTERNAL_PING_MESH_TASK_ID) is True
    assert du.is_valid_task_id(c.EXTERNAL_PING_MESH_TASK_ID) is True
    assert du.is_valid_task_id(3) is False


def test_valid_operate_passes():
    op = default_operate()
    du.validate_hccsping_mesh_operate(op)
    assert op.dst_addr == "1111"


def test_dst_addr_too_long():
    op = default_operate()
    op.dst_addr = "a" * (c.MAX_HCCSPING_MESH_ADDR + 1)
    with pytest.raises(du.InvalidOperateError) as exc:
        du.validate_hccsping_mesh_operate(op)
    assert str(exc.value) == "dst addr length 1025 is invalid, should not be greater than 1024"


@pytest.mark.parametrize(
    "attr,label,low,high",
    [
        ("pkt_size", "pkt size", c.MIN_PKT_SIZE, c.MAX_PKT_SIZE),
        ("pkt_send_num", "pkt send num", c.MIN_PKT_SEND_NUM, c.MAX_PKT_SEND_NUM),
        ("pkt_interval", "pkt interval", c.MIN_PKT_INTERVAL, c.MAX_PKT_INTERVAL),
        ("task_interval", "task interval", c.MIN_TASK_INTERVAL, c.MAX_TASK_INTERVAL),
    ],
)
@pytest.mark.parametrize("offset", ["below", "above"])
def test_range_errors(attr, label, low, high, offset):
    op = default_operate()
    value = low - 1 if offset == "below" else high + 1
    setattr(op, attr, value)
    with pytest.raises(du.InvalidOperateError) as exc:
        du.validate_hccsping_mesh_operate(op)
    assert str(exc.value) == (
        f"{label} {value} is invalid, should be between {low} and {high}"
    )


def test_task_id_error():
    op = default_operate()
    op.task_id = c.EXTERNAL_PING_MESH_TASK_ID + 1
    with pytest.raises(du.InvalidOperateError, match="^task id 2 is invalid$"):
        du.validate_hccsping_mesh_operate(op)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("310P3", c.ASCEND310P),
        ("310B1", c.ASCEND310B),
        ("310", c.ASCEND310),
        ("910B3", c.ASCEND910B),
        ("910", c.ASCEND910),
        ("910ProB", c.ASCEND910),
        ("x910", ""),
    ],
)
def test_get_device_type_by_chip_name(name, expected):
    assert du.get_device_type_by_chip_name(name) == expected


def test_is_910b_chip():
    assert du.is_910b_chip("910B4") is True
    assert du.is_910b_chip("910") is False


def test_get_dev_type():
    assert du.get_dev_type("910B1", c.A800IA3_BOARD_ID) == c.ASCEND910A3
    assert du.get_dev_type("910B1", c.A300IA2_BOARD_ID) == c.ASCEND910B


def test_board_product_checks():
    assert du.is_910a3_chip(0xB2) is True
    assert du.is_910a3_chip(0x28) is False
    assert du.is_a900a3_super_pod(0x18) is True
    assert du.is_a900a3_super_pod(0x1C) is False
    assert du.is_a9000a3_super_pod(0x1D) is True
    assert du.is_800ia3_chip(0x14) is True
    assert du.is_800ia3_chip(0x15) is False


def test_template_names():
    assert du.is_valid_template_name(c.ASCEND310P, "vir04_3c") is True
    assert du.is_valid_template_name(c.ASCEND910, "vir16") is True
    assert du.is_valid_template_name(c.ASCEND910B, "vir10_3c_16g_nm") is True
    assert du.is_valid_template_name(c.ASCEND910B, "vir16") is False
    assert du.is_valid_template_name(c.ASCEND310, "vir01") is False


def test_id_ranges():
    assert du.is_valid_card_id(0) is True
    assert du.is_valid_card_id(-1) is False
    assert du.is_valid_device_id(3) is True
    assert du.is_valid_device_id(4) is False
    assert du.is_valid_logic_id_or_phy_id(255) is True
    assert du.is_valid_logic_id_or_phy_id(256) is False
    assert du.is_valid_card_id_and_device_id(1, 4) is False
    assert du.is_valid_card_id_and_device_id(1, 0) is True
    assert du.is_valid_dev_num_in_card(0) is False
    assert du.is_valid_dev_num_in_card(4) is True
    assert du.is_valid_vdev_id(100) is True
    assert du.is_valid_vdev_id(1124) is False


def test_numeric_checks():
    assert du.is_greater_than_or_equal_int32(2**31 - 1) is True
    assert du.is_greater_than_or_equal_int32(2**31 - 2) is False
    assert du.is_valid_utilization_rate(100) is True
    assert du.is_valid_utilization_rate(101) is False


def test_info_validity():
    assert du.is_valid_chip_info(ChipInfo()) is False
    assert du.is_valid_chip_info(ChipInfo(version="V1")) is True
    invalid = BoardInfo(c.INVALID_ID, c.INVALID_ID, c.INVALID_ID, c.INVALID_ID)
    assert du.is_valid_board_info(invalid) is False
    assert du.is_valid_board_info(BoardInfo(c.INVALID_ID, 1, c.INVALID_ID, c.INVALID_ID)) is True
    assert du.is_valid_main_board_info(c.INVALID_ID) is False
    assert du.is_valid_main_board_info(0x14) is True


def test_remove_duplicate():
    assert sorted(du.remove_duplicate(["a", "b", "a", "c", "b"])) == ["a", "b", "c"]
    assert du.remove_duplicate([]) == []


def test_get_npu_name():
    assert du.get_npu_name(None) == ""
    assert du.get_npu_name(ChipInfo()) == ""
    assert du.get_npu_name(ChipInfo(type="Ascend", name="910B", version="V1")) == "910B-Ascend-V1"


def test_profiling_settings():
    du.set_external_params(200)
    du.set_hccs_bw_profiling_time(300)
    assert du.get_profiling_time() == 200
    assert du.get_hccs_bw_profiling_time() == 300


def test_deep_copy_chip_info_drops_extra_fields():
    chip = ChipInfo(type="Ascend", name="910", version="V1", npu_name="n", aicore_cnt=3)
    copied = du.deep_copy_chip_info(chip)
    assert copied == ChipInfo(type="Ascend", name="910", version="V1")
    assert du.deep_copy_chip_info(None) is None


def test_deep_copy_hccs_statistic_info_independent():
    info = HccsStatisticInfo(tx_cnt=[1], rx_cnt=[2], crc_err_cnt=[3], retry_cnt=[4],
                             reserved_field_cnt=[5])
    copied = du.deep_copy_hccs_statistic_info(info)
    assert copied == info
    copied.crc_err_cnt.append(9)
    assert info.crc_err_cnt == [3]
    assert du.deep_copy_hccs_statistic_info(None) is None


def test_deep_copy_generic():
    hbm = HbmInfo(memory_size=10, frequency=2, usage=3, temp=40, bandwidth_util_rate=5)
    assert du.deep_copy(hbm) == hbm
    procs = DevProcessInfo(dev_proc_array=[DevProcInfo(pid=1, mem_usage=2.0)], proc_num=1)
    copied = du.deep_copy(procs)
    copied.dev_proc_array.append(DevProcInfo(pid=2))
    assert len(procs.dev_proc_array) == 1
    assert du.deep_copy(None) is None