"""Validation, classification and copying helpers for device information."""

import copy
import logging
import re
from dataclasses import dataclass
from typing import Optional

from ascendkit import constants as c
from ascendkit.types import ChipInfo, HccsStatisticInfo, HccspingMeshOperate

_log = logging.getLogger(__name__)

_REG_910A = re.compile(c.PATTERN_910A, re.ASCII)
_REG_910B = re.compile(c.PATTERN_910B, re.ASCII)

_TEMPLATES_910 = frozenset({"vir16", "vir08", "vir04", "vir02", "vir01"})
_TEMPLATES_910B = frozenset({
    "vir03_1c_8g", "vir05_1c_8g", "vir05_1c_16g",
    "vir06_1c_16g", "vir10_3c_16g", "vir10_3c_16g_nm",
    "vir10_3c_32g", "vir10_4c_16g_m", "vir12_3c_32g",
})
_TEMPLATES_310P = frozenset({
    "vir04", "vir02", "vir01", "vir04_3c", "vir02_1c",
    "vir04_4c_dvpp", "vir04_3c_ndvpp",
})
_TEMPLATES_BY_DEV_TYPE = {
    c.ASCEND310P: _TEMPLATES_310P,
    c.ASCEND910: _TEMPLATES_910,
    c.ASCEND910B: _TEMPLATES_910B,
}


class InvalidOperateError(ValueError):
    """Raised when HCCS ping-mesh task parameters are out of range."""


@dataclass
class _ProfilingSettings:
    profiling_time: int = 0
    hccs_bw_profiling_time: int = 0


_settings = _ProfilingSettings()


def is_greater_than_or_equal_int32(num: int) -> bool:
    """True if ``num`` reaches the largest 32-bit signed integer."""
    return num >= 2**31 - 1


def is_valid_utilization_rate(num: int) -> bool:
    """True if ``num`` is a utilization rate between 0 and 100."""
    return 0 <= num <= c.PERCENT


def is_valid_chip_info(chip: ChipInfo) -> bool:
    """True if the chip has a name, type or version."""
    return bool(chip.name or chip.type or chip.version)


def is_valid_board_info(board) -> bool:
    """True if at least one board identifier is valid."""
    return any(
        value != c.INVALID_ID
        for value in (board.board_id, board.pcb_id, board.bom_id, board.slot_id)
    )


def is_valid_main_board_info(main_board_id: int) -> bool:
    """True if the main board id is valid."""
    return main_board_id != c.INVALID_ID


def is_valid_card_id(card_id: int) -> bool:
    """True if ``card_id`` is within the driver's card id range."""
    return 0 <= card_id < c.HIAI_MAX_CARD_ID


def is_valid_device_id(device_id: int) -> bool:
    """True if ``device_id`` is a valid device index within a card."""
    return 0 <= device_id < c.HIAI_MAX_DEVICE_NUM


def is_valid_logic_id_or_phy_id(id_: int) -> bool:
    """True if ``id_`` is a valid logic or physical id."""
    return 0 <= id_ < c.HIAI_MAX_CARD_NUM * c.HIAI_MAX_DEVICE_NUM


def is_valid_card_id_and_device_id(card_id: int, device_id: int) -> bool:
    """True if both the card id and the device id are valid."""
    return is_valid_card_id(card_id) and is_valid_device_id(device_id)


def is_valid_dev_num_in_card(num: int) -> bool:
    """True if ``num`` is a valid number of devices on one card."""
    return 0 < num <= c.HIAI_MAX_DEVICE_NUM


def is_valid_vdev_id(vdev_id: int) -> bool:
    """True if ``vdev_id`` is within the virtual device id range."""
    return c.MIN_VDEV_ID <= vdev_id < c.MAX_VDEV_ID


def is_valid_port_id(port_id: int) -> bool:
    """True if ``port_id`` is the default ping-mesh port."""
    return port_id == c.DEFAULT_PING_MESH_PORT_ID


def is_valid_task_id(task_id: int) -> bool:
    """True if ``task_id`` is the internal or external ping-mesh task."""
    return task_id in (c.INTERNAL_PING_MESH_TASK_ID, c.EXTERNAL_PING_MESH_TASK_ID)


def _check_range(label: str, value: int, low: int, high: int) -> None:
    if value < low or value > high:
        raise InvalidOperateError(
            f"{label} {value} is invalid, should be between {low} and {high}"
        )


def validate_hccsping_mesh_operate(operate: HccspingMeshOperate) -> None:
    """Raise InvalidOperateError if any ping-mesh parameter is out of range."""
    addr_len = len(operate.dst_addr.encode("utf-8"))
    if addr_len > c.MAX_HCCSPING_MESH_ADDR:
        raise InvalidOperateError(
            f"dst addr length {addr_len} is invalid, should not be greater than "
            f"{c.MAX_HCCSPING_MESH_ADDR}"
        )
    _check_range("pkt size", operate.pkt_size, c.MIN_PKT_SIZE, c.MAX_PKT_SIZE)
    _check_range("pkt send num", operate.pkt_send_num, c.MIN_PKT_SEND_NUM, c.MAX_PKT_SEND_NUM)
    _check_range("pkt interval", operate.pkt_interval, c.MIN_PKT_INTERVAL, c.MAX_PKT_INTERVAL)
    _check_range("task interval", operate.task_interval, c.MIN_TASK_INTERVAL,
                 c.MAX_TASK_INTERVAL)
    if not is_valid_task_id(operate.task_id):
        raise InvalidOperateError(f"task id {operate.task_id} is invalid")


def get_device_type_by_chip_name(chip_name: str) -> str:
    """Map a chip name to its device type, or ``""`` if unknown."""
    if "310P" in chip_name:
        return c.ASCEND310P
    if "310B" in chip_name:
        return c.ASCEND310B
    if "310" in chip_name:
        return c.ASCEND310
    if _REG_910B.match(chip_name):
        return c.ASCEND910B
    if _REG_910A.match(chip_name):
        return c.ASCEND910
    return ""


def is_valid_template_name(dev_type: str, template_name: str) -> bool:
    """True if ``template_name`` is a virtual-device template of ``dev_type``."""
    return template_name in _TEMPLATES_BY_DEV_TYPE.get(dev_type, frozenset())


def remove_duplicate(values) -> list:
    """Return the distinct values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


def get_npu_name(chip_info: Optional[ChipInfo]) -> str:
    """Return ``name-type-version``, or ``""`` if the chip info is missing or empty."""
    if chip_info is None:
        return ""
    if not (chip_info.name or chip_info.type or chip_info.version):
        return ""
    return f"{chip_info.name}-{chip_info.type}-{chip_info.version}"


def set_external_params(profiling_time: int) -> None:
    """Set the PCIe bandwidth profiling time."""
    _settings.profiling_time = profiling_time


def set_hccs_bw_profiling_time(hccsbw_profiling_time: int) -> None:
    """Set the HCCS bandwidth profiling time."""
    _settings.hccs_bw_profiling_time = hccsbw_profiling_time


def get_profiling_time() -> int:
    """Return the PCIe bandwidth profiling time."""
    return _settings.profiling_time


def get_hccs_bw_profiling_time() -> int:
    """Return the HCCS bandwidth profiling time."""
    return _settings.hccs_bw_profiling_time


def is_910b_chip(chip_name: str) -> bool:
    """True if the chip name denotes a 910B chip."""
    return _REG_910B.match(chip_name) is not None


def deep_copy_chip_info(chip_info: Optional[ChipInfo]) -> Optional[ChipInfo]:
    """Copy the type, name and version of a chip info; ``None`` stays ``None``."""
    if chip_info is None:
        return None
    return ChipInfo(type=chip_info.type, name=chip_info.name, version=chip_info.version)


def deep_copy_slice(values):
    """Return a new list with the same items; non-list values are returned unchanged."""
    if isinstance(values, list):
        return list(values)
    _log.warning("Unsupported slice type")
    return values


def deep_copy_hccs_statistic_info(
        info: Optional[HccsStatisticInfo]) -> Optional[HccsStatisticInfo]:
    """Copy HCCS statistics with independent counter lists."""
    if info is None:
        return None
    return HccsStatisticInfo(
        tx_cnt=deep_copy_slice(info.tx_cnt),
        rx_cnt=deep_copy_slice(info.rx_cnt),
        crc_err_cnt=deep_copy_slice(info.crc_err_cnt),
        retry_cnt=deep_copy_slice(info.retry_cnt),
        reserved_field_cnt=deep_copy_slice(info.reserved_field_cnt),
    )


def deep_copy(info):
    """Return an independent copy of a device record; ``None`` stays ``None``."""
    if info is None:
        return None
    return copy.deepcopy(info)


def is_910a3_chip(board_id: int) -> bool:
    """True if the board id belongs to a 910A3 product."""
    return board_id in c.A3_BOARD_IDS


def get_dev_type(chip_name: str, board_id: int) -> str:
    """Return the device type from the board id, falling back to the chip name."""
    if is_910a3_chip(board_id):
        return c.ASCEND910A3
    return get_device_type_by_chip_name(chip_name)


def is_a900a3_super_pod(main_board_id: int) -> bool:
    """True if the main board id belongs to an A900 A3 super pod."""
    return main_board_id in c.A900A3_SUPER_POD_MAIN_BOARD_IDS


def is_a9000a3_super_pod(main_board_id: int) -> bool:
    """True if the main board id belongs to an A9000 A3 super pod."""
    return main_board_id in c.A9000A3_SUPER_POD_MAIN_BOARD_IDS


def is_800ia3_chip(main_board_id: int) -> bool:
    """True if the main board id belongs to an A800I A3."""
    return main_board_id == c.A800IA3_MAIN_BOARD_ID