"""Constants describing devices, limits and return codes."""

import enum

# Device types for utilization queries.
AI_CORE = 2
# Device types for frequency queries.
MEMORY_FREQ = 1
CTRL_CPU_FREQ = 2
HBM_FREQ = 6
AI_CORE_CURRENT_FREQ = 7
AI_CORE_RATED_FREQ = 9
VECTOR_CORE = 12
OVERALL = 13
HBM_UTILIZATION = 6

INVALID_VAL = 0
SUCCESS = 0
DEVICE_NOT_READY_ERR_CODE_STR = "-8012"
DEVICE_NOT_READY_ERR_CODE = -8012
CARD_DROP_FAULT_CODE = 0x40F84E00
RET_ERROR = -1
PERCENT = 100
MAX_ERROR_CODE_COUNT = 128
UN_RET_ERROR = 2**32 - 1
ABNORMAL = "Abnormal"
CHANNEL_STATE_OK = 1

DEVICE_IP_LENGTH = 4
HIAI_MAX_CARD_ID = 2**31 - 1
HIAI_MAX_CARD_NUM = 64
HIAI_MAX_DEVICE_NUM = 4
NPU_TYPE = 0

REDUCE_ONE_PERCENT = 0.01
REDUCE_TENTH = 0.1
DEFAULT_TEMPERATURE_WHEN_QUERY_FAILED = -275

ASCEND310 = "Ascend310"
ASCEND310B = "Ascend310B"
ASCEND310P = "Ascend310P"
ASCEND910 = "Ascend910"
ASCEND910B = "Ascend910B"
ASCEND910A3 = "Ascend910A3"
ATLAS200I_SOC = "Atlas 200I SoC A1"

NEVER_STOP_TIMEOUT = -1
DCMI_API_TIMEOUT = 1
SUBSCRIBE_ALL_DEVICE = -1
MIN_VDEV_ID = 100
MAX_VDEV_ID = 1124
INVALID_ID = 0xFFFFFFFF
NOT_SUPPORT_METRIC_VALUE = 8255
FAILED_METRIC_VALUE = -1
FAILED_VALUE = 0xFFFFFFFF
MAX_ERROR_CODE_LEN = 10

BOOT_START_FINISH = 16

PATTERN_910A = r"^910"
PATTERN_910B = r"^910B\d{1}"

AMP_MODE = "AMP"
SMP_MODE = "SMP"
NETWORK_INIT = 6
NETWORK_SUCCESS = 0
MAX_PROC_NUM = 32
UNIT_MB = 1024.0 * 1024.0
CHIP_910 = "910"

A300IA2_BOARD_ID = 0x28
A900A3_SUPER_POD_BIN1_BOARD_ID = 0xB0
A900A3_SUPER_POD_BIN2_BOARD_ID = 0xB1
A900A3_SUPER_POD_BIN3_BOARD_ID = 0xB2
A800IA3_BOARD_ID = 0xB3
A900A3_SUPER_POD_MAIN_BOARD_ID1 = 0x18
A900A3_SUPER_POD_MAIN_BOARD_ID2 = 0x19
A800IA3_MAIN_BOARD_ID = 0x14
A9000A3_SUPER_POD_MAIN_BOARD_ID1 = 0x1C
A9000A3_SUPER_POD_MAIN_BOARD_ID2 = 0x1D

A3_BOARD_IDS = frozenset({
    A900A3_SUPER_POD_BIN1_BOARD_ID,
    A900A3_SUPER_POD_BIN2_BOARD_ID,
    A900A3_SUPER_POD_BIN3_BOARD_ID,
    A800IA3_BOARD_ID,
})
A900A3_SUPER_POD_MAIN_BOARD_IDS = frozenset({
    A900A3_SUPER_POD_MAIN_BOARD_ID1,
    A900A3_SUPER_POD_MAIN_BOARD_ID2,
})
A9000A3_SUPER_POD_MAIN_BOARD_IDS = frozenset({
    A9000A3_SUPER_POD_MAIN_BOARD_ID1,
    A9000A3_SUPER_POD_MAIN_BOARD_ID2,
})

DOMAIN_FOR_LOGIC_ID_ERR = "logicID"

ERR_MSG_INIT_CARD_LIST_FAILED = "get card list failed for init"
ERR_MSG_GET_BOARD_INFO_FAILED = "get board info failed, no card found"

MAX_HCCSPING_MESH_ADDR = 1024
MIN_PKT_SIZE = 1792
MAX_PKT_SIZE = 3000
MIN_PKT_SEND_NUM = 1
MAX_PKT_SEND_NUM = 1000
MIN_PKT_INTERVAL = 1
MAX_PKT_INTERVAL = 1000
MIN_TASK_INTERVAL = 1
MAX_TASK_INTERVAL = 60
INTERNAL_PING_MESH_TASK_ID = 0
EXTERNAL_PING_MESH_TASK_ID = 1
DEFAULT_PING_MESH_PORT_ID = 0
DEFAULT_PKT_SIZE = 1792
DEFAULT_PKT_SEND_NUM = 10
DEFAULT_PKT_INTERVAL = 10
DEFAULT_TIMEOUT = 1


class DcmiDeviceType(enum.IntEnum):
    """Component types understood by the device management interface."""

    DDR = 0
    SRAM = 1
    HBM = 2
    NPU = 3
    NONE = 0xFF


class FaultState(enum.IntEnum):
    """Whether a device fault was raised, cleared or happened once."""

    RECOVER = 0
    OCCUR = 1
    ONCE = 2