"""Plain data records describing device, memory, network and virtual-device state."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class MemoryInfo:
    """Device memory size, availability, frequency and utilization."""

    memory_size: int = 0
    memory_available: int = 0
    frequency: int = 0
    utilization: int = 0

    def to_dict(self) -> dict:
        """Return the record keyed by its JSON field names."""
        return {
            "memory_size": self.memory_size,
            "memory_available": self.memory_available,
            "memory_frequency": self.frequency,
            "memory_utilization": self.utilization,
        }


@dataclass
class HbmInfo:
    """High bandwidth memory info: sizes in MB, frequency in MHz."""

    memory_size: int = 0
    frequency: int = 0
    usage: int = 0
    temp: int = 0
    bandwidth_util_rate: int = 0

    def to_dict(self) -> dict:
        """Return the record keyed by its JSON field names."""
        return {
            "memory_size": self.memory_size,
            "hbm_frequency": self.frequency,
            "memory_usage": self.usage,
            "hbm_temperature": self.temp,
            "hbm_bandwidth_util": self.bandwidth_util_rate,
        }


@dataclass
class ECCInfo:
    """ECC error counters of a device component."""

    enable_flag: int = 0
    single_bit_error_cnt: int = 0
    double_bit_error_cnt: int = 0
    total_single_bit_error_cnt: int = 0
    total_double_bit_error_cnt: int = 0
    single_bit_isolated_pages_cnt: int = 0
    double_bit_isolated_pages_cnt: int = 0


@dataclass
class HbmAggregateInfo:
    """HBM information together with its ECC information."""

    hbm_info: Optional[HbmInfo] = None
    ecc_info: Optional[ECCInfo] = None


@dataclass
class ChipInfo:
    """Chip type, name and version."""

    type: str = ""
    name: str = ""
    version: str = ""
    npu_name: str = ""
    aicore_cnt: int = 0

    def to_dict(self) -> dict:
        """Return the record keyed by its JSON field names."""
        return {
            "chip_type": self.type,
            "chip_name": self.name,
            "chip_version": self.version,
            "npu_name": self.npu_name,
            "aicore_cnt": self.aicore_cnt,
        }


@dataclass
class ChipBaseInfo:
    """All identifiers of one chip."""

    physic_id: int = 0
    logic_id: int = 0
    card_id: int = 0
    device_id: int = 0


@dataclass
class CgoCreateVDevOut:
    """Result of creating a virtual device."""

    vdev_id: int = 0
    pcie_bus: int = 0
    pcie_device: int = 0
    pcie_func: int = 0
    vfg_id: int = 0
    reserved: list = field(default_factory=list)


@dataclass
class CgoCreateVDevRes:
    """Request for creating a virtual device."""

    vdev_id: int = 0
    vfg_id: int = 0
    template_name: str = ""
    reserved: list = field(default_factory=list)


@dataclass
class CgoBaseResource:
    """Base resource of a virtual device."""

    token: int = 0
    token_max: int = 0
    task_timeout: int = 0
    vfg_id: int = 0
    vip_mode: int = 0
    reserved: list = field(default_factory=list)


@dataclass
class CgoComputingResource:
    """Computing, memory (MB), id and CPU resources of a virtual device."""

    aic: float = 0.0
    aiv: float = 0.0
    dsa: int = 0
    rtsq: int = 0
    acsq: int = 0
    cdqm: int = 0
    c_core: int = 0
    ffts: int = 0
    sdma: int = 0
    pcie_dma: int = 0
    memory_size: int = 0
    event_id: int = 0
    notify_id: int = 0
    stream_id: int = 0
    model_id: int = 0
    topic_schedule_aicpu: int = 0
    host_ctrl_cpu: int = 0
    host_aicpu: int = 0
    device_aicpu: int = 0
    topic_ctrl_cpu_slot: int = 0
    reserved: list = field(default_factory=list)


@dataclass
class CgoMediaResource:
    """Media-processing resources of a virtual device."""

    jpegd: float = 0.0
    jpege: float = 0.0
    vpc: float = 0.0
    vdec: float = 0.0
    pngd: float = 0.0
    venc: float = 0.0
    reserved: list = field(default_factory=list)


@dataclass
class CgoVDevQueryInfo:
    """Details of one virtual device."""

    name: str = ""
    status: int = 0
    is_container_used: int = 0
    vfid: int = 0
    vfg_id: int = 0
    container_id: int = 0
    base: CgoBaseResource = field(default_factory=CgoBaseResource)
    computing: CgoComputingResource = field(default_factory=CgoComputingResource)
    media: CgoMediaResource = field(default_factory=CgoMediaResource)


@dataclass
class CgoVDevQueryStru:
    """A virtual device id with its details."""

    vdev_id: int = 0
    query_info: CgoVDevQueryInfo = field(default_factory=CgoVDevQueryInfo)


@dataclass
class CgoSocFreeResource:
    """Free resources of a chip."""

    vfg_num: int = 0
    vfg_bitmap: int = 0
    base: CgoBaseResource = field(default_factory=CgoBaseResource)
    computing: CgoComputingResource = field(default_factory=CgoComputingResource)
    media: CgoMediaResource = field(default_factory=CgoMediaResource)


@dataclass
class CgoSocTotalResource:
    """Total resources of a chip and the virtual devices carved from it."""

    vdev_num: int = 0
    vdev_id: list = field(default_factory=list)
    vfg_num: int = 0
    vfg_bitmap: int = 0
    base: CgoBaseResource = field(default_factory=CgoBaseResource)
    computing: CgoComputingResource = field(default_factory=CgoComputingResource)
    media: CgoMediaResource = field(default_factory=CgoMediaResource)


@dataclass
class CgoSuperPodInfo:
    """Super pod membership of a device."""

    sd_id: int = 0
    scale_type: int = 0
    super_pod_id: int = 0
    server_id: int = 0
    reserve: list = field(default_factory=list)


@dataclass
class VDevActivityInfo:
    """Activity of a virtual NPU."""

    vdev_id: int = 0
    vdev_aicore_rate: int = 0
    vdev_total_mem: int = 0
    vdev_used_mem: int = 0
    vdev_aicore: float = 0.0
    is_virtual_dev: bool = False


@dataclass
class VirtualDevInfo:
    """Total, free and per-virtual-device resource information."""

    total_resource: CgoSocTotalResource = field(default_factory=CgoSocTotalResource)
    free_resource: CgoSocFreeResource = field(default_factory=CgoSocFreeResource)
    vdev_info: list = field(default_factory=list)
    vdev_activity_info: list = field(default_factory=list)


@dataclass
class DevFaultInfo:
    """A fault event reported by a device."""

    event_id: int = 0
    logic_id: int = 0
    severity: int = 0
    assertion: int = 0
    alarm_raised_time: int = 0


@dataclass
class DevProcInfo:
    """A process on the device side; memory usage in MB."""

    pid: int = 0
    mem_usage: float = 0.0


@dataclass
class DevProcessInfo:
    """Processes running on a device."""

    dev_proc_array: list = field(default_factory=list)
    proc_num: int = 0


@dataclass
class BoardInfo:
    """Board identifiers of a device."""

    board_id: int = 0
    pcb_id: int = 0
    bom_id: int = 0
    slot_id: int = 0


@dataclass
class PcieStatValue:
    """Minimum, maximum and average PCIe bandwidth."""

    pcie_min_bw: int = 0
    pcie_max_bw: int = 0
    pcie_avg_bw: int = 0


@dataclass
class PCIEBwStat:
    """PCIe bandwidth per direction and transaction type."""

    pcie_rx_p_bw: PcieStatValue = field(default_factory=PcieStatValue)
    pcie_rx_np_bw: PcieStatValue = field(default_factory=PcieStatValue)
    pcie_rx_cpl_bw: PcieStatValue = field(default_factory=PcieStatValue)
    pcie_tx_p_bw: PcieStatValue = field(default_factory=PcieStatValue)
    pcie_tx_np_bw: PcieStatValue = field(default_factory=PcieStatValue)
    pcie_tx_cpl_bw: PcieStatValue = field(default_factory=PcieStatValue)


@dataclass
class DeviceNetworkHealth:
    """Network health code and the query's return code."""

    health_code: int = 0
    ret_code: int = 0


@dataclass
class BandwidthInfo:
    """Real-time transmit and receive bandwidth of a network port."""

    tx_value: float = 0.0
    rx_value: float = 0.0

    def to_dict(self) -> dict:
        """Return the record keyed by its JSON field names."""
        return {"tx_value": self.tx_value, "rx_value": self.rx_value}


@dataclass
class HccsStatisticInfo:
    """HCCS packet counters per link."""

    tx_cnt: list = field(default_factory=list)
    rx_cnt: list = field(default_factory=list)
    crc_err_cnt: list = field(default_factory=list)
    retry_cnt: list = field(default_factory=list)
    reserved_field_cnt: list = field(default_factory=list)


@dataclass
class HccsBandwidthInfo:
    """HCCS bandwidth totals and per-link values."""

    profiling_time: int = 0
    total_txbw: float = 0.0
    total_rxbw: float = 0.0
    tx_bandwidth: list = field(default_factory=list)
    rx_bandwidth: list = field(default_factory=list)


@dataclass
class SioCrcErrStatisticInfo:
    """SIO CRC error counters."""

    tx_err_cnt: int = 0
    rx_err_cnt: int = 0
    reserved: list = field(default_factory=list)


@dataclass
class StatInfo:
    """Packet statistics of the MAC and RoCE network card."""

    mac_rx_pause_num: float = 0.0
    mac_tx_pause_num: float = 0.0
    mac_rx_pfc_pkt_num: float = 0.0
    mac_tx_pfc_pkt_num: float = 0.0
    mac_rx_bad_pkt_num: float = 0.0
    mac_tx_bad_pkt_num: float = 0.0
    roce_rx_all_pkt_num: float = 0.0
    roce_tx_all_pkt_num: float = 0.0
    roce_rx_err_pkt_num: float = 0.0
    roce_tx_err_pkt_num: float = 0.0
    roce_rx_cnp_pkt_num: float = 0.0
    roce_tx_cnp_pkt_num: float = 0.0
    roce_new_pkt_rty_num: float = 0.0
    mac_tx_bad_oct_num: float = 0.0
    mac_rx_bad_oct_num: float = 0.0
    roce_unexpected_ack_num: float = 0.0
    roce_out_of_order_num: float = 0.0
    roce_verification_err_num: float = 0.0
    roce_qp_status_err_num: float = 0.0
    roce_ecn_db_num: float = 0.0
    mac_rx_fcs_err_pkt_num: float = 0.0


@dataclass
class LinkStatInfo:
    """Historical link statistics: number of link-ups."""

    link_up_num: float = 0.0


@dataclass
class LinkStatusInfo:
    """Current link state."""

    link_state: str = ""


@dataclass
class LinkSpeedInfo:
    """Transfer rate of a network port."""

    speed: float = 0.0


@dataclass
class OpticalInfo:
    """Optical module presence, power, voltage and temperature."""

    optical_state: float = 0.0
    optical_tx_power0: float = 0.0
    optical_tx_power1: float = 0.0
    optical_tx_power2: float = 0.0
    optical_tx_power3: float = 0.0
    optical_rx_power0: float = 0.0
    optical_rx_power1: float = 0.0
    optical_rx_power2: float = 0.0
    optical_rx_power3: float = 0.0
    optical_vcc: float = 0.0
    optical_temp: float = 0.0


@dataclass
class NpuNetInfo:
    """Network information of an NPU; parts that were not queried are ``None``."""

    optical_info: Optional[OpticalInfo] = None
    link_speed_info: Optional[LinkSpeedInfo] = None
    link_stat_info: Optional[LinkStatInfo] = None
    stat_info: Optional[StatInfo] = None
    bandwidth_info: Optional[BandwidthInfo] = None
    link_status_info: Optional[LinkStatusInfo] = None


@dataclass
class HccspingMeshOperate:
    """Parameters of an HCCS ping-mesh task."""

    dst_addr: str = ""
    pkt_size: int = 0
    pkt_send_num: int = 0
    pkt_interval: int = 0
    timeout: int = 0
    task_interval: int = 0
    task_id: int = 0


@dataclass
class HccspingMeshInfo:
    """Per-destination results of an HCCS ping-mesh task."""

    dst_addr: list = field(default_factory=list)
    suc_pkt_num: list = field(default_factory=list)
    fail_pkt_num: list = field(default_factory=list)
    max_time: list = field(default_factory=list)
    min_time: list = field(default_factory=list)
    avg_time: list = field(default_factory=list)
    tp95_time: list = field(default_factory=list)
    reply_stat_num: list = field(default_factory=list)
    ping_total_num: list = field(default_factory=list)
    dest_num: int = 0