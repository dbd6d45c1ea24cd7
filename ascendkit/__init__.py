"""Path safety checks, file helpers, device data types and validators for Ascend NPU monitoring."""

__version__ = "0.1.0"