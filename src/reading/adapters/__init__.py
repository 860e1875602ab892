from reading.adapters.device_adapter import DeviceAdapter

__all__ = ["DeviceAdapter"]
