from car_service.services.base_service import BasicInspection
from car_service.services.composition import compose, describe_chain
from car_service.services.modifiers import OilChange, ServiceModifier, TireRotation

__all__ = [
    "BasicInspection",
    "OilChange",
    "ServiceModifier",
    "TireRotation",
    "compose",
    "describe_chain",
]
