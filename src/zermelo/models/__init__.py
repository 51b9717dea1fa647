from .appointment import Appointment
from .base import ZermeloDataClass

__all__ = [
    "Appointment",
    "ZermeloDataClass",
]
