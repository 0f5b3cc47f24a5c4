from app.models.availability import Availability, AvailabilityBase, AvailabilityPublic
from app.models.service import Service, ServicePublic
from app.models.appointment import CANCELLED_STATUS, Appointment

__all__ = [
    "Availability",
    "AvailabilityBase",
    "AvailabilityPublic",
    "Service",
    "ServicePublic",
    "Appointment",
    "CANCELLED_STATUS",
]
