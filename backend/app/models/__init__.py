from app.models.availability import Availability
from app.models.booking import Booking
from app.models.expert_profile import ExpertProfile
from app.models.service import Service
from app.models.user import User

__all__ = [
    "Availability",
    "Booking",
    "ExpertProfile",
    "Service",
    "User",
]
