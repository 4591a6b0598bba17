from vitals_api.models.patient import Patient
from vitals_api.models.user import User

__all__ = ["Patient", "User"]
