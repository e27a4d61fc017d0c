from .user import User
from .webinar import Webinar

__all__ = ["User", "Webinar"]
