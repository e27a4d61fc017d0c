"""Business limits for webinars"""
from typing import Final

# Upper bound for the seat capacity of any webinar
MAX_SEATS: Final[int] = 1000
