"""Constants for Webinar model field names"""


class WebinarFields:
    """Field name constants for Webinar model"""
    ID = "id"
    ORGANIZER_ID = "organizer_id"
    TITLE = "title"
    START_DATE = "start_date"
    END_DATE = "end_date"
    SEATS = "seats"

    # MongoDB specific
    MONGO_ID = "_id"  # webinar id is stored as the document key
