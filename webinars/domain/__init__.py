"""
Domain Layer
============

Core business logic and domain models.
This layer has no dependencies on external frameworks or infrastructure.

Contains:
- Entities: Webinar and User
- Exceptions: Business rule violations raised by use cases
- Repository Interfaces: Abstract contracts for data access
"""
