"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- Use Cases: Business operations (change seats)
- Services: Application services that coordinate use cases
- DTOs: Request and response models for the API
"""
