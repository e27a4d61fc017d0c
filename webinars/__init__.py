"""
Webinars
========

Webinar management backend: seat capacity changes for scheduled webinars.
"""
