"""
Infrastructure Layer
====================

Concrete adapters for the domain repository interfaces.
"""
