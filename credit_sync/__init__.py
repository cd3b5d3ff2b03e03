"""
Credit Sync - Credit Decisioning & Order Synchronization Service

A FastAPI-based microservice that decides client credit limits and
synchronizes pending orders from an external source with at-most-once
persistence.
"""

__version__ = "0.1.0"
