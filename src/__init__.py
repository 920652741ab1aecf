"""
Credit Application System - Customer & Credit Request Service

A FastAPI-based microservice that registers customers, validates
credit requests, and discloses credits only to their owners.
"""

__version__ = "0.1.0"
