# -*- coding: utf-8 -*-
"""
Biochar Tracker Service Layer
"""

from .exceptions import ApiException, ValidationException, NetworkException

__all__ = [
    "ApiException",
    "ValidationException",
    "NetworkException",
]
