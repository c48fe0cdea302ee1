"""
API module for the REST implementation.
"""

from .rest_api import GradrRestAPI

__all__ = [
    "GradrRestAPI",
]
