"""
httpretry - Request Building.
"""

from .builder import RequestBuilder

__all__ = ["RequestBuilder"]
