"""
Immutable data container models produced by the railway-oriented parsers.

The models are frozen Pydantic models: they are constructed once, at the end of a
successful parse, and validated on construction so that an instance can never hold
inconsistent data.
"""

from .pgm_image import PGMImage


__all__ = ["PGMImage"]
