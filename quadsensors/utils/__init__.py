"""
Utility functions for the sensor models.

This module provides common scalar helpers used across the codebase:
angle wrapping and inclusive clamping.
"""

from .angles import wrap_angle_2pi, constrain

__all__ = [
    'wrap_angle_2pi',
    'constrain',
]
