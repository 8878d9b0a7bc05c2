"""Studyfi - account and study-group membership backend.

Registers users, keeps their profiles, resets forgotten passwords through
emailed single-use tokens and tracks which users belong to which study groups.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
