"""Credential storage helpers."""

from studyfi.infrastructure.auth.password_hasher import hash_password

__all__ = ["hash_password"]
