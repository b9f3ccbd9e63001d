"""core/errors.py — Exception types raised by the state and logic layers.

Load failures (``NotFound``, ``Corrupt``) are absorbed by the session
into default entities.  Calculation failures (``InvalidValue``,
``SmallerLevel``) go back to the scene and are shown to the user.
``SaveError`` is reported but never rolls back in-memory state.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for every error this app raises on purpose."""


class NotFound(AppError):
    """The persisted resource does not exist."""

    def __init__(self, path):
        super().__init__(f"{path} not found")
        self.path = path


class Corrupt(AppError):
    """The resource exists but does not parse into the expected shape."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path} is corrupt: {reason}")
        self.path = path
        self.reason = reason


class InvalidValue(AppError, ValueError):
    def __init__(self, value: object = None):
        super().__init__("Please insert a number")
        self.value = value


class SmallerLevel(AppError):
    def __init__(self, level: int, desired: int):
        super().__init__("Current level is higher or equal to the desired level.")
        self.level = level
        self.desired = desired


class SaveError(AppError, OSError):
    """Writing an entity to disk failed (permissions, disk full, bad path)."""

    def __init__(self, path, reason: str):
        super().__init__(f"could not write {path}: {reason}")
        self.path = path
        self.reason = reason
