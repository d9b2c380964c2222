"""Exception types raised by the Clue backend."""

from __future__ import annotations


class ClueError(Exception):
    """Base class for every error raised by the package."""


class InvariantViolation(ClueError):
    """A state the rules make impossible was reached. Indicates a bug."""


class NotebookConflict(InvariantViolation):
    """A settled notebook entry was contradicted without an override."""


class RuleViolation(ClueError):
    """A player returned a decision the rules of Clue do not allow."""


class SettingsError(ClueError):
    """The table settings file could not be loaded or validated."""
