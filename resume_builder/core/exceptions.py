# File: resume_builder/core/exceptions.py
"""
Error taxonomy shared by the backend store and the client gateway.
The server raises these from the store layer; the client maps HTTP
failures back onto the same classes.
"""
from typing import Iterable, Optional


class ResumeBuilderError(Exception):
    """Base class for every resume builder failure."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class ValidationError(ResumeBuilderError):
    """A required field is missing or invalid."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None, detail: Optional[str] = None):
        super().__init__(message, detail)
        self.fields = list(fields or [])


class NotFoundError(ResumeBuilderError):
    """No stored resume matches the identifier."""


class ConnectivityError(ResumeBuilderError):
    """The backend could not be reached."""


class StorageError(ResumeBuilderError):
    """Local backup could not be read or written."""
