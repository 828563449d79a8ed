"""
Chat message models.
"""

from typing import Optional
from pydantic import BaseModel


class ScannedMessage(BaseModel):
    """Fields read from a chat-msg-item node. Missing parts are empty strings."""
    id: str = ""
    author: str = ""
    text: str = ""


class Message(BaseModel):
    """An attributed message ready for dispatch."""
    id: str
    author: str
    text: str
    chat_id: str


NO_UPDATE = "no_update"
FOUND = "found"
FAILED = "failed"


class PollResult:
    __slots__ = ("status", "message", "error")

    def __init__(self, status: str, message: Optional[Message] = None, error: Optional[Exception] = None):
        self.status = status
        self.message = message
        self.error = error

    @classmethod
    def no_update(cls) -> "PollResult":
        return cls(NO_UPDATE)

    @classmethod
    def found(cls, message: Message) -> "PollResult":
        return cls(FOUND, message=message)

    @classmethod
    def failed(cls, error: Exception) -> "PollResult":
        return cls(FAILED, error=error)

    def __repr__(self) -> str:
        if self.status == FOUND:
            return f"PollResult(status={self.status!r}, message={self.message!r})"
        if self.status == FAILED:
            return f"PollResult(status={self.status!r}, error={self.error!r})"
        return f"PollResult(status={self.status!r})"
