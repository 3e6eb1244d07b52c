"""Alert payloads shown to end users."""

from typing import Literal

from pydantic import BaseModel

from lenslocked.errors import GENERIC_MESSAGE, ModelError

AlertLevel = Literal["danger", "warning", "success", "info"]


class Alert(BaseModel):
    """A message safe to render to the user."""

    level: AlertLevel = "danger"
    message: str

    @classmethod
    def from_error(cls, err: Exception) -> "Alert":
        """Show public errors verbatim and anything else as a generic message."""
        if isinstance(err, ModelError):
            return cls(level="danger", message=err.public())
        return cls(level="danger", message=GENERIC_MESSAGE)

    @classmethod
    def error(cls, message: str) -> "Alert":
        return cls(level="danger", message=message)
