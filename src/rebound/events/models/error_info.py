"""Serialisable description of an exception."""

import traceback as tb

from pydantic import BaseModel, ConfigDict, Field


class ErrorInfo(BaseModel):
    """Exception details safe to hand to event subscribers."""

    model_config = ConfigDict(frozen=True)

    exc_type: str = Field(description="Fully qualified exception class name")
    message: str = Field(description="str() of the exception")
    traceback: str | None = Field(default=None, description="Formatted traceback")

    @classmethod
    def from_exception(
        cls, exc: BaseException, include_traceback: bool = False
    ) -> "ErrorInfo":
        """Build ErrorInfo from an exception instance.

        Args:
            exc: The exception to describe
            include_traceback: Whether to format and attach the traceback
        """
        exc_class = type(exc)
        return cls(
            exc_type=f"{exc_class.__module__}.{exc_class.__qualname__}",
            message=str(exc),
            traceback="".join(tb.format_exception(exc)) if include_traceback else None,
        )
