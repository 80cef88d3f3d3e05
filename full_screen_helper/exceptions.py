"""
Errors reported back through the full_screen_helper method channel
"""

from typing import Literal, Optional
from pydantic import BaseModel, Field


# Error codes the plugin can put on the channel
ErrorCode = Literal[
  "UNAVAILABLE",  # A platform service or screen could not be reached
]

UNAVAILABLE: ErrorCode = "UNAVAILABLE"


class ErrorResponse(BaseModel):
  """Error payload carried by a MethodResponse"""

  code: ErrorCode = Field(..., description="Machine-readable error code")
  message: str = Field(..., description="Human-readable error message")
  details: Optional[str] = Field(
    None, description="Underlying platform failure, if there was one"
  )


class PluginError(Exception):
  """
  Error raised inside a method handler.
  The dispatcher turns it into an error result on the channel.
  """

  def __init__(
    self,
    code: ErrorCode,
    message: str,
    details: Optional[str] = None,
  ):
    """
    Initialize a plugin error

    Args:
        code: Error code (e.g., "UNAVAILABLE")
        message: Human-readable error message
        details: Optional description of the underlying failure
    """
    self.code: ErrorCode = code
    self.message: str = message
    self.details: Optional[str] = details
    super().__init__(message)

  def to_response(self) -> ErrorResponse:
    """Convert to ErrorResponse model for the channel"""
    return ErrorResponse(
      code=self.code,
      message=self.message,
      details=self.details,
    )

  @classmethod
  def from_response(cls, response: ErrorResponse) -> "PluginError":
    return cls(code=response.code, message=response.message, details=response.details)

  @classmethod
  def from_exception(
    cls,
    e: Exception,
    code: ErrorCode,
    message: str,
  ) -> "PluginError":
    """
    Create a PluginError from a platform exception

    Args:
        e: The original exception
        code: Error code for this error
        message: Fixed message shown to the caller

    Returns:
        PluginError with the original exception's description as details
    """
    return cls(code=code, message=message, details=str(e) or e.__class__.__name__)


class MissingPluginError(Exception):
  """No handler on the channel, or the handler does not know the method."""

  def __init__(self, channel: str, method: Optional[str] = None):
    self.channel = channel
    self.method = method
    if method is None:
      msg = f"No implementation found on channel {channel}"
    else:
      msg = f"No implementation found for method {method} on channel {channel}"
    super().__init__(msg)
