"""In-process method channel between the host app and platform plugins.

A plugin registers a handler on a named channel of a `BinaryMessenger`. The
host sends `MethodCall`s by name and gets back exactly one `MethodResponse`:
a success value, an error, or "not implemented".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from pydantic import BaseModel

from .exceptions import ErrorCode, ErrorResponse, MissingPluginError

logger = logging.getLogger(__name__)

ResponseStatus = Literal["success", "error", "not_implemented"]


@dataclass(frozen=True)
class MethodCall:
  method: str
  arguments: Any = None


class MethodResponse(BaseModel):
  """Outcome of a single method call"""

  status: ResponseStatus
  value: Any = None
  error: Optional[ErrorResponse] = None

  @property
  def is_success(self) -> bool:
    return self.status == "success"

  @property
  def is_not_implemented(self) -> bool:
    return self.status == "not_implemented"


class MethodResult:
  """Reply handle passed to a method handler. Accepts one submission."""

  def __init__(self, call: MethodCall):
    self._call = call
    self._response: MethodResponse | None = None

  @property
  def submitted(self) -> bool:
    return self._response is not None

  @property
  def response(self) -> MethodResponse | None:
    return self._response

  def _submit(self, response: MethodResponse) -> None:
    if self._response is not None:
      raise RuntimeError(f"Result for '{self._call.method}' was already submitted")
    self._response = response

  def success(self, value: Any = None) -> None:
    self._submit(MethodResponse(status="success", value=value))

  def error(self, code: ErrorCode, message: str, details: Optional[str] = None) -> None:
    self.error_response(ErrorResponse(code=code, message=message, details=details))

  def error_response(self, error: ErrorResponse) -> None:
    self._submit(MethodResponse(status="error", error=error))

  def not_implemented(self) -> None:
    self._submit(MethodResponse(status="not_implemented"))


MethodCallHandler = Callable[[MethodCall, MethodResult], None]


class BinaryMessenger:
  """Routes method calls to the handler registered for a channel name."""

  def __init__(self):
    self._handlers: dict[str, MethodCallHandler] = {}

  def set_message_handler(self, channel: str, handler: MethodCallHandler | None) -> None:
    if handler is None:
      self._handlers.pop(channel, None)
      logger.debug("Handler removed from channel %s", channel)
    else:
      self._handlers[channel] = handler
      logger.debug("Handler registered on channel %s", channel)

  def has_handler(self, channel: str) -> bool:
    return channel in self._handlers

  def send(self, channel: str, call: MethodCall) -> MethodResponse:
    handler = self._handlers.get(channel)
    if handler is None:
      raise MissingPluginError(channel, call.method)

    result = MethodResult(call)
    handler(call, result)
    if result.response is None:
      raise RuntimeError(
        f"Handler on channel {channel} returned without a result for '{call.method}'"
      )
    return result.response


class MethodChannel:
  """A named channel on a messenger."""

  def __init__(self, messenger: BinaryMessenger, name: str):
    self.messenger = messenger
    self.name = name

  def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
    self.messenger.set_message_handler(self.name, handler)

  def invoke_method(self, method: str, arguments: Any = None) -> MethodResponse:
    return self.messenger.send(self.name, MethodCall(method, arguments))
