"""Tests for the in-process method channel"""

import pytest

from full_screen_helper.channel import (
  BinaryMessenger,
  MethodCall,
  MethodChannel,
  MethodResult,
)
from full_screen_helper.exceptions import (
  UNAVAILABLE,
  ErrorResponse,
  MissingPluginError,
  PluginError,
)


class TestMethodResult:
  """Tests for MethodResult"""

  def test_success(self):
    result = MethodResult(MethodCall("ping"))
    result.success(True)

    assert result.submitted
    assert result.response.is_success
    assert result.response.value is True

  def test_error(self):
    result = MethodResult(MethodCall("ping"))
    result.error("UNAVAILABLE", "Could not open settings", "boom")

    assert result.response.status == "error"
    assert result.response.error.details == "boom"

  def test_second_submission_rejected(self):
    """Exactly one outcome per call"""
    result = MethodResult(MethodCall("ping"))
    result.success(True)

    with pytest.raises(RuntimeError):
      result.not_implemented()
    assert result.response.is_success


class TestBinaryMessenger:
  """Tests for BinaryMessenger routing"""

  def test_routes_to_channel_handler(self):
    messenger = BinaryMessenger()
    seen = []

    def handler(call, result):
      seen.append(call)
      result.success(call.arguments)

    MethodChannel(messenger, "a").set_method_call_handler(handler)
    response = MethodChannel(messenger, "a").invoke_method("echo", {"x": 1})

    assert response.value == {"x": 1}
    assert seen == [MethodCall("echo", {"x": 1})]

  def test_missing_handler(self, messenger):

    with pytest.raises(MissingPluginError) as exc:
      messenger.send("nothing", MethodCall("ping"))
    assert exc.value.channel == "nothing"
    assert exc.value.method == "ping"

  def test_handler_removed(self, messenger):
    channel = MethodChannel(messenger, "a")
    channel.set_method_call_handler(lambda call, result: result.success(None))

    channel.set_method_call_handler(None)

    assert not messenger.has_handler("a")
    with pytest.raises(MissingPluginError):
      channel.invoke_method("ping")

  def test_handler_without_result(self):
    """A handler that never replies is a programming error"""
    messenger = BinaryMessenger()
    MethodChannel(messenger, "a").set_method_call_handler(lambda call, result: None)

    with pytest.raises(RuntimeError):
      messenger.send("a", MethodCall("ping"))


class TestPluginErrorResponse:
  """Tests for carrying a PluginError through a MethodResult"""

  def test_error_response_from_plugin_error(self):
    error = PluginError(UNAVAILABLE, "Could not open settings", "boom")
    result = MethodResult(MethodCall("requestFullScreenIntent"))

    result.error_response(error.to_response())

    assert result.response.status == "error"
    assert result.response.error == ErrorResponse(
      code="UNAVAILABLE", message="Could not open settings", details="boom"
    )

  def test_error_response_counts_as_submission(self):
    result = MethodResult(MethodCall("ping"))
    result.error_response(PluginError(UNAVAILABLE, "x").to_response())

    with pytest.raises(RuntimeError):
      result.success(True)
