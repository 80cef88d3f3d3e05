"""Host-side calls into the full_screen_helper channel"""

from __future__ import annotations

import logging

from .channel import BinaryMessenger, MethodChannel, MethodResponse
from .config import PluginConfig
from .exceptions import MissingPluginError, PluginError
from .plugin import METHOD_CAN_USE_FULL_SCREEN_INTENT, METHOD_REQUEST_FULL_SCREEN_INTENT

logger = logging.getLogger(__name__)


class FullScreenHelper:
  """Typed wrapper over the method channel for app code"""

  def __init__(
    self, messenger: BinaryMessenger, channel_name: str = PluginConfig.CHANNEL_NAME
  ):
    self.channel = MethodChannel(messenger, channel_name)

  def _unwrap(self, method: str, response: MethodResponse):
    if response.is_not_implemented:
      raise MissingPluginError(self.channel.name, method)
    if response.error is not None:
      raise PluginError.from_response(response.error)
    return response.value

  def _call_bool(self, method: str) -> bool:
    response = self.channel.invoke_method(method)
    return bool(self._unwrap(method, response))

  def can_use_full_screen_intent(self) -> bool:
    """Whether full-screen-intent notifications are currently allowed

    Raises:
      PluginError: NotificationManager could not be reached
      MissingPluginError: the plugin is not attached
    """
    allowed = self._call_bool(METHOD_CAN_USE_FULL_SCREEN_INTENT)
    logger.debug("Full-screen intent allowed: %s", allowed)
    return allowed

  def request_full_screen_intent(self) -> bool:
    """Open the system page where the user allows full-screen intents

    Raises:
      PluginError: the settings page could not be opened
      MissingPluginError: the plugin is not attached
    """
    return self._call_bool(METHOD_REQUEST_FULL_SCREEN_INTENT)
