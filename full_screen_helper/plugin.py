"""Full-screen-intent permission helper and lock-screen wake-up.

The plugin answers two methods on the `full_screen_helper` channel:

- `canUseFullScreenIntent`: whether full-screen-intent notifications are
  allowed (always true before Android 14).
- `requestFullScreenIntent`: opens the system page where the user grants it.

It also wakes the screen and shows the host activity over the lock screen as
soon as the activity is attached, so an app launched from a full-screen
notification is visible without unlocking.
"""

from __future__ import annotations

import logging
from typing import Optional

from os_interfaces.base import (
  ACTION_MANAGE_APP_USE_FULL_SCREEN_INTENT,
  NOTIFICATION_SERVICE,
  ApplicationContext,
  HostActivity,
  NotificationAuthority,
  SettingsRequest,
  WindowFlag,
)

from .bindings import ActivityBinding, EngineBinding
from .capabilities import FullScreenIntentPolicy, LockScreenStrategy, PlatformCapabilities
from .channel import MethodCall, MethodChannel, MethodResult
from .config import PluginConfig
from .exceptions import UNAVAILABLE, PluginError

logger = logging.getLogger(__name__)

METHOD_CAN_USE_FULL_SCREEN_INTENT = "canUseFullScreenIntent"
METHOD_REQUEST_FULL_SCREEN_INTENT = "requestFullScreenIntent"


class FullScreenHelperPlugin:
  """Bridge between the method channel and the Android APIs."""

  def __init__(self, sdk_int: int, channel_name: str = PluginConfig.CHANNEL_NAME):
    self.capabilities = PlatformCapabilities.from_sdk(sdk_int)
    self.channel_name = channel_name
    self.channel: Optional[MethodChannel] = None
    self.context: Optional[ApplicationContext] = None
    self.activity: Optional[HostActivity] = None

  # ---- engine lifecycle ----
  def on_attached_to_engine(self, binding: EngineBinding) -> None:
    self.channel = MethodChannel(binding.messenger, self.channel_name)
    self.channel.set_method_call_handler(self.on_method_call)
    self.context = binding.application_context
    logger.info(
      "Attached to engine on channel %s (SDK %s)",
      self.channel_name,
      self.capabilities.sdk_int,
    )

  def on_detached_from_engine(self, binding: EngineBinding) -> None:
    if self.channel is not None:
      self.channel.set_method_call_handler(None)
    self.channel = None
    self.context = None
    logger.info("Detached from engine")

  # ---- activity lifecycle ----
  def on_attached_to_activity(self, binding: ActivityBinding) -> None:
    self.activity = binding.activity
    logger.info("Attached to activity")
    self.wake_up_screen()

  def on_detached_from_activity_for_config_changes(self) -> None:
    self.activity = None
    logger.debug("Detached from activity for config changes")

  def on_reattached_to_activity_for_config_changes(
    self, binding: ActivityBinding
  ) -> None:
    self.activity = binding.activity
    logger.debug("Reattached to activity after config changes")
    self.wake_up_screen()

  def on_detached_from_activity(self) -> None:
    self.activity = None
    logger.info("Detached from activity")

  # ---- method calls ----
  def on_method_call(self, call: MethodCall, result: MethodResult) -> None:
    if call.method == METHOD_CAN_USE_FULL_SCREEN_INTENT:
      handler = self.can_use_full_screen_intent
    elif call.method == METHOD_REQUEST_FULL_SCREEN_INTENT:
      handler = self.request_full_screen_intent
    else:
      logger.debug("Method %s not implemented", call.method)
      result.not_implemented()
      return

    try:
      value = handler()
    except PluginError as e:
      logger.warning("%s failed: %s (%s)", call.method, e.message, e.details)
      result.error_response(e.to_response())
      return
    result.success(value)

  def can_use_full_screen_intent(self) -> bool:
    """Check the full-screen-intent permission.

    Before Android 14 the manifest declaration is enough, so this is always
    true there.
    """
    if self.capabilities.full_screen_intent is FullScreenIntentPolicy.IMPLICIT:
      return True

    manager: NotificationAuthority | None = None
    if self.context is not None:
      manager = self.context.get_system_service(NOTIFICATION_SERVICE)
    if manager is None:
      raise PluginError(UNAVAILABLE, "NotificationManager not found")
    return manager.can_use_full_screen_intent()

  def request_full_screen_intent(self) -> bool:
    """Open the full-screen-intent settings page for this app.

    True means the page was opened, not that the user granted anything.
    """
    if self.capabilities.full_screen_intent is FullScreenIntentPolicy.IMPLICIT:
      return True

    try:
      if self.context is None:
        raise RuntimeError("Application context is not attached")
      request = SettingsRequest.for_package(
        ACTION_MANAGE_APP_USE_FULL_SCREEN_INTENT, self.context.package_name
      )
      self.context.start_settings(request)
    except Exception as e:
      raise PluginError.from_exception(e, UNAVAILABLE, "Could not open settings") from e
    logger.info("Opened full-screen intent settings")
    return True

  # ---- wake-up ----
  def wake_up_screen(self) -> None:
    """Show the activity over the lock screen and turn the display on."""
    activity = self.activity
    if activity is None:
      return

    window = activity.window
    if self.capabilities.lock_screen is LockScreenStrategy.ACTIVITY_TOGGLES:
      activity.set_show_when_locked(True)
      activity.set_turn_screen_on(True)
    else:
      window.add_flags(WindowFlag.SHOW_WHEN_LOCKED)
      window.add_flags(WindowFlag.TURN_SCREEN_ON)

    window.add_flags(WindowFlag.KEEP_SCREEN_ON)
    window.add_flags(WindowFlag.ALLOW_LOCK_WHILE_SCREEN_ON)
    logger.debug("Screen wake-up applied (%s)", self.capabilities.lock_screen.value)
