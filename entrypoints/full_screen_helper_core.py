"""Platform-agnostic plugin bootstrap.

The platform-specific entrypoints (Android/mock) import this module and
provide the OS-interface implementations.

Contract:
- Inputs: an os-interface bundle `os_impl`.
- Behavior: attaches the plugin to a messenger and the current activity
  (waking the screen), and returns a host-side client for the channel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from full_screen_helper import (
  ActivityBinding,
  BinaryMessenger,
  EngineBinding,
  FullScreenHelper,
  FullScreenHelperPlugin,
  MissingPluginError,
  PluginError,
)
from full_screen_helper.config import PluginConfig
from os_interfaces.base import OSImplementations

logger = logging.getLogger(__name__)


@dataclass
class AttachedPlugin:
  plugin: FullScreenHelperPlugin
  engine_binding: EngineBinding
  client: FullScreenHelper


def attach_plugin(
  os_impl: OSImplementations, messenger: BinaryMessenger | None = None
) -> AttachedPlugin:
  messenger = messenger or BinaryMessenger()
  plugin = FullScreenHelperPlugin(
    sdk_int=os_impl.sdk_int(), channel_name=PluginConfig.CHANNEL_NAME
  )
  engine_binding = EngineBinding(
    messenger=messenger, application_context=os_impl.application_context()
  )
  plugin.on_attached_to_engine(engine_binding)

  activity = os_impl.current_activity()
  if activity is not None:
    plugin.on_attached_to_activity(ActivityBinding(activity=activity))
  else:
    logger.warning("No activity available; screen wake-up skipped")

  client = FullScreenHelper(messenger, channel_name=PluginConfig.CHANNEL_NAME)
  return AttachedPlugin(plugin=plugin, engine_binding=engine_binding, client=client)


def detach_plugin(attached: AttachedPlugin) -> None:
  attached.plugin.on_detached_from_activity()
  attached.plugin.on_detached_from_engine(attached.engine_binding)


def ensure_full_screen_intent(attached: AttachedPlugin) -> bool:
  """Check the permission and open its settings page if it is missing.

  Returns whether the permission was already granted.
  """
  client = attached.client
  try:
    allowed = client.can_use_full_screen_intent()
  except (PluginError, MissingPluginError) as e:
    logger.error(f"Could not check full-screen intent permission: {e}")
    return False

  if allowed:
    logger.info("Full-screen intent permission granted")
    return True

  logger.info("Full-screen intent permission missing, opening settings")
  try:
    client.request_full_screen_intent()
  except PluginError as e:
    logger.error(f"Failed to open settings: {e.message} ({e.details})")
  return False
