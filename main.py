"""python-for-android entrypoint.

Attaches the plugin to the running activity, which wakes the screen, then
checks the full-screen intent permission. FSH_PLATFORM=mock runs the same
flow against in-memory OS interfaces.
"""

import logging

from entrypoints.full_screen_helper_core import attach_plugin, ensure_full_screen_intent
from full_screen_helper.config import PluginConfig

logging.basicConfig(
  level=PluginConfig.LOG_LEVEL,
  format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def run() -> None:
  if PluginConfig.PLATFORM == "mock":
    from os_interfaces.mock import mock_os_implementations

    attached = attach_plugin(mock_os_implementations(PluginConfig.mock_sdk_int()))
  else:
    from entrypoints.full_screen_helper_android import main as attach_android

    attached = attach_android()

  ensure_full_screen_intent(attached)


if __name__ == "__main__":
  run()
