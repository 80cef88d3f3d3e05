"""
Configuration for the full_screen_helper plugin
Values come from the environment (optionally a .env file)
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CHANNEL_NAME = "full_screen_helper"


class PluginConfig:
  """Plugin configuration settings"""

  # Method channel the plugin registers on
  CHANNEL_NAME = os.getenv("FSH_CHANNEL_NAME", DEFAULT_CHANNEL_NAME)

  # Options: "android", "mock"
  PLATFORM = os.getenv("FSH_PLATFORM", "android").strip().lower()

  # SDK level reported by the mock platform
  MOCK_SDK_INT = os.getenv("FSH_MOCK_SDK_INT", "34")

  # Logging
  LOG_LEVEL = os.getenv("FSH_LOG_LEVEL", "INFO").strip().upper()

  @classmethod
  def mock_sdk_int(cls) -> int:
    """Parse FSH_MOCK_SDK_INT, which is only read for the mock platform"""
    try:
      return int(cls.MOCK_SDK_INT)
    except ValueError as e:
      raise ValueError(
        f"FSH_MOCK_SDK_INT must be an integer, got: {cls.MOCK_SDK_INT!r}"
      ) from e
