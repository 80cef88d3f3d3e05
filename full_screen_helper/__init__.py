"""Full-screen-intent permission and lock-screen wake-up plugin"""

from .bindings import ActivityBinding, EngineBinding
from .channel import BinaryMessenger, MethodCall, MethodChannel, MethodResponse
from .client import FullScreenHelper
from .exceptions import MissingPluginError, PluginError
from .plugin import FullScreenHelperPlugin

__all__ = [
  "ActivityBinding",
  "BinaryMessenger",
  "EngineBinding",
  "FullScreenHelper",
  "FullScreenHelperPlugin",
  "MethodCall",
  "MethodChannel",
  "MethodResponse",
  "MissingPluginError",
  "PluginError",
]
