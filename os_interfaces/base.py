"""Abstract base classes for the Android facilities the plugin talks to"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable, Optional

# Context.NOTIFICATION_SERVICE
NOTIFICATION_SERVICE = "notification"

# Settings.ACTION_MANAGE_APP_USE_FULL_SCREEN_INTENT
ACTION_MANAGE_APP_USE_FULL_SCREEN_INTENT = (
  "android.settings.MANAGE_APP_USE_FULL_SCREEN_INTENT"
)


class WindowFlag(IntFlag):
  """Subset of WindowManager.LayoutParams flags, same bit values"""

  ALLOW_LOCK_WHILE_SCREEN_ON = 0x00000001
  KEEP_SCREEN_ON = 0x00000080
  SHOW_WHEN_LOCKED = 0x00080000
  TURN_SCREEN_ON = 0x00200000


@dataclass(frozen=True)
class SettingsRequest:
  """A settings screen to open, e.g. the full-screen-intent page for a package"""

  action: str
  data_uri: Optional[str] = None
  new_task: bool = True

  @classmethod
  def for_package(cls, action: str, package_name: str) -> "SettingsRequest":
    return cls(action=action, data_uri=f"package:{package_name}")


class NotificationAuthority(ABC):
  """The part of NotificationManager the plugin needs"""

  @abstractmethod
  def can_use_full_screen_intent(self) -> bool:
    """Whether the app may currently post full-screen-intent notifications"""
    raise NotImplementedError


class ApplicationContext(ABC):
  """Long-lived application context"""

  @property
  @abstractmethod
  def package_name(self) -> str:
    raise NotImplementedError

  @abstractmethod
  def get_system_service(self, name: str) -> Any:
    """Look up a system service by name

    Args:
      name: Service name (e.g. NOTIFICATION_SERVICE)

    Returns:
      The service wrapper, or None if the platform has none under that name
    """
    raise NotImplementedError

  @abstractmethod
  def start_settings(self, request: SettingsRequest) -> None:
    """Open a settings screen

    Raises whatever the platform raises when no activity handles the request.
    """
    raise NotImplementedError


class HostWindow(ABC):
  """The Window of the host activity"""

  @abstractmethod
  def add_flags(self, flags: int) -> None:
    """OR flags into the window's layout params"""
    raise NotImplementedError


class HostActivity(ABC):
  """The activity hosting the app UI"""

  @property
  @abstractmethod
  def window(self) -> HostWindow:
    raise NotImplementedError

  @abstractmethod
  def set_show_when_locked(self, show: bool) -> None:
    """Activity.setShowWhenLocked (API 27+)"""
    raise NotImplementedError

  @abstractmethod
  def set_turn_screen_on(self, turn_on: bool) -> None:
    """Activity.setTurnScreenOn (API 27+)"""
    raise NotImplementedError


@dataclass
class OSImplementations:
  """Platform hooks injected by an entrypoint"""

  sdk_int: Callable[[], int]
  application_context: Callable[[], ApplicationContext]
  current_activity: Callable[[], Optional[HostActivity]]
