"""
In-memory OS interfaces for tests and desktop development
"""

from typing import Any, Dict, List, Optional

from full_screen_helper.capabilities import LOCK_SCREEN_TOGGLES_SDK

from .base import (
  NOTIFICATION_SERVICE,
  ApplicationContext,
  HostActivity,
  HostWindow,
  NotificationAuthority,
  OSImplementations,
  SettingsRequest,
)


class MockNotificationAuthority(NotificationAuthority):
  """Notification manager with a settable full-screen-intent answer"""

  def __init__(self, allowed: bool = True):
    self.allowed = allowed
    self.queries = 0

  def can_use_full_screen_intent(self) -> bool:
    self.queries += 1
    return self.allowed


class MockApplicationContext(ApplicationContext):
  """Application context backed by a dict of services"""

  def __init__(
    self,
    package_name: str = "com.example.app",
    services: Optional[Dict[str, Any]] = None,
    settings_error: Optional[Exception] = None,
  ):
    self._package_name = package_name
    self.services: Dict[str, Any] = dict(services or {})
    self.settings_error = settings_error
    self.started: List[SettingsRequest] = []

  @property
  def package_name(self) -> str:
    return self._package_name

  def get_system_service(self, name: str) -> Any:
    return self.services.get(name)

  def start_settings(self, request: SettingsRequest) -> None:
    if self.settings_error is not None:
      raise self.settings_error
    self.started.append(request)


class MockWindow(HostWindow):
  """Window that ORs flags into an int"""

  def __init__(self):
    self.flags = 0

  def add_flags(self, flags: int) -> None:
    self.flags |= int(flags)


class MockActivity(HostActivity):
  """Activity with lock-screen toggles.

  With `toggles_supported=False` it behaves like a pre-8.1 activity and the
  toggles raise, as the Java methods would not exist.
  """

  def __init__(self, toggles_supported: bool = True):
    self._window = MockWindow()
    self.toggles_supported = toggles_supported
    self.show_when_locked = False
    self.turn_screen_on = False
    self.toggle_calls = 0

  @property
  def window(self) -> MockWindow:
    return self._window

  def _check_toggles(self, name: str) -> None:
    if not self.toggles_supported:
      raise AttributeError(f"Activity has no method {name}")
    self.toggle_calls += 1

  def set_show_when_locked(self, show: bool) -> None:
    self._check_toggles("setShowWhenLocked")
    self.show_when_locked = show

  def set_turn_screen_on(self, turn_on: bool) -> None:
    self._check_toggles("setTurnScreenOn")
    self.turn_screen_on = turn_on


def mock_os_implementations(sdk_int: int, allowed: bool = True) -> OSImplementations:
  """OS hooks for running the plugin off-device"""
  context = MockApplicationContext(
    services={NOTIFICATION_SERVICE: MockNotificationAuthority(allowed=allowed)}
  )
  activity = MockActivity(toggles_supported=sdk_int >= LOCK_SCREEN_TOGGLES_SDK)
  return OSImplementations(
    sdk_int=lambda: sdk_int,
    application_context=lambda: context,
    current_activity=lambda: activity,
  )
