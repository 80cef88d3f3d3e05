"""Android implementations of the plugin's OS interfaces (PyJNIus)."""

from __future__ import annotations

import logging
from typing import Any, Optional

from jnius import autoclass, cast  # type: ignore

from .base import (
  NOTIFICATION_SERVICE,
  ApplicationContext,
  HostActivity,
  HostWindow,
  NotificationAuthority,
  SettingsRequest,
)

logger = logging.getLogger(__name__)


# --- PyJNIus handles ---
PythonActivity = autoclass("org.kivy.android.PythonActivity")
Intent = autoclass("android.content.Intent")
Uri = autoclass("android.net.Uri")
BuildVersion = autoclass("android.os.Build$VERSION")


def sdk_int() -> int:
  return BuildVersion.SDK_INT


def _context():
  return PythonActivity.mActivity.getApplicationContext()


class AndroidNotificationAuthority(NotificationAuthority):
  """android.app.NotificationManager"""

  def __init__(self, manager):
    self.manager = manager

  def can_use_full_screen_intent(self) -> bool:
    return bool(self.manager.canUseFullScreenIntent())


class AndroidApplicationContext(ApplicationContext):
  """android.content.Context of the application"""

  def __init__(self, ctx=None):
    self.ctx = ctx if ctx is not None else _context()

  @property
  def package_name(self) -> str:
    return self.ctx.getPackageName()

  def get_system_service(self, name: str) -> Any:
    service = self.ctx.getSystemService(name)
    if service is None:
      logger.warning("System service %s not available", name)
      return None
    if name == NOTIFICATION_SERVICE:
      return AndroidNotificationAuthority(
        cast("android.app.NotificationManager", service)
      )
    return service

  def start_settings(self, request: SettingsRequest) -> None:
    intent = Intent(request.action)
    if request.data_uri:
      intent.setData(Uri.parse(request.data_uri))
    if request.new_task:
      intent.addFlags(Intent.FLAG_ACTIVITY_NEW_TASK)
    self.ctx.startActivity(intent)
    logger.debug("Started settings activity %s", request.action)


class AndroidWindow(HostWindow):
  """android.view.Window"""

  def __init__(self, window):
    self.java_window = window

  def add_flags(self, flags: int) -> None:
    self.java_window.addFlags(int(flags))


class AndroidActivity(HostActivity):
  """android.app.Activity hosting the Python app"""

  def __init__(self, activity):
    self.java_activity = activity

  @property
  def window(self) -> HostWindow:
    return AndroidWindow(self.java_activity.getWindow())

  def set_show_when_locked(self, show: bool) -> None:
    self.java_activity.setShowWhenLocked(show)

  def set_turn_screen_on(self, turn_on: bool) -> None:
    self.java_activity.setTurnScreenOn(turn_on)


def application_context() -> AndroidApplicationContext:
  return AndroidApplicationContext(_context())


def current_activity() -> Optional[AndroidActivity]:
  activity = PythonActivity.mActivity
  if activity is None:
    return None
  return AndroidActivity(activity)
