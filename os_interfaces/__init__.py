"""OS interface module - platform-specific implementations

Entry points import the implementation they need directly:
- os_interfaces.android on device (PyJNIus)
- os_interfaces.mock for tests and desktop development
"""

from .base import (
  ApplicationContext,
  HostActivity,
  HostWindow,
  NotificationAuthority,
  OSImplementations,
  SettingsRequest,
  WindowFlag,
)

__all__ = [
  "ApplicationContext",
  "HostActivity",
  "HostWindow",
  "NotificationAuthority",
  "OSImplementations",
  "SettingsRequest",
  "WindowFlag",
]
