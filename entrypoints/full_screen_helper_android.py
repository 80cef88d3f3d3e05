"""Android entrypoint.

Injects the PyJNIus OS interfaces into the shared plugin bootstrap.
"""

from __future__ import annotations

from entrypoints.full_screen_helper_core import AttachedPlugin, attach_plugin
from os_interfaces import android
from os_interfaces.base import OSImplementations


def main() -> AttachedPlugin:
  os_impl = OSImplementations(
    sdk_int=android.sdk_int,
    application_context=android.application_context,
    current_activity=android.current_activity,
  )
  return attach_plugin(os_impl)


if __name__ == "__main__":
  main()
