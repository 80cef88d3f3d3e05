"""Android version gates used by the plugin.

Both decisions are taken once, from the SDK level reported when the plugin is
created:

- Android 14 (API 34) restricts full-screen intents to apps the user allowed.
- Android 8.1 (API 27) added Activity.setShowWhenLocked/setTurnScreenOn,
  replacing the window flags of the same name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Build.VERSION_CODES.UPSIDE_DOWN_CAKE
FULL_SCREEN_INTENT_RESTRICTED_SDK = 34
# Build.VERSION_CODES.O_MR1
LOCK_SCREEN_TOGGLES_SDK = 27


class FullScreenIntentPolicy(Enum):
  # Granted by the manifest declaration alone
  IMPLICIT = "implicit"
  # Must be checked with NotificationManager and granted in settings
  RESTRICTED = "restricted"


class LockScreenStrategy(Enum):
  WINDOW_FLAGS = "window_flags"
  ACTIVITY_TOGGLES = "activity_toggles"


@dataclass(frozen=True)
class PlatformCapabilities:
  sdk_int: int
  full_screen_intent: FullScreenIntentPolicy
  lock_screen: LockScreenStrategy

  @classmethod
  def from_sdk(cls, sdk_int: int) -> PlatformCapabilities:
    if sdk_int >= FULL_SCREEN_INTENT_RESTRICTED_SDK:
      policy = FullScreenIntentPolicy.RESTRICTED
    else:
      policy = FullScreenIntentPolicy.IMPLICIT

    if sdk_int >= LOCK_SCREEN_TOGGLES_SDK:
      strategy = LockScreenStrategy.ACTIVITY_TOGGLES
    else:
      strategy = LockScreenStrategy.WINDOW_FLAGS

    return cls(sdk_int=sdk_int, full_screen_intent=policy, lock_screen=strategy)
