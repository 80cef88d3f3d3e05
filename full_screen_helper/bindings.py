"""What the host hands to a plugin when it attaches."""

from __future__ import annotations

from dataclasses import dataclass

from os_interfaces.base import ApplicationContext, HostActivity

from .channel import BinaryMessenger


@dataclass(frozen=True)
class EngineBinding:
  messenger: BinaryMessenger
  application_context: ApplicationContext


@dataclass(frozen=True)
class ActivityBinding:
  activity: HostActivity
