"""Shared pytest fixtures"""

import pytest

from full_screen_helper.channel import BinaryMessenger


@pytest.fixture
def messenger():
  return BinaryMessenger()
