# wifi_survey/models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Dict


def new_room_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class RoomRecord:
    """
    One surveyed room.

    Measurements are kept as the text the user typed; the charts parse
    them when they need numbers.
    """

    id: str
    room: str
    signal_level_24: str = ""
    signal_level_5: str = ""
    speed_24: str = ""
    speed_5: str = ""
    interference: str = ""

    def value(self, key: str) -> str:
        return getattr(self, key)

    def with_id(self, room_id: str) -> "RoomRecord":
        return self if room_id == self.id else replace(self, id=room_id)

    def as_form(self) -> Dict[str, str]:
        """Field values keyed like the room form (no id)."""
        return {
            "room": self.room,
            "signal_level_24": self.signal_level_24,
            "signal_level_5": self.signal_level_5,
            "speed_24": self.speed_24,
            "speed_5": self.speed_5,
            "interference": self.interference,
        }
