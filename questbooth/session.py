"""Data collected from one visitor during a photo booth session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

log = logging.getLogger(__name__)


@dataclass
class PhotoSessionData:
    """The choices, name and photo of one visitor."""

    start_time: datetime = field(default_factory=datetime.now)
    chosen_weapon_id: str = ""
    chosen_land_id: str = ""
    chosen_companion_id: str = ""
    user_name: str = ""
    captured_photo_path: str = ""

    def __post_init__(self) -> None:
        log.debug("PhotoSessionData: instance created at %s", self.start_time.isoformat())

    def clear(self) -> None:
        """Reset every field and restart the clock."""
        self.start_time = datetime.now()
        self.chosen_weapon_id = ""
        self.chosen_land_id = ""
        self.chosen_companion_id = ""
        self.user_name = ""
        self.captured_photo_path = ""

    def summary(self) -> str:
        """One line describing the session, with placeholders for missing data."""
        user = self.user_name or "[NoName]"
        photo = self.captured_photo_path or "[None]"
        return (
            f"User: {user} Weapon: {self.chosen_weapon_id} "
            f"Land: {self.chosen_land_id} Companion: {self.chosen_companion_id} "
            f"Photo: {photo}"
        )