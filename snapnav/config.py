# Configuration de la navigation par sections
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Largeur de viewport (px) sous laquelle l'appareil est considéré compact
COMPACT_BREAKPOINT_PX = 768

# Déplacement vertical minimal d'un swipe tactile
SWIPE_THRESHOLD = 50

# Delta de molette ignoré sur appareil compact (trackpads bruités)
COMPACT_WHEEL_THRESHOLD = 20


class DeviceClass(str, Enum):
    compact = "compact"
    wide = "wide"

    @classmethod
    def from_width(cls, width: int) -> "DeviceClass":
        return cls.compact if width < COMPACT_BREAKPOINT_PX else cls.wide


@dataclass(frozen=True, slots=True)
class DeviceProfile:
    """Timings and thresholds applied for one device class."""

    device_class: DeviceClass
    cooldown_ms: int
    visibility_threshold: float
    viewport_inset: float
    wheel_threshold: float
    touch_enabled: bool


class NavigatorConfig(BaseModel):
    """Cooldowns between two snaps, per device class."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    normal_cooldown_ms: int = Field(default=1000, ge=0, alias="normalCooldownMs")
    compact_cooldown_ms: int = Field(default=600, ge=0, alias="compactCooldownMs")

    @classmethod
    def from_env(cls) -> "NavigatorConfig":
        """Build the configuration from ``SNAPNAV_*`` environment variables."""
        return cls(
            normal_cooldown_ms=int(os.environ.get("SNAPNAV_NORMAL_COOLDOWN_MS", "1000")),
            compact_cooldown_ms=int(os.environ.get("SNAPNAV_COMPACT_COOLDOWN_MS", "600")),
        )

    def profile_for(self, device_class: DeviceClass) -> DeviceProfile:
        if device_class is DeviceClass.compact:
            return DeviceProfile(
                device_class=device_class,
                cooldown_ms=self.compact_cooldown_ms,
                visibility_threshold=0.25,
                viewport_inset=0.10,
                wheel_threshold=COMPACT_WHEEL_THRESHOLD,
                touch_enabled=True,
            )
        return DeviceProfile(
            device_class=device_class,
            cooldown_ms=self.normal_cooldown_ms,
            visibility_threshold=0.5,
            viewport_inset=0.0,
            wheel_threshold=0,
            touch_enabled=False,
        )


# Instance globale par défaut
DEFAULT_NAVIGATOR_CONFIG = NavigatorConfig.from_env()
