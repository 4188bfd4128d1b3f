"""
GameOptions - the player-toggleable settings consulted by the spawner and game loop.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .constants import FOOD, PICKUP_KINDS


def _all_enabled() -> Dict[str, bool]:
    return {kind: True for kind in PICKUP_KINDS if kind != FOOD}


def _require_bool(name: str, value: Any) -> bool:
    # Flags must be real booleans; a quoted YAML "no" arrives as a string
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' must be true or false, got {value!r}.")
    return value


@dataclass
class GameOptions:
    """
    Attributes:
        chaos_mode: pickups appear and decay on their own, LETHAL pickups exist
        worm_mode: cosmetic only, the presentation layer draws a worm
        enabled: per-kind spawn flags; FOOD is always enabled
    """

    chaos_mode: bool = False
    worm_mode: bool = False
    enabled: Dict[str, bool] = field(default_factory=_all_enabled)

    def set_chaos_mode(self, on: bool) -> None:
        self.chaos_mode = _require_bool("chaos_mode", on)

    def toggle_chaos_mode(self) -> bool:
        self.chaos_mode = not self.chaos_mode
        return self.chaos_mode

    def set_worm_mode(self, on: bool) -> None:
        self.worm_mode = _require_bool("worm_mode", on)

    def set_pickup_enabled(self, kind: str, enabled: bool) -> None:
        if kind not in PICKUP_KINDS:
            raise ValueError(f"Unknown pickup kind '{kind}'.")
        _require_bool(kind, enabled)
        if kind == FOOD:
            if not enabled:
                raise ValueError("FOOD is the fallback pickup and cannot be disabled.")
            return
        self.enabled[kind] = enabled

    def is_enabled(self, kind: str) -> bool:
        if kind == FOOD:
            return True
        return self.enabled.get(kind, False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameOptions":
        """
        Build options from a mapping such as a parsed YAML file:

            chaos_mode: true
            worm_mode: false
            pickups:
              LETHAL: false
              PENALTY: false
        """
        options = cls(
            chaos_mode=_require_bool("chaos_mode", data.get("chaos_mode", False)),
            worm_mode=_require_bool("worm_mode", data.get("worm_mode", False)),
        )
        pickups = data.get("pickups") or {}
        if not isinstance(pickups, dict):
            raise ValueError("'pickups' must be a mapping of pickup kind to true/false.")
        for kind, enabled in pickups.items():
            options.set_pickup_enabled(str(kind).upper(), enabled)
        return options

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chaos_mode": self.chaos_mode,
            "worm_mode": self.worm_mode,
            "pickups": dict(self.enabled),
        }
