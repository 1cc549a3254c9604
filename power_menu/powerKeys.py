from dataclasses import dataclass
from typing import Optional

from power_menu.powerActions import PowerAction, action_for_digit


SELECT = "select"
NEXT = "next"
PREVIOUS = "previous"
CONFIRM = "confirm"
CLOSE = "close"


@dataclass(frozen=True)
class KeyCommand:
    kind: str
    action: Optional[PowerAction] = None


_STATIC_KEYS = {
    "Tab": KeyCommand(NEXT),
    "Right": KeyCommand(NEXT),
    "ISO_Left_Tab": KeyCommand(PREVIOUS),
    "Left": KeyCommand(PREVIOUS),
    "Return": KeyCommand(CONFIRM),
    "KP_Enter": KeyCommand(CONFIRM),
    "Escape": KeyCommand(CLOSE),
    "Super_L": KeyCommand(CLOSE),
}


def resolve_key(key_name: Optional[str], shift: bool = False) -> Optional[KeyCommand]:
    """Map a GDK key name to the menu command it triggers.

    Returns None for keys the menu does not handle so the event can
    propagate to GTK.
    """
    if not key_name:
        return None
    if key_name.startswith("KP_"):
        digit = key_name[3:]
        if digit.isdigit():
            key_name = digit
    action = action_for_digit(key_name)
    if action is not None:
        return KeyCommand(SELECT, action)
    if key_name == "Tab" and shift:
        return KeyCommand(PREVIOUS)
    return _STATIC_KEYS.get(key_name)


__all__ = [
    "CLOSE",
    "CONFIRM",
    "KeyCommand",
    "NEXT",
    "PREVIOUS",
    "SELECT",
    "resolve_key",
]
