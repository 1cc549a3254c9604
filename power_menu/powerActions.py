from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence


DEFAULT_LOCK_COMMAND = ("swaylock", "-c", "000000")


class PowerAction(Enum):
    SHUTDOWN = "shutdown"
    REBOOT = "reboot"
    SLEEP = "sleep"

    @property
    def digit(self) -> str:
        return str(_ORDER.index(self) + 1)

    @property
    def icon_name(self) -> str:
        return f"system-{_ICON_SUFFIX[self]}-symbolic"

    @property
    def css_class(self) -> str:
        return f"button_{self.value}"

    @property
    def label(self) -> str:
        return _LABELS[self]


_ORDER: List[PowerAction] = [
    PowerAction.SHUTDOWN,
    PowerAction.REBOOT,
    PowerAction.SLEEP,
]

_ICON_SUFFIX = {
    PowerAction.SHUTDOWN: "shutdown",
    PowerAction.REBOOT: "reboot",
    PowerAction.SLEEP: "suspend",
}

_LABELS = {
    PowerAction.SHUTDOWN: "Shut down",
    PowerAction.REBOOT: "Reboot",
    PowerAction.SLEEP: "Sleep",
}


def ordered_actions() -> List[PowerAction]:
    return list(_ORDER)


def next_action(action: PowerAction) -> PowerAction:
    return _ORDER[(_ORDER.index(action) + 1) % len(_ORDER)]


def previous_action(action: PowerAction) -> PowerAction:
    return _ORDER[(_ORDER.index(action) - 1) % len(_ORDER)]


def action_for_digit(digit: str) -> Optional[PowerAction]:
    for action in _ORDER:
        if action.digit == digit:
            return action
    return None


def commands_for(
    action: PowerAction,
    lock_command: Sequence[str] = DEFAULT_LOCK_COMMAND,
) -> List[List[str]]:
    """Argv lists spawned, in order, to perform `action`."""
    if action is PowerAction.SHUTDOWN:
        return [["shutdown", "now"]]
    if action is PowerAction.REBOOT:
        return [["reboot"]]
    # sleep: pause players and lock before suspending
    return [
        ["playerctl", "-a", "pause"],
        list(lock_command),
        ["systemctl", "suspend"],
    ]


__all__ = [
    "DEFAULT_LOCK_COMMAND",
    "PowerAction",
    "action_for_digit",
    "commands_for",
    "next_action",
    "ordered_actions",
    "previous_action",
]
