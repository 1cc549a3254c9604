import logging
import shutil
from typing import Callable, List, Optional, Sequence

from gi.repository import Gio, GLib
from fabric.core.service import Property, Service, Signal

from power_menu.errors import CommandNotFoundError, PowerMenuError
from power_menu.powerActions import (
    DEFAULT_LOCK_COMMAND,
    PowerAction,
    commands_for,
    next_action,
    previous_action,
)
from power_menu import powerKeys

logger = logging.getLogger(__name__)


def spawn_detached(argv: List[str]):
    """Start `argv` without waiting, sharing our stdout and stderr.

    The menu exits right after spawning, so children must not hold pipes
    back to it.
    """
    return Gio.Subprocess.new(argv, Gio.SubprocessFlags.NONE)


class PowerService(Service):
    """Service that owns the focused action and runs power commands.

    The Box and the Layer never spawn processes themselves; they call:
    - focus / focus_next / focus_previous
    - confirm
    - run
    - handle_key
    """

    @Property(str, flags="read-write")
    def focused(self) -> str:
        return self._focused.value

    def _set_focused(self, value: str):
        action = PowerAction(value)
        if action is self._focused:
            return
        self._focused = action

    focused = focused.setter(_set_focused)

    @Signal
    def close_requested(self, action: str) -> None: ...

    @Signal
    def action_failed(self, action: str, message: str) -> None: ...

    def __init__(
        self,
        lock_command: Sequence[str] = DEFAULT_LOCK_COMMAND,
        runner: Optional[Callable[[List[str]], object]] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._focused = PowerAction.SHUTDOWN
        self._lock_command = tuple(lock_command)
        self._runner = runner or spawn_detached
        self._which = which

    @property
    def focused_action(self) -> PowerAction:
        return self._focused

    def focus(self, action: PowerAction) -> None:
        self.focused = action.value

    def focus_next(self) -> None:
        self.focus(next_action(self._focused))

    def focus_previous(self) -> None:
        self.focus(previous_action(self._focused))

    def confirm(self) -> None:
        self.run(self._focused)

    def request_close(self) -> None:
        self.close_requested("")

    def handle_key(self, key_name: Optional[str], shift: bool = False) -> bool:
        command = powerKeys.resolve_key(key_name, shift=shift)
        if command is None:
            return False
        logger.debug("key %s -> %s", key_name, command.kind)
        if command.kind == powerKeys.SELECT:
            self.focus(command.action)
            self.run(command.action)
        elif command.kind == powerKeys.NEXT:
            self.focus_next()
        elif command.kind == powerKeys.PREVIOUS:
            self.focus_previous()
        elif command.kind == powerKeys.CONFIRM:
            self.confirm()
        else:
            self.request_close()
        return True

    def run(self, action: PowerAction) -> None:
        """Spawn every command of `action` and ask the UI to close.

        A missing binary aborts the whole action before anything is spawned.
        """
        commands = commands_for(action, lock_command=self._lock_command)
        try:
            for argv in commands:
                if self._which(argv[0]) is None:
                    raise CommandNotFoundError(argv[0])
            for argv in commands:
                logger.info("spawning %s", " ".join(argv))
                self._runner(argv)
        except (GLib.Error, OSError, PowerMenuError) as e:
            logger.exception("power action failed: %s", action.value)
            self.action_failed(action.value, str(e))
            return
        self.close_requested(action.value)
