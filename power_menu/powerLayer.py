import logging
from typing import Optional

from gi.repository import Gdk, GLib
from fabric.widgets.wayland import WaylandWindow as Window

from power_menu.exitStatus import ExitStatus
from power_menu.powerBox import PowerMenu
from power_menu.powerService import PowerService

logger = logging.getLogger(__name__)


class PowerLayer(Window):
    def __init__(self, service: Optional[PowerService] = None, **kwargs):
        service = service or PowerService()
        menu = PowerMenu(controller=service)

        super().__init__(
            title="oxishut",
            name="mainwindow",
            type="top-level",
            layer="overlay",
            exclusivity="auto",
            keyboard_mode="exclusive",
            all_visible=True,
            child=menu,
            **kwargs,
        )
        self.set_default_size(800, 350)
        self.set_vexpand(False)

        self.service = service
        self.child = menu
        self._exit = ExitStatus()

        def _focus_later():
            try:
                self.child.grab_focus()
            except (AttributeError, RuntimeError):
                pass
            return False

        GLib.idle_add(_focus_later)

        self.connect("key-press-event", self._on_key_press)
        self.connect("focus-out-event", lambda *_: self._close(0))

        self.service.connect("close-requested", lambda *_: self._close(0))
        self.service.connect("action-failed", self._on_action_failed)

    def _on_key_press(self, _widget, event) -> bool:
        key_name = Gdk.keyval_name(event.keyval)
        shift = bool(event.state & Gdk.ModifierType.SHIFT_MASK)
        return self.service.handle_key(key_name, shift=shift)

    def _on_action_failed(self, _service, action: str, message: str):
        logger.error("could not run %s: %s", action, message)
        self._close(1)

    @property
    def exit_status(self) -> int:
        return self._exit.code

    def _close(self, status: int):
        self._exit.record(status)
        self.close()
        return False
