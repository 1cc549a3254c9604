from typing import Dict

from gi.repository import GLib

from fabric.widgets.box import Box
from fabric.widgets.button import Button
from fabric.widgets.image import Image

from power_menu.powerActions import PowerAction, ordered_actions
from power_menu.powerService import PowerService


class PowerMenu(Box):
    """Box (UI) of the power menu: one button per action.

    CONTRACT: no subprocess calls here; everything goes through PowerService.
    """

    def __init__(self, controller: PowerService, icon_size: int = 96, **kwargs):
        super().__init__(
            name="mainbox",
            style_classes="mainbox",
            orientation="h",
            spacing=5,
            h_align="fill",
            h_expand=True,
            visible=True,
            **kwargs,
        )
        self.set_homogeneous(True)

        self.service = controller
        self.buttons: Dict[PowerAction, Button] = {}

        for action in ordered_actions():
            button = self._build_button(action, icon_size)
            self.buttons[action] = button
            self.add(button)

        self.service.connect(
            "notify::focused",
            lambda *_: GLib.idle_add(self._sync_focus),
        )

        self.show_all()
        self._sync_focus()

    def _build_button(self, action: PowerAction, icon_size: int) -> Button:
        button = Button(
            name=f"button-{action.value}",
            style_classes=["button", action.css_class],
            child=Image(icon_name=action.icon_name, icon_size=icon_size),
            tooltip_text=f"{action.digit}. {action.label}",
            on_clicked=lambda *_: self.service.run(action),
            h_expand=True,
            v_expand=True,
        )
        button.set_can_focus(True)
        # pointer and GTK focus chain both move the service focus
        button.connect("enter-notify-event", lambda btn, *_: btn.grab_focus())
        button.connect("focus-in-event", lambda *_: self.service.focus(action))
        return button

    def grab_focus(self):
        self._sync_focus()

    def _sync_focus(self) -> bool:
        focused = self.service.focused_action
        for action, button in self.buttons.items():
            context = button.get_style_context()
            if action is focused:
                context.add_class("focused")
            else:
                context.remove_class("focused")
        target = self.buttons.get(focused)
        if target is not None and not target.has_focus():
            try:
                target.grab_focus()
            except (AttributeError, RuntimeError):
                pass
        return False
