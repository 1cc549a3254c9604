"""Apply the user stylesheet and re-apply it when it is edited.

Usage: call `start_styles_monitor(app, style_path)` after creating the
`app` instance in `main.py`.
"""
from gi.repository import Gio, GLib
import os
import logging

logger = logging.getLogger(__name__)


def _apply_stylesheet(app, style_path: str):
    try:
        app.set_stylesheet_from_file(style_path)
        logger.info("[styles] applied stylesheet: %s", style_path)
    except (GLib.Error, OSError):
        logger.exception("[styles] failed to apply stylesheet")
    return False


def start_styles_monitor(app, style_path: str, watch: bool = True, debounce_ms: int = 250):
    """Apply `style_path` now and, when `watch` is set, on every change.

    debounce_ms: time window to coalesce rapid successive events.
    """
    if not style_path:
        logger.debug("[styles] no stylesheet configured")
        return None

    _apply_stylesheet(app, style_path)
    if not watch:
        return None

    style_dir = os.path.dirname(os.path.abspath(style_path))
    if not os.path.isdir(style_dir):
        logger.error("[styles] styles dir does not exist: %s", style_dir)
        return None

    timer_id = {"id": None}

    def _debounced_apply():
        timer_id["id"] = None
        return _apply_stylesheet(app, style_path)

    def _on_changed(monitor, file, other, event_type):
        if timer_id["id"]:
            GLib.source_remove(timer_id["id"])
        timer_id["id"] = GLib.timeout_add(debounce_ms, _debounced_apply)

    gfile = Gio.File.new_for_path(style_dir)
    try:
        monitor = gfile.monitor_directory(Gio.FileMonitorFlags.NONE, None)
    except GLib.Error:
        logger.exception("[styles] failed to start monitor")
        return None
    monitor.connect("changed", _on_changed)
    logger.info("[styles] watching %s for changes (debounce %dms)", style_dir, debounce_ms)
    return monitor
