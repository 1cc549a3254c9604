import logging
import sys

from fabric import Application

from cli import parse_args
from config import APP_NAME, resolve_style_path
from power_menu.errors import ConfigError
from power_menu.powerLayer import PowerLayer
from styles.reload import start_styles_monitor

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        style_path = resolve_style_path(args.css)
    except ConfigError:
        logger.exception("could not prepare the config directory")
        return 1

    layer = PowerLayer()
    app = Application(APP_NAME, layer)
    layer.connect("destroy", lambda *_: app.quit())

    # the monitor stops once garbage collected
    app.style_monitor = start_styles_monitor(app, style_path, watch=not args.no_watch)

    app.run()
    return layer.exit_status


if __name__ == "__main__":
    sys.exit(main())
