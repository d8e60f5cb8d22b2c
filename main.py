"""Entry point: glues pystray (daemon thread) with tkinter (main thread)."""

import argparse
import logging
import threading

from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from settings import load_settings
from tray_icon import create_tray

logger = logging.getLogger("calendar_lite")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calendar Lite month widget.")
    parser.add_argument("--date", help="Month to open on, as YYYY-MM-DD.")
    parser.add_argument("--footer", help="Text shown under the month grid.")
    parser.add_argument("--settings", help="Path to a JSON settings file.")
    parser.add_argument("--no-tray", action="store_true",
                        help="Show the window directly, without a tray icon.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log navigation and selection details.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = load_settings(args.settings)
    if args.footer is not None:
        options["footer_text"] = args.footer

    cal_win = CalendarWindow(seed=args.date, options=options)
    cal_win.calendar.on_select(
        lambda d: logger.info("Selected %s", d.isoformat()))

    if args.no_tray:
        cal_win.root.mainloop()
        return

    cal_win.hide()

    # Callbacks marshalled onto the tkinter main thread
    def on_toggle() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_today() -> None:
        cal_win.root.after(0, cal_win.calendar.go_today)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.destroy()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(), on_toggle, on_exit, on_today=on_today)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
