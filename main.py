"""Entry point, glues pystray (daemon thread) with tkinter (main thread)."""

import argparse
import calendar
import logging
import threading
from datetime import date

from icon_gen import create_icon_image
from picker_window import PickerWindow
from tray_icon import create_tray, update_tray

logger = logging.getLogger(__name__)

WEEK_STARTS = {"monday": calendar.MONDAY, "sunday": calendar.SUNDAY}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="multi-date-picker",
        description="Pick a set of dates; the earliest and latest form a range.",
    )
    parser.add_argument("--week-start", choices=sorted(WEEK_STARTS),
                        help="first column of the grid (default: from settings)")
    parser.add_argument("--no-tray", action="store_true",
                        help="run without a system-tray icon")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    first_weekday = WEEK_STARTS.get(args.week_start)

    if args.no_tray:
        def log_selection(dates: list[date]) -> None:
            logger.info("Selected: %s", ", ".join(d.isoformat() for d in dates) or "-")

        cal_win = PickerWindow(on_change=log_selection,
                               first_weekday=first_weekday, quit_on_hide=True)
        cal_win.show()
        cal_win.root.mainloop()
        return

    tray = None

    def on_selection(dates: list[date]) -> None:
        # Direct cross-thread update; pystray applies icon/title changes itself
        if tray is not None:
            update_tray(tray, create_icon_image(len(dates), cal_win.accent), len(dates))

    cal_win = PickerWindow(on_change=on_selection, first_weekday=first_weekday)
    cal_win.root.withdraw()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_clear() -> None:
        cal_win.root.after(0, cal_win.clear_selection)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    tray = create_tray(create_icon_image(0, cal_win.accent), on_show, on_exit,
                       on_clear=on_clear)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()
    logger.info("Tray icon started")

    # tkinter main loop on the main thread
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
