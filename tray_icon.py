"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu


def tray_title(count: int) -> str:
    if count == 0:
        return "Multi-Date Picker"
    return f"Multi-Date Picker – {count} date{'s' if count != 1 else ''} selected"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_clear: Callable[[], None] | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Picker", lambda _icon, _item: on_show(), default=True),
    ]
    if on_clear is not None:
        items.append(MenuItem("Clear Selection", lambda _icon, _item: on_clear()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("multi-date-picker", icon_image, tray_title(0), menu)


def update_tray(tray: pystray.Icon, icon_image: Image.Image, count: int) -> None:
    """Refresh the tray image and tooltip after the selection changed."""
    tray.icon = icon_image
    tray.title = tray_title(count)
