"""Snap command - computes where a dropped window would dock."""

from ipmonitor.models.geometry_models import Rect
from ipmonitor.snapping import EdgeSnapper
from ipmonitor.utils.logger import Logger


def run_snap(
    rect: tuple[int, int, int, int],
    area: tuple[int, int, int, int],
    distance: int,
) -> None:
    """Print the snapped 'left top' for a window inside a working area."""
    window = Rect(left=rect[0], top=rect[1], right=rect[2], bottom=rect[3])
    working_area = Rect(left=area[0], top=area[1], right=area[2], bottom=area[3])

    position = EdgeSnapper(distance).snap(window, working_area)
    Logger.get("snap").debug(f"{window} in {working_area} -> {position}")
    print(f"{position.left} {position.top}")
