"""Edge snapping for a window that docks to the screen's working area."""

from __future__ import annotations

from ipmonitor.models.geometry_models import Point, Rect

SNAP_DISTANCE = 100


class EdgeSnapper:
    """Clamps a window onto working-area edges it has been dropped near.

    An edge snaps when the window's edge lies inside the working area, more
    than zero and at most ``distance`` units away from the matching edge. A
    window already flush with an edge is left alone. All four edges are
    checked on every call, so a window near a corner snaps on both axes.
    """

    def __init__(self, distance: int = SNAP_DISTANCE) -> None:
        if distance < 0:
            raise ValueError("distance must be zero or greater")
        self.distance = distance

    def can_snap(self, position: int, edge: int) -> bool:
        delta = position - edge
        return 0 < delta <= self.distance

    def snap(self, rect: Rect, working_area: Rect) -> Point:
        """Return the adjusted top-left position for ``rect``.

        Args:
            rect: Current window bounds.
            working_area: Usable screen area (excluding taskbars/docks).

        Returns:
            Point: new left/top; unchanged coordinates when nothing snaps.
        """
        left, top = rect.left, rect.top

        if self.can_snap(rect.left, working_area.left):
            left = working_area.left

        if self.can_snap(rect.top, working_area.top):
            top = working_area.top

        if self.can_snap(working_area.right, rect.right):
            left = working_area.right - rect.width

        if self.can_snap(working_area.bottom, rect.bottom):
            top = working_area.bottom - rect.height

        return Point(left=left, top=top)


_default_snapper = EdgeSnapper()


def snap(rect: Rect, working_area: Rect) -> Point:
    """Snap ``rect`` into ``working_area`` using the default distance."""
    return _default_snapper.snap(rect, working_area)
