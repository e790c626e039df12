"""Translation of window input events into viewer gestures."""

from __future__ import annotations

from typing import Any

SCR_WIDTH = 1000
SCR_HEIGHT = 800


class InputHandler:
    """Tracks mouse and key state and forwards gestures to a viewer.

    The viewer is any object offering ``want_capture_mouse()``,
    ``want_capture_keyboard()``, ``update_gesture_pan(dx, dy)``,
    ``update_gesture_rotate(dx, dy)``, ``update_gesture_zoom(dx, dy)`` and
    ``toggle_panel_state()``. With no viewer every event is ignored.
    """

    def __init__(self, viewer: Any = None) -> None:
        self.viewer = viewer
        self.last_x = SCR_WIDTH / 2.0
        self.last_y = SCR_HEIGHT / 2.0
        self.first_mouse = True
        self.key_h_pressed = False

    def mouse_move(self, x, y, left_pressed, shift_pressed) -> None:
        """Handle a cursor move; dragging rotates, shift-dragging pans."""
        if self.viewer is None or self.viewer.want_capture_mouse():
            return

        if not left_pressed:
            self.first_mouse = True
            return

        if self.first_mouse:
            self.last_x = x
            self.last_y = y
            self.first_mouse = False

        dx = float(x - self.last_x)
        dy = float(y - self.last_y)
        if shift_pressed:
            self.viewer.update_gesture_pan(dx, dy)
        else:
            self.viewer.update_gesture_rotate(dx, dy)

        self.last_x = x
        self.last_y = y

    def scroll(self, dx, dy) -> None:
        """Handle a scroll wheel event as a zoom gesture."""
        if self.viewer is None or self.viewer.want_capture_mouse():
            return
        self.viewer.update_gesture_zoom(float(dx), float(dy))

    def key_h(self, pressed) -> None:
        """Toggle the settings panel once per press of the H key."""
        if self.viewer is None or self.viewer.want_capture_keyboard():
            return
        if pressed:
            if not self.key_h_pressed:
                self.key_h_pressed = True
                self.viewer.toggle_panel_state()
        else:
            self.key_h_pressed = False