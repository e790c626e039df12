import pytest

from softglview.input import SCR_HEIGHT, SCR_WIDTH, InputHandler


class FakeViewer:
    def __init__(self, capture_mouse=False, capture_keyboard=False):
        self.capture_mouse = capture_mouse
        self.capture_keyboard = capture_keyboard
        self.calls = []

    def want_capture_mouse(self):
        return self.capture_mouse

    def want_capture_keyboard(self):
        return self.capture_keyboard

    def update_gesture_pan(self, dx, dy):
        self.calls.append(("pan", dx, dy))

    def update_gesture_rotate(self, dx, dy):
        self.calls.append(("rotate", dx, dy))

    def update_gesture_zoom(self, dx, dy):
        self.calls.append(("zoom", dx, dy))

    def toggle_panel_state(self):
        self.calls.append(("toggle",))


@pytest.fixture
def viewer():
    return FakeViewer()


def test_initial_cursor_is_screen_center():
    handler = InputHandler()
    assert (handler.last_x, handler.last_y) == (SCR_WIDTH / 2.0, SCR_HEIGHT / 2.0)
    assert handler.first_mouse is True


def test_first_drag_event_has_zero_offset(viewer):
    handler = InputHandler(viewer)
    handler.mouse_move(10, 20, True, False)
    assert viewer.calls == [("rotate", 0.0, 0.0)]


def test_drag_rotates_by_delta(viewer):
    handler = InputHandler(viewer)
    handler.mouse_move(10, 20, True, False)
    handler.mouse_move(15, 12, True, False)
    assert viewer.calls[-1] == ("rotate", 5.0, -8.0)
    assert (handler.last_x, handler.last_y) == (15, 12)


def test_shift_drag_pans(viewer):
    handler = InputHandler(viewer)
    handler.mouse_move(0, 0, True, True)
    handler.mouse_move(3, 4, True, True)
    assert viewer.calls == [("pan", 0.0, 0.0), ("pan", 3.0, 4.0)]


def test_release_resets_first_mouse(viewer):
    handler = InputHandler(viewer)
    handler.mouse_move(0, 0, True, False)
    handler.mouse_move(50, 50, False, False)
    assert handler.first_mouse is True
    handler.mouse_move(100, 100, True, False)
    assert viewer.calls[-1] == ("rotate", 0.0, 0.0)


def test_mouse_captured_by_panel_is_ignored():
    viewer = FakeViewer(capture_mouse=True)
    handler = InputHandler(viewer)
    handler.mouse_move(5, 5, True, False)
    handler.scroll(0, 1)
    assert viewer.calls == []


def test_scroll_zooms(viewer):
    handler = InputHandler(viewer)
    handler.scroll(0.0, -2.0)
    assert viewer.calls == [("zoom", 0.0, -2.0)]


def test_key_h_toggles_once_per_press(viewer):
    handler = InputHandler(viewer)
    handler.key_h(True)
    handler.key_h(True)
    assert viewer.calls == [("toggle",)]
    handler.key_h(False)
    handler.key_h(True)
    assert viewer.calls == [("toggle",), ("toggle",)]


def test_key_h_ignored_when_keyboard_captured():
    viewer = FakeViewer(capture_keyboard=True)
    handler = InputHandler(viewer)
    handler.key_h(True)
    assert viewer.calls == []
    assert handler.key_h_pressed is False


def test_no_viewer_ignores_events():
    handler = InputHandler()
    handler.mouse_move(7, 9, True, False)
    handler.key_h(True)
    assert handler.first_mouse is True
    assert handler.key_h_pressed is False