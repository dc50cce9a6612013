"""
UI helper functions for Release Viewer
"""
import sys


def scroll_units(delta, platform=None):
    """
    Convert a <MouseWheel> delta into canvas scroll units.

    Windows reports multiples of 120 per notch and scrolls too slowly with
    the default divisor, so it gets a smaller one.
    """
    platform = platform or sys.platform
    divisor = 5 if platform == 'win32' else 120
    return int(-1 * (delta / divisor))


def _frame_contains(frame, widget):
    """Check whether a widget sits inside a scrollable frame"""
    while widget is not None:
        if widget == frame or widget == frame._parent_canvas:
            return True
        widget = widget.master
    return False


def bind_mousewheel_to_frame(frame):
    """
    Bind mousewheel events so a CTkScrollableFrame scrolls on every platform.

    Linux delivers Button-4/Button-5 instead of <MouseWheel>. Bindings are
    made on the frame's toplevel and only act when the cursor is over the
    frame.

    Args:
        frame: The frame to add scrolling to (must be a CTkScrollableFrame)
    """
    if not hasattr(frame, '_parent_canvas'):
        return

    root = frame.winfo_toplevel()

    def _scroll(event, units):
        widget = event.widget.winfo_containing(event.x_root, event.y_root)
        if _frame_contains(frame, widget):
            frame._parent_canvas.yview_scroll(units, "units")
            return "break"
        return None

    if sys.platform.startswith('linux'):
        root.bind("<Button-4>", lambda e: _scroll(e, -1), add="+")
        root.bind("<Button-5>", lambda e: _scroll(e, 1), add="+")
    else:
        root.bind("<MouseWheel>", lambda e: _scroll(e, scroll_units(e.delta)), add="+")
