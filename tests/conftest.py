import numpy as np

from camera import Camera

FRAME_HEIGHT = 400
FRAME_WIDTH = 1600

GREEN = (40, 200, 40)  # BGR


def make_frame(rects=(), color=GREEN, background=(0, 0, 0)):
    """Synthetic BGR frame with filled rectangles given as (x, y, w, h)"""
    frame = np.zeros((FRAME_HEIGHT, FRAME_WIDTH, 3), dtype=np.uint8)
    frame[:, :] = background
    for x, y, w, h in rects:
        frame[y:y + h, x:x + w] = color
    return frame

class FakeCapture:
    def __init__(self, frames=(), opened=True):
        self.frames = list(frames)
        self.opened = opened
        self.props = {}
        self.released = 0

    def isOpened(self):
        return self.opened

    def set(self, prop, value):
        self.props[prop] = value
        return True

    def get(self, prop):
        return self.props.get(prop, 0.0)

    def read(self):
        if not self.frames:
            return False, None
        return True, self.frames.pop(0)

    def release(self):
        self.released += 1

class FakeCamera(Camera):
    """Camera backed by a FakeCapture instead of a real device"""

    def __init__(self, capture, **kwargs):
        super().__init__(**kwargs)
        self.capture = capture

    def _open_capture(self):
        return self.capture
