import logging

import cv2

from config import CAMERA_ID, FRAME_WIDTH, FRAME_HEIGHT, FPS

logger = logging.getLogger(__name__)


class Camera:
    def __init__(self, camera_id=None, width=None, height=None, fps=None):
        self.camera_id = CAMERA_ID if camera_id is None else camera_id
        self.width = width or FRAME_WIDTH
        self.height = height or FRAME_HEIGHT
        self.fps = fps or FPS
        self.cap = None

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def _open_capture(self):
        return cv2.VideoCapture(self.camera_id)

    def initialize(self):
        """Open the webcam; returns the capture or None on failure"""
        try:
            self.cap = self._open_capture()
        except cv2.error as e:
            logger.error(f"Could not initialize camera {self.camera_id} - {e}")
            self.cap = None
            return None

        if not self.cap.isOpened():
            logger.error("Unable to open camera %s", self.camera_id)
            self.cap = None
            return None

        # Only override what was asked for
        if self.width:
            self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        if self.height:
            self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        if self.fps:
            self.cap.set(cv2.CAP_PROP_FPS, self.fps)

        actual_width = self.cap.get(cv2.CAP_PROP_FRAME_WIDTH)
        actual_height = self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT)
        actual_fps = self.cap.get(cv2.CAP_PROP_FPS)

        logger.info("Camera initialized successfully.")
        logger.info(f"Resolution: {actual_width}x{actual_height}, FPS: {actual_fps}")
        return self.cap

    @property
    def is_opened(self):
        return self.cap is not None

    def get_frame(self):
        """Capture a BGR frame from the camera"""
        if self.cap is None:
            logger.warning("Camera not initialized.")
            return None

        ret, frame = self.cap.read()
        if not ret or frame is None:
            logger.warning("Could not read frame.")
            return None
        return frame

    def release(self):
        """Release the camera"""
        if self.cap is not None:
            self.cap.release()
            self.cap = None
