import logging

import cv2
import numpy as np

from config import (
    MIN_GREEN,
    GREEN_DOMINANCE,
    MIN_CONTOUR_AREA,
    CONTOUR_COLOR,
    CONTOUR_THICKNESS,
    CONTOUR_LINE_TYPE,
)

logger = logging.getLogger(__name__)

# floor(v * GREEN_DOMINANCE) for every channel value; for integer g,
# g > v * GREEN_DOMINANCE exactly when g > floor(v * GREEN_DOMINANCE)
_DOMINANCE_FLOOR = np.floor(np.arange(256) * GREEN_DOMINANCE).astype(np.int16)


def apply_pixel_filter(frame):
    """
    Binary mask of green-dominant pixels.

    A pixel passes when its green channel is above MIN_GREEN and exceeds both
    red and blue by GREEN_DOMINANCE. The frame is expected in BGR order.

    Returns:
        uint8 array of the frame's height and width, 255 where the pixel
        passes and 0 elsewhere
    """
    if frame is None or frame.dtype != np.uint8 or frame.ndim != 3 or frame.shape[2] < 3:
        raise ValueError("Expected a uint8 BGR frame of shape (H, W, 3)")

    blue = frame[:, :, 0]
    green = frame[:, :, 1]
    red = frame[:, :, 2]

    passing = (
        (green > MIN_GREEN)
        & (green > _DOMINANCE_FLOOR[red])
        & (green > _DOMINANCE_FLOOR[blue])
    )

    mask = np.zeros(frame.shape[:2], dtype=np.uint8)
    mask[passing] = 255
    return mask


def to_hsv(frame):
    """Convert a BGR frame to HSV"""
    return cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)


def find_contours(mask):
    """Outer and hole contours of the mask, with their two-level hierarchy"""
    contours, hierarchy = cv2.findContours(mask, cv2.RETR_CCOMP, cv2.CHAIN_APPROX_SIMPLE)
    return contours, hierarchy


def contour_area(contour):
    # Whole pixels, so a contour must strictly exceed the minimum to count
    return int(cv2.contourArea(contour))


def centroid(contour):
    """Centroid from image moments, or None for a degenerate contour"""
    M = cv2.moments(contour)
    if M["m00"] == 0:
        return None
    return int(M["m10"] / M["m00"]), int(M["m01"] / M["m00"])


def find_largest_blob(mask, min_area=MIN_CONTOUR_AREA, contours=None):
    """
    Find the largest contour whose area is above min_area.

    Returns:
        dict with 'center_x', 'center_y', 'area' and 'contour', or None when
        nothing qualifies
    """
    if contours is None:
        contours, _ = find_contours(mask)

    best = None
    best_area = 0
    for contour in contours:
        area = contour_area(contour)
        if area <= min_area:
            continue
        if area > best_area:
            best = contour
            best_area = area

    if best is None:
        return None

    center = centroid(best)
    if center is None:
        return None

    return {
        'center_x': center[0],
        'center_y': center[1],
        'area': best_area,
        'contour': best,
    }


def draw_contours(shape, contours, min_area=MIN_CONTOUR_AREA, hierarchy=None):
    """Black BGR overlay with every contour above min_area outlined"""
    height, width = shape[:2]
    overlay = np.zeros((height, width, 3), dtype=np.uint8)

    for i, contour in enumerate(contours):
        if contour_area(contour) > min_area:
            if hierarchy is None:
                cv2.drawContours(overlay, contours, i, CONTOUR_COLOR,
                                 CONTOUR_THICKNESS, CONTOUR_LINE_TYPE)
            else:
                cv2.drawContours(overlay, contours, i, CONTOUR_COLOR,
                                 CONTOUR_THICKNESS, CONTOUR_LINE_TYPE, hierarchy, 0)
    return overlay


class BlobDetector:
    def __init__(self, min_area=None):
        self.min_area = MIN_CONTOUR_AREA if min_area is None else min_area

    def process(self, frame):
        """
        Run the pixel filter and contour search on one frame.

        Returns:
            (blob, overlay) where blob is the find_largest_blob result and
            overlay is the contour drawing for the preview window
        """
        mask = apply_pixel_filter(frame)
        contours, hierarchy = find_contours(mask)

        blob = find_largest_blob(mask, self.min_area, contours=contours)
        overlay = draw_contours(mask.shape, contours, self.min_area, hierarchy=hierarchy)

        if blob is None:
            logger.debug("Center of mass x = 0")
        else:
            logger.debug(f"Center of mass x = {blob['center_x']}")
            if logger.isEnabledFor(logging.DEBUG):
                hue, saturation, value = self.mean_hsv(frame, blob['contour'])
                logger.debug(f"Blob area {blob['area']}, mean HSV ({hue:.0f}, {saturation:.0f}, {value:.0f})")

        return blob, overlay

    def mean_hsv(self, frame, contour):
        """Average HSV colour inside a contour"""
        hsv = to_hsv(frame)
        region = np.zeros(frame.shape[:2], dtype=np.uint8)
        cv2.drawContours(region, [contour], 0, 255, -1)
        return cv2.mean(hsv, mask=region)[:3]
