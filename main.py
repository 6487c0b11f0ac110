import argparse
import logging
import sys
import time

import cv2

from camera import Camera
from config import CAMERA_ID, SPRITE_PATH, PREVIEW_WINDOW, LOG_FORMAT, READ_RETRY_DELAY
from image_processing import BlobDetector
from movement_control import SpriteController, decide_action
from renderer import SpriteRenderer, RendererError
from utils import clean_exit

logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Slide a sprite by waving something green at the webcam")
    parser.add_argument("--camera", type=int, default=CAMERA_ID, help="Camera index")
    parser.add_argument("--sprite", default=SPRITE_PATH, help="Sprite bitmap to draw")
    parser.add_argument("--no-preview", action="store_true", help="Do not show the contour preview window")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def setup_logging(debug=False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
    )


def run_frame(camera, detector, controller, show_preview=True):
    """
    Read one frame and advance the sprite.

    Returns:
        the Action taken, or None when no frame could be read
    """
    frame = camera.get_frame()
    if frame is None:
        return None

    blob, overlay = detector.process(frame)
    if show_preview:
        cv2.imshow(PREVIEW_WINDOW, overlay)
        cv2.waitKey(1)

    action = decide_action(blob)
    controller.apply(action)
    return action


def main(argv=None):
    args = parse_arguments(argv)
    setup_logging(args.debug)
    if args.debug:
        logger.debug("Debug mode enabled")

    camera = Camera(camera_id=args.camera)
    renderer = SpriteRenderer()

    try:
        if camera.initialize() is None:
            logger.error("ERROR! Unable to open camera, exiting.")
            return 1

        try:
            renderer.initialize()
        except RendererError as e:
            logger.error(str(e))
            return 1
        renderer.load_sprite(args.sprite)

        detector = BlobDetector()
        controller = SpriteController()

        logger.info("Application started successfully!")
        logger.info("Move something green in front of the camera. Close the window or press 'q' to quit.")

        while not renderer.poll_events():
            action = run_frame(camera, detector, controller, show_preview=not args.no_preview)
            if action is None:
                logger.warning("Failed to get frame, retrying...")
                time.sleep(READ_RETRY_DELAY)
                continue
            renderer.draw(controller.position)

    except KeyboardInterrupt:
        logger.info("User stopped the program.")
    finally:
        clean_exit(camera, renderer, destroy_windows=not args.no_preview)

    return 0


if __name__ == "__main__":
    sys.exit(main())
