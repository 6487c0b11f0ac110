import logging

import cv2

logger = logging.getLogger(__name__)


def action_changed(new_action, previous_action):
    """Determine if a new action differs from the previous one"""
    if previous_action is None or new_action is None:
        return True
    return new_action != previous_action


def clean_exit(camera, renderer, destroy_windows=True):
    """
    Gracefully close all resources before exiting
    """
    logger.info("Cleaning up resources...")
    try:
        if camera is not None:
            camera.release()
            logger.info("Camera closed.")
    except Exception as e:
        logger.error(f"Error closing camera: {e}")
    try:
        if renderer is not None:
            renderer.close()
            logger.info("Window closed.")
    except Exception as e:
        logger.error(f"Error closing window: {e}")
    if destroy_windows:
        try:
            cv2.destroyAllWindows()
        except cv2.error as e:
            logger.error(f"Error closing preview window: {e}")
    logger.info("Application quit successfully!")
