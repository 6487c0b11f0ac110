import logging
from enum import Enum

from config import (
    MOVE_RIGHT_BELOW,
    MOVE_LEFT_ABOVE,
    STEP,
    MIN_X,
    MAX_X,
    SPRITE_START,
)
from utils import action_changed

logger = logging.getLogger(__name__)


class Action(Enum):
    NONE = "NONE"
    MOVE_LEFT = "MOVE_LEFT"
    MOVE_RIGHT = "MOVE_RIGHT"


def decide_action(blob):
    """
    Map the blob centroid x to a sprite action.

    The camera image is mirrored, so a blob left of the dead zone moves the
    sprite right and a blob right of it moves the sprite left.
    """
    if blob is None:
        return Action.NONE

    center_x = blob['center_x']
    if center_x == 0:
        return Action.NONE

    if center_x < MOVE_RIGHT_BELOW:
        return Action.MOVE_RIGHT
    elif center_x > MOVE_LEFT_ABOVE:
        return Action.MOVE_LEFT
    return Action.NONE


def clamp(value, low, high):
    if value < low:
        return low
    elif value > high:
        return high
    return value


class SpriteController:
    def __init__(self, start=None, step=STEP, min_x=MIN_X, max_x=MAX_X):
        start = start or SPRITE_START
        self.step = step
        self.min_x = min_x
        self.max_x = max_x
        self.x = clamp(start[0], min_x, max_x)
        self.y = start[1]
        self.previous_action = None

    @property
    def position(self):
        return self.x, self.y

    def apply(self, action):
        """Move the sprite one step for the given action, staying in range"""
        if action_changed(action, self.previous_action):
            logger.info(f"Action: {action.value}")
        self.previous_action = action

        if action == Action.MOVE_LEFT:
            self.x = clamp(self.x - self.step, self.min_x, self.max_x)
        elif action == Action.MOVE_RIGHT:
            self.x = clamp(self.x + self.step, self.min_x, self.max_x)
        return self.position
