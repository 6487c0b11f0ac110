import logging

import pygame

from config import (
    WINDOW_TITLE,
    WINDOW_WIDTH,
    WINDOW_HEIGHT,
    SPRITE_SIZE,
    BACKGROUND_COLOR,
)

logger = logging.getLogger(__name__)

PLACEHOLDER_COLOR = (230, 120, 40)


class RendererError(Exception):
    """Raised when the window cannot be created"""


class SpriteRenderer:
    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, title=WINDOW_TITLE):
        self.width = width
        self.height = height
        self.title = title
        self.screen = None
        self.sprite = None

    def initialize(self):
        """Create the window; raises RendererError if the display is unavailable"""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        except pygame.error as e:
            raise RendererError(f"Error {e}") from e

        pygame.display.set_caption(self.title)

        width, height = pygame.display.get_window_size()
        bb_width, bb_height = self.screen.get_size()
        logger.info(f"Window size: {width}x{height}")
        logger.info(f"Backbuffer size: {bb_width}x{bb_height}")
        if width != bb_width:
            logger.info("This is a highdpi environment.")
        return self.screen

    def load_sprite(self, path, size=SPRITE_SIZE):
        """Load the sprite bitmap, falling back to a plain square if it is missing"""
        try:
            image = pygame.image.load(path)
            if self.screen is not None:
                image = image.convert()
        except (pygame.error, FileNotFoundError) as e:
            logger.error(f"Failed to load image: {e}")
            image = pygame.Surface(size)
            image.fill(PLACEHOLDER_COLOR)

        self.sprite = pygame.transform.scale(image, size)
        return self.sprite

    def poll_events(self):
        """Drain pending events; True when the user asked to quit"""
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                quit_requested = True
        return quit_requested

    def draw(self, position):
        if self.screen is None:
            return
        try:
            self.screen.fill(BACKGROUND_COLOR)
            if self.sprite is not None:
                self.screen.blit(self.sprite, pygame.Rect(position, self.sprite.get_size()))
            pygame.display.flip()
        except pygame.error as e:
            logger.error(f"error with rendering: {e}")

    def close(self):
        self.sprite = None
        self.screen = None
        pygame.quit()
