# Camera Configuration
CAMERA_ID = 0
FRAME_WIDTH = None   # Leave at driver default
FRAME_HEIGHT = None
FPS = None

# Window Configuration
WINDOW_TITLE = "Window"
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 1200
PREVIEW_WINDOW = "Live"

# Sprite
SPRITE_PATH = "gingertail_runwalk.bmp"
SPRITE_START = (500, 500)
SPRITE_SIZE = (100, 100)
BACKGROUND_COLOR = (0, 0, 0)

# Green pixel filter (BGR)
MIN_GREEN = 100
GREEN_DOMINANCE = 1.15

# Contour filtering
MIN_CONTOUR_AREA = 10000
CONTOUR_COLOR = (255, 0, 0)
CONTOUR_THICKNESS = 2
CONTOUR_LINE_TYPE = 8

# Movement decision (centroid x, mirrored camera)
MOVE_RIGHT_BELOW = 1000
MOVE_LEFT_ABOVE = 1200
STEP = 10
MIN_X = 10
MAX_X = 800

# Logging
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
READ_RETRY_DELAY = 0.1
