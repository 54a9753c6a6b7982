WIDTH = 800
HEIGHT = 600
FULLSCREEN = False
FPS = 60
VSYNC = False
MUTE = False
CAPTION = "Endless Runner"
CLEAR_COLOR = (0.0, 0.0, 0.0, 1.0)

# Arcade physics (pixels, seconds; +y is down)
GRAVITY_Y = 600.0
# Player and obstacles are clamped so their center never sinks below this line
GROUND_Y = 550.0

# Player
PLAYER_START = (100, 450)
PLAYER_SIZE = (50, 100)
PLAYER_RUN_SPEED = 160
JUMP_VELOCITY = -300
GAME_OVER_TINT = 0xFF0000

# Obstacles
OBSTACLE_START = (800, 500)
OBSTACLE_SIZE = (50, 100)
OBSTACLE_START_SPEED = -200
# Subtracted every SPEED_UP_INTERVAL_MS (more negative = faster leftward)
OBSTACLE_SPEED_STEP = 75
SPEED_UP_INTERVAL_MS = 2500
SPAWN_DELAY_MIN_MS = 1000
SPAWN_DELAY_MAX_MS = 3000

# Scrolling backdrops: (center, size) in screen pixels
BACKGROUND_RECT = ((400, 300), (800, 600))
FOREGROUND_RECT = ((400, 550), (800, 100))
BACKGROUND_SCROLL = 0.5
FOREGROUND_SCROLL = 1.0

# Invisible static ground; its top edge sits on the world floor
BARRIER_CENTER = (400, 725)
BARRIER_SIZE = (800, 250)

# Score readout
SCORE_POS = (16, 16)
SCORE_FONT_SIZE = 32
SCORE_FILL = "#fff"

# Longest frame the physics will integrate in one step (seconds)
MAX_FRAME_DT = 0.05
