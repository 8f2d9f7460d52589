WIDTH = 1024
HEIGHT = 768
FPS = 60
BACKGROUND_COLOR = (30, 30, 36)

# Screen pixels per world unit before a level is fitted to the window
WORLD_SCALE = 32
# Margin left around a fitted level, in pixels
VIEW_MARGIN = 48

# Sweep steps run per frame while a computation is auto-playing
STEPS_PER_TICK = 1
