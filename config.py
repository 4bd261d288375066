# config.py
SCREEN_W = 1280
SCREEN_H = 720
FPS = 60
WINDOW_TITLE = "Bresenham vs Xiaolin Wu Lines"

# Logging
LOG_LEVEL = "INFO"

# Sine wave (pixels)
WAVE_MARGIN = 50
WAVE_AMPLITUDE = 200.0
WAVE_FREQUENCY = 0.01      # controls wavelength

# Radial fan
RADIAL_RADIUS = 800
RADIAL_ANGLE_STEP = 15     # degrees

# Colors (normalized floats 0..1)
WU_COLOR = (1.0, 0.0, 1.0)
ALIASED_ON_LIGHT = (0.0, 0.0, 0.0)
ALIASED_ON_DARK = (1.0, 1.0, 0.0)
BACKGROUND_LIGHT = (1.0, 1.0, 1.0)
BACKGROUND_DARK = (0.0, 0.0, 0.0)

POINT_SIZE = 1.0
