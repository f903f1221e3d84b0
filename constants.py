# constants.py

"""
Application Constants

This module defines static configuration values for the application's framework.
These are not expected to change between simulation runs. Tunable simulation
parameters live in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate used when the display paces frames itself (vsync). 0 = no cap.
REFRESH_FPS = 0

# Window Title
TITLE = "Fireworks"

# Name of the dedicated application logger
LOGGER_NAME = "fireworks"

# Particle footprint
PARTICLE_WIDTH = 3  # Pixels
PARTICLE_HEIGHT = 3  # Pixels

# Throttled tick summary in the animation loop
LOG_INTERVAL = 500  # Ticks
