# main.py

import sys
import json
import logging
import pygame
import constants
import logger_setup
from random_util import RandomUtil
from fireworks_system import FireworksSystem
from fixed_step_loop import FixedStepLoop
from scheduler import open_display

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)

def run_event_loop(loop: FixedStepLoop, scheduler):
    """
    Pumps window events and frame callbacks until the loop is stopped.
    """
    while loop.running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                loop.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                loop.stop()

        if scheduler.pump():
            pygame.display.flip()

def main(config_path='config.json'):
    """
    Main function to initialize and run the fireworks simulation.
    Returns the process exit status.
    """
    # --- Setup ---
    with open(config_path, 'r') as f:
        config = json.load(f)
    logger_setup.setup_logging(config)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = RandomUtil.from_seed(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    try:
        screen, scheduler = open_display((constants.WIDTH, constants.HEIGHT), config['scheduler'])
    except pygame.error as e:
        logger.critical(f"Drawing surface unavailable: {e}. Fireworks will not start.")
        pygame.quit()
        return 1
    pygame.display.set_caption(constants.TITLE)

    fireworks = FireworksSystem(
        config=sim_config,
        rng=rng,
        bounds=screen.get_size()
    )
    loop = FixedStepLoop(fireworks, screen, scheduler, sim_config['time_step'])
    loop.start()

    run_event_loop(loop, scheduler)

    logger.info("Application shutting down.")
    pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
