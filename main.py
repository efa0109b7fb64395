# main.py
"""
Main entry point for the Snowfall scene.

This script orchestrates the entire scene lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Sets up the display, the scheduler and the snow field.
4. Runs the Pygame event loop; the timer drives the frames.
5. Handles clean shutdown.
"""
import logging
from utils import setup_logging, load_config, validate_config
import numpy as np
import cProfile
import pstats
import io

def main():
    """
    The main function to run the scene.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config('config.json')
    except Exception as e:
        print(f"FATAL: Could not load config.json. Error: {e}")
        return

    setup_logging(config)
    validate_config(config)

    logging.info("--- Snowfall Starting ---")

    sim_params = config.get('simulation_parameters', {})
    scene_params = config.get('scene', {})
    run_params = config.get('run_control', {})
    vis_params = config.get('visualization', {})

    import pygame
    from constants import FPS
    from scene import SnowScene
    from simulation import SnowField
    from visualization import PygameGridSurface, PygameScheduler

    # All randomness is controlled by a single master seed.
    rng = np.random.default_rng(sim_params.get('seed'))

    # --- Component Initialization ---
    surface = PygameGridSurface(vis_params)
    scheduler = PygameScheduler()
    field = SnowField(sim_params, rng)
    scene = SnowScene(
        field, surface, scheduler, scene_params,
        log_throttle=run_params.get('log_throttle_steps', 100)
    )

    max_frames = run_params.get('max_frames', 0)
    profiler = cProfile.Profile() if run_params.get('profile', False) else None
    clock = pygame.time.Clock()

    if profiler:
        profiler.enable()
    try:
        scene.start(manual=scene_params.get('manual', False))
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    logging.info("Quit event received. Shutting down.")
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    logging.info("ESC key pressed. Shutting down.")
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    scene.step()
                elif event.type == pygame.VIDEORESIZE:
                    surface.handle_resize(event.w, event.h)
                else:
                    scheduler.dispatch(event)

            if max_frames and field.frame >= max_frames:
                logging.info(f"Reached max_frames ({max_frames}). Stopping.")
                running = False

            surface.render()
            clock.tick(FPS)
    finally:
        # The timer must never fire against a closed display.
        scene.stop()
        scheduler.cancel_all()
        surface.close()
        if profiler:
            profiler.disable()

    logging.info(f"Scene finished after {field.frame} frames, {field.landed} flakes landed.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Snowfall Shutting Down ---")


if __name__ == "__main__":
    main()
