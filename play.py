"""Game of Life - Entry Point."""

import random

from config import load_config
from internal.logging import FileRecorder, LogLevel, StructuredLogger, get_logger
from simulation.engine import LifeEngine
from simulation.world import World
from utils.crash import configure as configure_crash, install_crash_handler


def main(config=None):
    config = config or load_config()
    configure_crash(config.logging.crash_file)
    install_crash_handler()
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))

    sim = config.simulation
    world = World(sim.world_width, sim.world_height, rng=random.Random(sim.seed),
                  alive_probability=sim.alive_probability)
    with FileRecorder(config.logging.file) as recorder:
        engine = LifeEngine(world, config=sim, recorder=recorder)
        try:
            engine.run()
        except KeyboardInterrupt:
            get_logger().info("interrupted", generation=world.generation)
    return world.generation


if __name__ == "__main__":
    main()
