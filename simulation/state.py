from enum import Enum


class NextState(Enum):
    """Pending outcome of a cell, decided before any cell changes."""
    UNSET = "unset"
    ALIVE = "alive"
    DEAD = "dead"


class GenerationReport:
    __slots__ = ("generation", "tick_seconds", "avg_tick_seconds", "render_seconds",
                 "avg_render_seconds", "population", "rendering")

    def __init__(self, generation, tick_seconds, avg_tick_seconds, render_seconds, avg_render_seconds,
                 population, rendering):
        self.generation = generation
        self.tick_seconds = tick_seconds
        self.avg_tick_seconds = avg_tick_seconds
        self.render_seconds = render_seconds
        self.avg_render_seconds = avg_render_seconds
        self.population = population
        self.rendering = rendering

    def to_dict(self):
        # rendering is left out: records stay one short line each
        return {
            "generation": self.generation,
            "tick_s": self.tick_seconds,
            "avg_tick_s": self.avg_tick_seconds,
            "render_s": self.render_seconds,
            "avg_render_s": self.avg_render_seconds,
            "population": self.population,
        }
