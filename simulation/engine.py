import sys
import time
from config import SimulationConfig
from internal.logging import get_logger
from simulation.state import GenerationReport
from utils.timestamp import format_seconds

CLEAR_SCREEN = "\033[H\033[2J"

class EngineState:
    STOPPED = "stopped"
    RUNNING = "running"

class LifeEngine:
    """Drives a World: tick, render, time both and write the frame out."""

    def __init__(self, world, config=None, output=None, recorder=None):
        self.world = world
        self.config = config or SimulationConfig()
        self.output = output or sys.stdout
        self.recorder = recorder
        self._log = get_logger()
        self._state = EngineState.STOPPED
        self._stop_requested = False
        self.steps = 0
        self.total_tick_seconds = 0.0
        self.total_render_seconds = 0.0

    @property
    def state(self):
        return self._state

    def step(self):
        tick_start = time.perf_counter()
        self.world.tick()
        tick_seconds = time.perf_counter() - tick_start
        self.total_tick_seconds += tick_seconds

        render_start = time.perf_counter()
        rendering = self.world.render()
        render_seconds = time.perf_counter() - render_start
        self.total_render_seconds += render_seconds

        self.steps += 1
        report = GenerationReport(
            self.world.generation,
            tick_seconds,
            self.total_tick_seconds / self.steps,
            render_seconds,
            self.total_render_seconds / self.steps,
            self.world.population,
            rendering,
        )
        self._write(CLEAR_SCREEN + "\n" + format_frame(report) + "\n")
        if self.recorder:
            self.recorder.record("generation", report.to_dict())
        return report

    def run(self, generations=None):
        """Step until ``generations`` steps have run, or forever when None."""
        if generations is None:
            generations = self.config.generations
        tick_interval = self.config.tick_interval
        self._stop_requested = False
        self._state = EngineState.RUNNING
        self._log.info("engine start", interval=tick_interval, generations=generations)
        self._write(self.world.render() + "\n")

        try:
            ran = 0
            while not self._stop_requested and (generations is None or ran < generations):
                self.step()
                ran += 1
                more = generations is None or ran < generations
                if tick_interval > 0 and more and not self._stop_requested:
                    time.sleep(tick_interval)
        finally:
            self._state = EngineState.STOPPED
            self._log.info("engine stop", generation=self.world.generation)
        return self.world.generation

    def stop(self):
        self._stop_requested = True

    def _write(self, text):
        self.output.write(text)
        self.output.flush()


def format_frame(report):
    output = f"#{report.generation}"
    output += f" - World tick took {format_seconds(report.tick_seconds)} ({format_seconds(report.avg_tick_seconds)})"
    output += f" - Rendering took {format_seconds(report.render_seconds)} ({format_seconds(report.avg_render_seconds)})"
    return output + "\n" + report.rendering
