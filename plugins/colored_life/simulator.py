"""
Simulator - Headless polling loop around a SimulationEngine

Plays the part of a render loop without drawing anything: each poll
asks the engine to try a step and counts the generations that actually
happen. Any front end (terminal, window, test) can drive it.

Usage:
    from colored_life.simulator import Simulator
    sim = Simulator.from_preset("small")
    sim.run(10, on_generation=lambda s: print(s.status_line()))
"""

import time

from .controls import SpeedControl
from .engine import SimulationEngine
from .presets import get_preset


class Simulator:

    def __init__(self, engine, speed=1, sleep=time.sleep):
        """
        Args:
            engine: Engine exposing try_step() and set_update_speed()
            speed: Starting generations per second (clamped to 1..20)
            sleep: Callable taking seconds, used between polls in run()
        """
        self.engine = engine
        self.speed_control = SpeedControl(engine, speed)
        self.sleep = sleep
        # The seeded board is shown as generation 1
        self.generation = 1

    @classmethod
    def from_preset(cls, key, clock=None, rng=None, **kwargs):
        preset = get_preset(key)
        if preset is None:
            raise ValueError(f"Unknown preset: {key}")
        engine = SimulationEngine(preset["size"], clock=clock, rng=rng)
        return cls(engine, speed=preset["speed"], **kwargs)

    @property
    def speed(self):
        return self.speed_control.speed

    def faster(self):
        return self.speed_control.increase()

    def slower(self):
        return self.speed_control.decrease()

    def poll(self):
        """One loop iteration. Returns True if a generation happened."""
        if self.engine.try_step():
            self.generation += 1
            return True
        return False

    def run(self, generations, poll_interval_ms=5, on_generation=None):
        """Poll until `generations` more generations have been computed.

        Args:
            generations: Number of generations to advance
            poll_interval_ms: Sleep between unsuccessful polls
            on_generation: Optional callback(simulator) after each advance
        """
        done = 0
        while done < generations:
            if self.poll():
                done += 1
                if on_generation is not None:
                    on_generation(self)
            else:
                self.sleep(poll_interval_ms / 1000.0)
        return self.generation

    def status_line(self):
        return (f"Generation: {self.generation}. "
                f"Population speed: {self.speed} gen/s.")
