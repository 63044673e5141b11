"""
Colored Life - Headless Entry Point

Usage:
    python -m colored_life [preset] [--size N] [--speed S]
                           [--generations G] [--seed K]

Examples:
    python -m colored_life
    python -m colored_life small
    python -m colored_life classic --speed 20 --generations 100
    python -m colored_life --size 64 --seed 7

Runs the simulation in real time without a window, printing the
population of each colony after every generation.

Use --list to see all available presets.
"""

import sys

from .engine import SimulationEngine
from .presets import PRESET_ORDER, get_preset, list_presets
from .simulator import Simulator


def report(sim):
    stats = sim.engine.stats
    print(f"{sim.status_line()} alive={stats['alive']:5d} "
          f"red={stats['red']:4d} green={stats['green']:4d} "
          f"blue={stats['blue']:4d} orange={stats['orange']:4d}")


def main(argv=None):
    preset = "classic"
    size = None
    speed = None
    generations = 10
    seed = None

    args = sys.argv[1:] if argv is None else list(argv)
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--size" and i + 1 < len(args):
            size = int(args[i + 1])
            i += 2
        elif arg == "--speed" and i + 1 < len(args):
            speed = int(args[i + 1])
            i += 2
        elif arg == "--generations" and i + 1 < len(args):
            generations = int(args[i + 1])
            i += 2
        elif arg == "--seed" and i + 1 < len(args):
            seed = int(args[i + 1])
            i += 2
        elif arg == "--list":
            print("\nAvailable presets:")
            for key, name, desc in list_presets():
                print(f"  {key:10s} {name:14s} {desc}")
            print()
            return 0
        elif arg in ("--help", "-h"):
            print(__doc__)
            return 0
        elif arg in PRESET_ORDER:
            preset = arg
            i += 1
        else:
            print(f"Unknown argument: {arg}")
            print("Use --list to see available presets")
            return 2

    p = get_preset(preset)
    size = size if size is not None else p["size"]
    speed = speed if speed is not None else p["speed"]
    if size < 1:
        print(f"Grid size must be positive, got {size}")
        return 2

    engine = SimulationEngine(size, rng=seed)
    sim = Simulator(engine, speed=speed)

    print("Starting Colored Life")
    print(f"  Preset: {preset}")
    print(f"  Grid: {size}x{size}")
    print(f"  Speed: {sim.speed} gen/s")
    print()

    report(sim)
    try:
        sim.run(generations, on_generation=report)
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
