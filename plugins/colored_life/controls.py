"""
Speed Control

Keeps the generation rate inside the range the engine supports and
forwards changes to it. Front ends map their own input (arrow keys,
buttons, sliders) onto increase()/decrease()/set().
"""

MIN_SPEED = 1
MAX_SPEED = 20


def clamp_speed(speed):
    return max(MIN_SPEED, min(MAX_SPEED, int(speed)))


class SpeedControl:
    """Generations-per-second setting bound to an engine."""

    def __init__(self, engine, speed=MIN_SPEED):
        self.engine = engine
        self.speed = clamp_speed(speed)
        self.engine.set_update_speed(self.speed)

    def set(self, speed):
        """Clamp and apply a new speed. Returns True if it changed."""
        speed = clamp_speed(speed)
        if speed == self.speed:
            return False
        self.speed = speed
        self.engine.set_update_speed(speed)
        return True

    def increase(self):
        return self.set(self.speed + 1)

    def decrease(self):
        return self.set(self.speed - 1)
