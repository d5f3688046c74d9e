# fireworks/celebration.py
"""
Glue between the game relay and the fireworks engine.

The relay announces game events by name; the race finishing starts the show,
a reset back to the lobby stops it.  Everything else is ignored.
"""
from fireworks.sim import FireworksSim

GAME_OVER  = "game_over"
RESET_GAME = "reset_game"


class Celebration:
    def __init__(self, sim: FireworksSim):
        self.sim = sim
        self._actions = {
            GAME_OVER:  sim.start,
            RESET_GAME: sim.stop,
        }

    @property
    def running(self):
        return self.sim.active

    def handle(self, event):
        """Dispatch one relay event; returns True when it was acted on."""
        action = self._actions.get(event)
        if action is None:
            return False
        action()
        return True


def on_event(sim: FireworksSim):
    """
    Callback factory for relays that emit ``(event, payload)`` pairs:
        relay.subscribe(on_event(sim))
    Only the event name matters; the payload (final score etc.) is ignored.
    """
    celebration = Celebration(sim)
    def cb(event, payload=None):
        return celebration.handle(event)
    return cb
