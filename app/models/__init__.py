from .state_slot import StateSlot

__all__ = [
    "StateSlot",
]
