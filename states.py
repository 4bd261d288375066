# states.py
from enum import Enum

class CurveMode(Enum):
    SINE = 0
    RADIAL = 1

    def next(self):
        members = list(CurveMode)
        return members[(members.index(self) + 1) % len(members)]
