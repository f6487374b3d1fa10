from brewtuner.models.catalog import Bean, BrewMethod, Grinder, Roaster
from brewtuner.models.grind_log import GrinderLog, GrindLog
from brewtuner.models.profile import Profile

__all__ = [
    "Bean",
    "BrewMethod",
    "Grinder",
    "GrinderLog",
    "GrindLog",
    "Profile",
    "Roaster",
]
