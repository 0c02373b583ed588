from typing import Dict

from app.services.generation import generic, kiosk
from app.services.generation.profiles import Profile

PROFILES: Dict[str, Profile] = {
    generic.PROFILE.name: generic.PROFILE,
    kiosk.PROFILE.name: kiosk.PROFILE,
}


def get_profile(name: str) -> Profile:
    """Look up a generator profile by name (case-insensitive)."""
    try:
        return PROFILES[name.strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown generator profile '{name}'. Available: {', '.join(sorted(PROFILES))}")
