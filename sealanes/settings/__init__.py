"""Router settings profiles for sealanes."""

from .loader import PROFILES_DIR, get_profile_path, list_profiles, load_settings

__all__ = [
    "PROFILES_DIR",
    "get_profile_path",
    "list_profiles",
    "load_settings",
]
