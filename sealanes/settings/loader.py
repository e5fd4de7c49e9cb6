"""Router settings profiles.

A profile is either the name of a YAML file bundled in ``sealanes/profiles``
(``default``, ``strict``) or the path to a YAML file of the caller's own.
"""

import logging
from pathlib import Path

from ..models.settings import RouterSettings

logger = logging.getLogger(__name__)

# Bundled profiles ship inside the package
PROFILES_DIR = Path(__file__).parent.parent / "profiles"


def list_profiles() -> list[dict[str, str]]:
    """List the bundled settings profiles.

    Returns:
        List of dicts with 'name' and 'description' keys, sorted by name.
        The description is the profile's first comment line.
    """
    profiles = []
    for yaml_file in sorted(PROFILES_DIR.glob("*.yaml")):
        with open(yaml_file) as f:
            first_line = f.readline().strip()
        description = first_line.lstrip("#").strip() if first_line.startswith("#") else ""
        profiles.append({"name": yaml_file.stem, "description": description})
    return profiles


def get_profile_path(profile: str | Path = "default") -> Path:
    """Resolve a profile name or YAML path to a file.

    Raises:
        FileNotFoundError: If neither a bundled profile nor a file matches;
            the message lists the bundled profile names
    """
    path = Path(profile)
    if path.suffix.lower() in (".yaml", ".yml"):
        if path.exists():
            return path
    else:
        bundled = PROFILES_DIR / f"{profile}.yaml"
        if bundled.exists():
            return bundled

    available = ", ".join(p["name"] for p in list_profiles())
    raise FileNotFoundError(
        f"Settings profile '{profile}' not found (bundled profiles: {available})"
    )


def load_settings(
    profile: str | Path = "default",
    override: dict | None = None,
) -> RouterSettings:
    """Load router settings from a profile with optional overrides.

    Args:
        profile: Bundled profile name, or path to a YAML settings file
        override: Field values replacing those of the profile

    Returns:
        Validated RouterSettings

    Raises:
        FileNotFoundError: If the profile cannot be found
        yaml.YAMLError: If the file is not valid YAML
        pydantic.ValidationError: If a value is out of range, a unit is
            unknown, or a field name is misspelled
    """
    path = get_profile_path(profile)
    with open(path) as f:
        settings = RouterSettings.from_yaml(f.read())

    if override:
        settings = settings.merge_override(override)
        logger.debug(f"Applied overrides {sorted(override)} to settings profile '{profile}'")

    logger.debug(
        f"Settings '{path.stem}': radius {settings.search_radius:g} "
        f"{settings.search_radius_units.value}, lengths in {settings.default_units.value}"
    )
    return settings
