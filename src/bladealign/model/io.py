"""
Blade Loader
Reads the measured point clouds of a blade from a JSON file.

Expected layout: a top-level array with one object per span station, each
holding the clouds "cx", "cv", "le" and "re" as arrays of [x, y, z] triples.
"""
import json
import logging
import os

from bladealign.model.profiles import Airfoil, Profile

logger = logging.getLogger(__name__)


def load_blade_json(filepath: str) -> Airfoil:
    """
    Load an Airfoil from a JSON file.

    Args:
        filepath: Path to the JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or does not have the
            expected layout.

    Returns:
        The profiles in file order.
    """
    logger.info(f"Loading blade from: {filepath}")
    if not os.path.exists(filepath):
        msg = f"Blade file not found: {filepath}"
        logger.error(msg)
        raise FileNotFoundError(msg)

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"JSON parse error in '{filepath}': {e}")
        raise ValueError(f"JSON parse error: {e}") from e

    if not isinstance(data, list):
        msg = "Top-level JSON must be an array"
        logger.error(msg)
        raise ValueError(msg)

    profiles = []
    for i, entry in enumerate(data):
        if not isinstance(entry, dict):
            msg = f"Profile {i} must be a JSON object, got {type(entry).__name__}."
            logger.error(msg)
            raise ValueError(msg)
        try:
            profiles.append(Profile.from_dict(entry))
        except (ValueError, TypeError) as e:
            logger.exception(f"Failed to read profile {i}: {e}")
            raise ValueError(f"Profile {i}: {e}") from e

    logger.info(f"Loaded profiles: {len(profiles)}")
    return tuple(profiles)
