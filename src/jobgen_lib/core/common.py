# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the jobgen library.

This module provides helpers for interpreting operator answers (yes/no
questions, bounded integers, comma-separated lists) and for YAML input.
"""

import re
from functools import lru_cache

import yaml

from .logger import get_logger

logger = get_logger(__name__)

# a non-negative integer written only with digits
_UNSIGNED_INT = re.compile(r"^[0-9]+$")


@lru_cache(maxsize=1)
def load_yaml_loader() -> type[yaml.SafeLoader]:
    """Return the fastest available safe YAML loader (CSafeLoader if possible)."""
    try:
        from yaml import (
            CSafeLoader as SafeLoader,  # ty: ignore[possibly-missing-import]
        )

        logger.debug("Loaded YAML CLoader.")
    except ImportError:
        from yaml import SafeLoader

        logger.debug("Loaded default YAML loader.")

    return SafeLoader


def is_affirmative(answer: str) -> bool:
    """
    Decide whether an answer to a yes/no question is affirmative.

    Only a single 'y' or 'Y' counts as yes. Anything else, including
    an empty answer or a full 'yes', counts as no.

    Args:
        answer (str): The raw answer provided by the operator.

    Returns:
        bool: True if the answer is affirmative, False otherwise.
    """
    return answer.strip() in ("y", "Y")


def parse_bounded_int(raw: str, lower: int, upper: int) -> int | None:
    """
    Parse a non-negative integer and check that it lies within the closed interval.

    Args:
        raw (str): The raw answer provided by the operator.
        lower (int): The smallest accepted value.
        upper (int): The largest accepted value.

    Returns:
        int | None: The parsed value or None if the answer is not a non-negative
        integer or lies outside of [lower, upper].
    """
    raw = raw.strip()
    if not _UNSIGNED_INT.match(raw):
        return None

    value = int(raw)
    if value < lower or value > upper:
        return None

    return value


def split_comma_list(raw: str) -> list[str]:
    """
    Split a comma-separated list into its non-empty, stripped items.

    Args:
        raw (str): The comma-separated string.

    Returns:
        list[str]: Items in their original order.
    """
    return [item.strip() for item in raw.split(",") if item.strip()]


def max_int_in_column(values: list[str]) -> int | None:
    """
    Return the largest integer found in a list of sinfo column values.

    Values such as '64+' or '2(...)' are reduced to their leading digits.
    Values without leading digits are ignored.

    Args:
        values (list[str]): Raw column values.

    Returns:
        int | None: The largest integer or None if no value could be parsed.
    """
    numbers = []
    for value in values:
        if match := re.match(r"^\s*([0-9]+)", value):
            numbers.append(int(match.group(1)))
        else:
            logger.debug(f"Ignoring non-numeric value '{value}'.")

    return max(numbers) if numbers else None
