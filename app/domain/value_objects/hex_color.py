"""Hex colour format check for assignee colours."""

import re

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_valid_hex_color(value: object) -> bool:
    """True for exactly ``#RRGGBB`` (case-insensitive), nothing else."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.fullmatch(value) is not None
