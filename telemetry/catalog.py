"""
Static reference data: launch display names and per-metric chart settings.

Everything here is plain configuration. The chart-model builder takes these
tables as arguments, so tests can pass synthetic launch ids or axis limits.
"""
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

# =============================================================================
# Launches
# =============================================================================

LAUNCH_NAMES = {
    "S001": "First Wild Ride",
    "S002": "Orbit Firestorm",
    "S003": "Orbit Breakthrough",
    "S004": "Booster Catch Win",
    "S005": "Raptor Burn Success",
    "S006": "Stable Orbit Run",
    "S007": "Avionics Glitch",
    "S008": "Engine Fail Frenzy",
    "S009": "Block 2 Glory",
}


class LaunchCatalog:
    """Ordered mapping of launch id -> human-readable launch name."""

    def __init__(self, names: Optional[Mapping[str, str]] = None):
        self._names: Dict[str, str] = dict(LAUNCH_NAMES if names is None else names)

    def name_for(self, launch_id: Optional[str]) -> Optional[str]:
        if launch_id is None:
            return None
        return self._names.get(launch_id)

    def ids(self) -> list:
        return list(self._names)

    def items(self) -> Iterable[Tuple[str, str]]:
        return self._names.items()

    def default_launch(self) -> Optional[str]:
        """The launch shown first after loading: the last catalog entry."""
        ids = self.ids()
        return ids[-1] if ids else None

    def __contains__(self, launch_id) -> bool:
        return launch_id in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)


# =============================================================================
# Metrics
# =============================================================================

METRIC_LABELS = {
    "thrust": "Thrust (N)",
    "pressure": "Pressure (bar)",
    "temperature": "Temperature (°C)",
    "vibration": "Vibration (g)",
    "heat_shield_temp": "Heat Shield Temp (°C)",
}

# Suggested Y-axis maximum per metric
AXIS_MAX = {
    "thrust": 20000,
    "pressure": 200,
    "temperature": 1000,
    "vibration": 15,
    "heat_shield_temp": 2000,
}

# Order in which a two-metric chart picks its axis maximum
AXIS_MAX_PRIORITY = ("thrust", "pressure", "temperature", "vibration")
AXIS_MAX_FALLBACK = 2000  # heat_shield_temp range

# =============================================================================
# Colors (RGB, rendered with alpha)
# =============================================================================

RED = (255, 99, 132)
TEAL = (75, 192, 192)
YELLOW = (255, 206, 86)
BLUE = (54, 162, 235)
PURPLE = (153, 102, 255)

# (current launch, compared launch) per overview panel
PANEL_COLORS = {
    "thrust": (RED, TEAL),
    "pressure": (TEAL, YELLOW),
    "temperature": (YELLOW, BLUE),
    "vibration": (BLUE, PURPLE),
    "heat_shield_temp": (PURPLE, RED),
}

# Combined and zoomed charts
FOCUS_COLORS = (RED, TEAL)

FILL_ALPHA = 0.2
