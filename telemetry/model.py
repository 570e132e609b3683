# telemetry/model.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

METRICS = ("thrust", "pressure", "temperature", "vibration", "heat_shield_temp")


@dataclass
class TelemetrySample:
    launch_id: str
    timestamp: str         # raw string, never parsed as a date
    thrust: float          # N
    pressure: float        # bar
    temperature: float     # °C
    vibration: float       # g
    heat_shield_temp: float  # °C
    stage: str

    @property
    def time_label(self) -> str:
        return self.timestamp[-8:]

    @property
    def label(self) -> str:
        return f"{self.time_label} ({self.stage})"

    @property
    def aggregate_label(self) -> str:
        return f"{self.launch_id} - {self.label}"

    def metric(self, name: str) -> float:
        if name not in METRICS:
            raise KeyError(f"Unknown metric '{name}'")
        return getattr(self, name)


@dataclass
class LaunchSeries:
    """
    Index-aligned label and metric sequences for one launch (or for all rows).

    Every list always has the same length; rows keep the order in which
    they appeared in the CSV file.
    """

    labels: List[str] = field(default_factory=list)
    thrust: List[float] = field(default_factory=list)
    pressure: List[float] = field(default_factory=list)
    temperature: List[float] = field(default_factory=list)
    vibration: List[float] = field(default_factory=list)
    heat_shield_temp: List[float] = field(default_factory=list)

    def append(self, label: str, sample: TelemetrySample) -> None:
        self.labels.append(label)
        for name in METRICS:
            getattr(self, name).append(sample.metric(name))

    def values(self, metric: str) -> List[float]:
        if metric not in METRICS:
            raise KeyError(f"Unknown metric '{metric}'")
        return getattr(self, metric)

    def __len__(self) -> int:
        return len(self.labels)


# Same structure; labels carry the launch id prefix.
AggregateSeries = LaunchSeries


@dataclass
class TelemetryData:
    """
    Parsed telemetry for one session. Built once by the parser and only read
    afterwards.
    """

    aggregate: LaunchSeries
    launches: Dict[str, LaunchSeries]
    coerced_cells: int = 0

    @property
    def row_count(self) -> int:
        return len(self.aggregate)

    def launch_ids(self) -> List[str]:
        return list(self.launches)

    def series_for(self, launch_id: str) -> Optional[LaunchSeries]:
        return self.launches.get(launch_id)
