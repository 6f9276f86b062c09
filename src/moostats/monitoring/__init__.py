from .probes import Clock, ProcessUsageProbe, SystemClock, UsageProbe
from .running_best import RunningBest
from .short_statistics import GenerationStats, GroupStats, ShortStatistics
from .sink import StatisticsSink, format_field
from .statistics import Statistics

__all__ = [
    "Clock",
    "UsageProbe",
    "SystemClock",
    "ProcessUsageProbe",
    "RunningBest",
    "Statistics",
    "ShortStatistics",
    "GenerationStats",
    "GroupStats",
    "StatisticsSink",
    "format_field",
]
