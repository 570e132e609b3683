"""
Matplotlib canvas widgets for telemetry visualization.
"""
from ui.canvases.launch_chart import LaunchChartCanvas

__all__ = ['LaunchChartCanvas']
