"""
Telemetry loading, selection state and chart models for the Starship test analyzer.
"""
