"""
PyQt5 user interface for the Starship test analyzer.
"""
