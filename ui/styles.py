"""
Styling constants and theme configuration for the dashboard UI.
"""

# =============================================================================
# Color Palette
# =============================================================================

# Light theme colors
BG_COLOR = "#F3F4F6"          # Main background
PANEL_COLOR = "#FFFFFF"       # Chart panels, inputs
TEXT_COLOR = "#1F2937"        # Main text
TEXT_COLOR_DIM = "#374151"    # Axis labels, footer
BORDER_COLOR = "#D1D5DB"      # Borders
GRID_COLOR = "#E5E7EB"        # Grid lines

# Accent colors
ACCENT_BLUE = "#2563EB"       # Title, buttons
ACCENT_BLUE_HOVER = "#1D4ED8"
ERROR_RED = "#EF4444"         # Fetch error message

# =============================================================================
# PyQt5 Stylesheet
# =============================================================================

LIGHT_STYLESHEET = f"""
    QMainWindow {{
        background-color: {BG_COLOR};
        color: {TEXT_COLOR};
    }}
    QGroupBox {{
        background-color: {PANEL_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 6px;
        margin-top: 8px;
        padding-top: 10px;
        font-weight: bold;
        color: {TEXT_COLOR};
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 8px;
        padding: 0 4px 0 4px;
    }}
    QLabel {{
        color: {TEXT_COLOR};
        font-size: 10pt;
    }}
    QLabel#title {{
        color: {ACCENT_BLUE};
        font-size: 22pt;
        font-weight: bold;
    }}
    QLabel#status {{
        color: {ACCENT_BLUE};
        font-size: 16pt;
    }}
    QLabel#error {{
        color: {ERROR_RED};
        font-size: 12pt;
    }}
    QComboBox {{
        background-color: {PANEL_COLOR};
        border: 1px solid {BORDER_COLOR};
        border-radius: 4px;
        padding: 6px;
        font-size: 11pt;
        color: {TEXT_COLOR};
    }}
    QComboBox::drop-down {{
        border: none;
    }}
    QPushButton {{
        background-color: {ACCENT_BLUE};
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 6px 12px;
        font-weight: bold;
    }}
    QPushButton:hover {{
        background-color: {ACCENT_BLUE_HOVER};
    }}
"""
