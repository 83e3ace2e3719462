"""
Biochar Tracker Design System

Color tokens and dimensions shared by the wizard screens.
"""


class Colors:
    """Color palette."""
    PRIMARY = "#2F7D4F"  # Brand green
    PRIMARY_HOVER = "#276A43"
    PRIMARY_LIGHT = "#E8F3EC"

    BACKGROUND = "#F8F9FA"
    SURFACE = "#FFFFFF"

    TEXT_PRIMARY = "#1F2933"
    TEXT_SECONDARY = "#6C757D"
    TEXT_DISABLED = "#ADB5BD"
    TEXT_ON_PRIMARY = "#FFFFFF"

    BORDER_DEFAULT = "#DEE2E6"
    DIVIDER = "#E9ECEF"

    SUCCESS = "#27AE60"
    WARNING = "#F39C12"
    ERROR = "#E74C3C"


class ButtonDimensions:
    """Footer button sizes."""
    WIDTH = 114
    WIDE_WIDTH = 140
    HEIGHT = 44


class StepperDimensions:
    """Step indicator sizes."""
    INDICATOR_SIZE = 32
    PROGRESS_HEIGHT = 6
