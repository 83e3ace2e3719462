# -*- coding: utf-8 -*-
"""
Action Button Component - Button with consistent wizard styling.

Variants:
- primary: solid brand green (Next, Complete)
- secondary: gray (Previous, Cancel)
- ghost: text-only (Skip)
"""

from PyQt5.QtWidgets import QPushButton
from PyQt5.QtCore import Qt

from ui.design_system import ButtonDimensions, Colors

_STYLES = {
    "primary": f"""
        QPushButton {{
            background-color: {Colors.PRIMARY};
            color: {Colors.TEXT_ON_PRIMARY};
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: {Colors.PRIMARY_HOVER};
        }}
        QPushButton:disabled {{
            background-color: {Colors.TEXT_DISABLED};
        }}
    """,
    "secondary": f"""
        QPushButton {{
            background-color: {Colors.TEXT_SECONDARY};
            color: white;
            border: none;
            padding: 8px 12px;
            border-radius: 4px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            background-color: #5c636a;
        }}
        QPushButton:disabled {{
            background-color: {Colors.TEXT_DISABLED};
        }}
    """,
    "ghost": f"""
        QPushButton {{
            background-color: transparent;
            color: {Colors.TEXT_SECONDARY};
            border: none;
            padding: 8px 12px;
            font-size: 13px;
        }}
        QPushButton:hover {{
            color: {Colors.TEXT_PRIMARY};
            text-decoration: underline;
        }}
        QPushButton:disabled {{
            color: {Colors.TEXT_DISABLED};
        }}
    """,
}


class ActionButton(QPushButton):
    """
    Reusable action button.

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Skip", variant="ghost", width=90)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = ButtonDimensions.WIDTH,
        height: int = ButtonDimensions.HEIGHT,
        parent=None
    ):
        super().__init__(text, parent)

        if variant not in _STYLES:
            raise ValueError(f"Invalid variant: {variant}. Must be one of {', '.join(_STYLES)}")

        self.variant = variant
        self.setFixedSize(width, height)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(_STYLES[variant])
