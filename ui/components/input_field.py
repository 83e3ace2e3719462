# -*- coding: utf-8 -*-
"""
Input Field Components - Form inputs used by wizard steps.

- InputField: styled line edit with default/error variants
- NumberField: InputField accepting decimals, blank allowed
- DateField: date picker that can also be blank
"""

from typing import Optional

from PyQt5.QtWidgets import QDateEdit, QLineEdit
from PyQt5.QtCore import QDate
from PyQt5.QtGui import QDoubleValidator

from app.config import Config
from ui.design_system import Colors
from ui.font_utils import create_font, FontManager

_BORDERS = {
    "default": Colors.BORDER_DEFAULT,
    "error": Colors.ERROR,
}


class InputField(QLineEdit):
    """
    Input field with wizard styling.

    Usage:
        field = InputField(placeholder="e.g., Warehouse A")
        field.set_error()
    """

    def __init__(self, placeholder: str = "", variant: str = "default", parent=None):
        super().__init__(parent)
        self.variant = variant
        if placeholder:
            self.setPlaceholderText(placeholder)
        self.setFont(create_font(size=FontManager.SIZE_BODY))
        self._apply_variant()

    def _apply_variant(self):
        border = _BORDERS.get(self.variant, Colors.BORDER_DEFAULT)
        self.setStyleSheet(f"""
            QLineEdit {{
                background-color: {Colors.SURFACE};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 6px 10px;
            }}
        """)

    def set_variant(self, variant: str):
        self.variant = variant
        self._apply_variant()

    def set_error(self):
        self.set_variant("error")

    def set_default(self):
        self.set_variant("default")


class NumberField(InputField):
    """Decimal input; blank means no value."""

    def __init__(self, placeholder: str = "", minimum: float = -1e9,
                 maximum: float = 1e9, decimals: int = 2, parent=None):
        super().__init__(placeholder=placeholder, parent=parent)
        validator = QDoubleValidator(minimum, maximum, decimals, self)
        validator.setNotation(QDoubleValidator.StandardNotation)
        self.setValidator(validator)

    def number(self) -> Optional[float]:
        text = self.text().strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None

    def set_number(self, value):
        if value is None or value == "":
            self.clear()
        else:
            self.setText(f"{float(value):g}")


class DateField(QDateEdit):
    """
    Date picker that can be left blank.

    The minimum date stands for "no date" and is displayed as empty text.
    Values are exchanged as ISO strings (Config.QT_DATE_FORMAT).
    """

    BLANK_DATE = QDate(1900, 1, 1)

    def __init__(self, allow_blank: bool = True, parent=None):
        super().__init__(parent)
        self.allow_blank = allow_blank
        self.setCalendarPopup(True)
        self.setDisplayFormat(Config.QT_DATE_FORMAT)
        self.setFont(create_font(size=FontManager.SIZE_BODY))

        if allow_blank:
            self.setMinimumDate(self.BLANK_DATE)
            self.setSpecialValueText(" ")
            self.setDate(self.BLANK_DATE)
        else:
            self.setDate(QDate.currentDate())

    def is_blank(self) -> bool:
        return self.allow_blank and self.date() == self.BLANK_DATE

    def date_text(self) -> Optional[str]:
        if self.is_blank():
            return None
        return self.date().toString(Config.QT_DATE_FORMAT)

    def set_date_text(self, value: Optional[str]):
        if not value:
            self.setDate(self.BLANK_DATE if self.allow_blank else QDate.currentDate())
            return

        parsed = QDate.fromString(str(value)[:10], Config.QT_DATE_FORMAT)
        if parsed.isValid():
            self.setDate(parsed)
        else:
            self.setDate(self.BLANK_DATE if self.allow_blank else QDate.currentDate())
