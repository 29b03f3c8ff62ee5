"""Program title and spindle parameters panel."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLineEdit,
    QPushButton,
    QWidget,
)

from ...config.defaults import TITLE_PLACEHOLDER
from ...config.spindle_profiles import list_profiles
from ...core.units import parse_int


class ProgramPanel(QWidget):
    """Panel for the program title, max RPM and spindle preset."""

    title_changed = pyqtSignal(str)
    max_rpm_changed = pyqtSignal(object)   # int, or NaN for bad input
    template_requested = pyqtSignal()

    def __init__(self, title: str, max_rpm: int, parent=None):
        super().__init__(parent)
        layout = QFormLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        self._title = QLineEdit(title)
        self._title.setPlaceholderText(TITLE_PLACEHOLDER)
        self._title.textChanged.connect(self.title_changed.emit)
        layout.addRow("Title:", self._title)

        # Preset selector only prefills the max RPM field
        self._preset = QComboBox()
        self._preset.addItem("Custom", userData=None)
        for profile in list_profiles():
            self._preset.addItem(str(profile), userData=profile)
        self._preset.currentIndexChanged.connect(self._on_preset)
        layout.addRow("Spindle:", self._preset)

        self._max_rpm = QLineEdit(str(max_rpm))
        self._max_rpm.textEdited.connect(self._on_max_rpm)
        layout.addRow("Max. RPM:", self._max_rpm)

        self._template_btn = QPushButton("Append warm-up template")
        self._template_btn.clicked.connect(self.template_requested.emit)
        layout.addRow(self._template_btn)

    def _on_preset(self, index: int) -> None:
        profile = self._preset.itemData(index)
        if profile is None:
            return
        self._max_rpm.setText(str(profile.max_rpm))
        self.max_rpm_changed.emit(profile.max_rpm)

    def _on_max_rpm(self, text: str) -> None:
        # A typed value no longer matches any preset
        self._preset.setCurrentIndex(0)
        self.max_rpm_changed.emit(parse_int(text))
