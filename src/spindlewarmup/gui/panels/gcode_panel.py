"""Read-only G-code preview dialog."""

from __future__ import annotations

from PyQt6.QtGui import QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
)


class GCodeDialog(QDialog):
    """Shows the generated program with a copy-to-clipboard button."""

    def __init__(self, gcode: str, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Generated G-Code")
        self.resize(440, 480)

        layout = QVBoxLayout(self)
        line_count = gcode.count("\n")
        layout.addWidget(QLabel(f"{line_count} lines"))

        self._text = QPlainTextEdit()
        self._text.setReadOnly(True)
        mono = QFont("Courier New", 9)
        mono.setFixedPitch(True)
        self._text.setFont(mono)
        self._text.setPlainText(gcode)
        layout.addWidget(self._text)

        btn_layout = QHBoxLayout()
        copy_btn = QPushButton("Copy")
        copy_btn.clicked.connect(self._on_copy)
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        btn_layout.addStretch()
        btn_layout.addWidget(copy_btn)
        btn_layout.addWidget(close_btn)
        layout.addLayout(btn_layout)

        self._gcode = gcode

    def _on_copy(self) -> None:
        QGuiApplication.clipboard().setText(self._gcode)
