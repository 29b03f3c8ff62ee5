"""Spindle speed command list panel."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ...core.command import SpindleCommand
from ...core.session import EditorSession
from ...core.units import DurationUnit, parse_int


def _number_text(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CommandRow(QWidget):
    """One editable command: start time label, RPM, duration, remove."""

    field_edited = pyqtSignal(int, str, object)   # id, field, value
    remove_requested = pyqtSignal(int)

    def __init__(self, command: SpindleCommand, parent=None):
        super().__init__(parent)
        self.command_id = command.id

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        self._start_lbl = QLabel()
        layout.addWidget(self._start_lbl)

        fields = QHBoxLayout()
        self._rpm = QLineEdit(_number_text(command.rpm))
        self._rpm.setPlaceholderText("rpm")
        self._rpm.textEdited.connect(self._on_rpm)
        # The form edits whole seconds; the model keeps milliseconds
        self._duration = QLineEdit(
            _number_text(DurationUnit.SECONDS.from_ms(command.duration_ms))
        )
        self._duration.setPlaceholderText(DurationUnit.SECONDS.label())
        self._duration.textEdited.connect(self._on_duration)
        remove_btn = QPushButton("Remove")
        remove_btn.setStyleSheet("color: #c62828;")
        remove_btn.clicked.connect(lambda: self.remove_requested.emit(self.command_id))

        fields.addWidget(QLabel("RPM:"))
        fields.addWidget(self._rpm)
        fields.addWidget(QLabel(f"Duration ({DurationUnit.SECONDS.label()}):"))
        fields.addWidget(self._duration)
        fields.addWidget(remove_btn)
        layout.addLayout(fields)

    def set_start_label(self, position: int, start_text: str) -> None:
        self._start_lbl.setText(f"{position}. Start time: {start_text}")

    def _on_rpm(self, text: str) -> None:
        self.field_edited.emit(self.command_id, "rpm", parse_int(text))

    def _on_duration(self, text: str) -> None:
        duration_ms = DurationUnit.SECONDS.to_ms(parse_int(text))
        self.field_edited.emit(self.command_id, "duration_ms", duration_ms)


class CommandPanel(QWidget):
    """Scrollable list of CommandRows plus the Add button.

    Rows are rebuilt only when commands are added or removed, so editing a
    field keeps keyboard focus; other refreshes just relabel start times.
    """

    def __init__(self, session: EditorSession, parent=None):
        super().__init__(parent)
        self._session = session
        self._rows: list[CommandRow] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._list_widget = QWidget()
        self._list_layout = QVBoxLayout(self._list_widget)
        self._list_layout.addStretch()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._list_widget)
        layout.addWidget(scroll)

        self._total_lbl = QLabel()
        layout.addWidget(self._total_lbl)

        add_btn = QPushButton("Add")
        add_btn.clicked.connect(self._session.add_command)
        layout.addWidget(add_btn)

        self.refresh()

    def refresh(self) -> None:
        ids = [cmd.id for cmd in self._session.sequence]
        if ids != [row.command_id for row in self._rows]:
            self._rebuild_rows()

        for i, row in enumerate(self._rows):
            row.set_start_label(i + 1, self._session.start_time_label(i))
        self._total_lbl.setText(f"Total: {self._session.total_time_label()}")

    def _rebuild_rows(self) -> None:
        for row in self._rows:
            self._list_layout.removeWidget(row)
            row.deleteLater()
        self._rows = []

        for cmd in self._session.sequence:
            row = CommandRow(cmd)
            row.field_edited.connect(self._session.update_command)
            row.remove_requested.connect(self._session.remove_command)
            # keep the trailing stretch last
            self._list_layout.insertWidget(self._list_layout.count() - 1, row)
            self._rows.append(row)
