"""Main application window with docked panel layout."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QDockWidget,
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from ..config.defaults import BAR_VIEW_HEIGHT, BAR_VIEW_WIDTH, build_warmup_template
from ..core.session import EditorSession
from .panels.command_panel import CommandPanel
from .panels.gcode_panel import GCodeDialog
from .panels.program_panel import ProgramPanel
from .timeline_plot import TimelinePlot

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level application window.

    Layout
    ------
    Left dock:  Program -> Commands panels (stacked)
    Center:     Time/RPM plot and the Generate G-code button

    The window owns no program state of its own.  Every panel writes
    through the EditorSession and everything is redrawn from it after
    each change.
    """

    def __init__(self, session: EditorSession | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Spindle Warm-up")
        self.resize(1280, 800)

        self._session = session or EditorSession()

        self._setup_ui()
        self._connect_signals()
        self._on_session_changed(self._session)

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _setup_ui(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)
        self._plot = TimelinePlot(central)
        layout.addWidget(self._plot)
        controls = QHBoxLayout()
        self._generate_btn = QPushButton("Generate G-code")
        self._bar_view = QCheckBox("Bar view")
        controls.addWidget(self._generate_btn)
        controls.addWidget(self._bar_view)
        controls.addStretch()
        layout.addLayout(controls)
        self.setCentralWidget(central)

        self._program_panel = ProgramPanel(self._session.title, self._session.max_rpm)
        self._command_panel = CommandPanel(self._session)

        for panel, title in [
            (self._program_panel, "Program"),
            (self._command_panel, "Spindle speed commands"),
        ]:
            dock = QDockWidget(title, self)
            dock.setWidget(panel)
            dock.setFeatures(
                QDockWidget.DockWidgetFeature.DockWidgetMovable |
                QDockWidget.DockWidgetFeature.DockWidgetFloatable,
            )
            self.addDockWidget(Qt.DockWidgetArea.LeftDockWidgetArea, dock)

        self._status = QStatusBar()
        self.setStatusBar(self._status)

    def _connect_signals(self) -> None:
        self._session.subscribe(self._on_session_changed)
        self._program_panel.title_changed.connect(self._session.set_title)
        self._program_panel.max_rpm_changed.connect(self._session.set_max_rpm)
        self._program_panel.template_requested.connect(self._on_template)
        self._generate_btn.clicked.connect(self._on_generate)
        self._bar_view.toggled.connect(lambda _checked: self._redraw_plot())

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _on_session_changed(self, session: EditorSession) -> None:
        self._command_panel.refresh()
        self._redraw_plot()
        self._status.showMessage(
            f"{len(session.sequence)} command(s), "
            f"total {session.total_time_label()}"
        )

    def _redraw_plot(self) -> None:
        s = self._session
        if self._bar_view.isChecked():
            self._plot.show_bars(
                s.bars(BAR_VIEW_WIDTH, BAR_VIEW_HEIGHT),
                BAR_VIEW_WIDTH, BAR_VIEW_HEIGHT, s.max_rpm,
            )
        else:
            self._plot.show_timeline(s.timeline(), s.axes())

    def _on_template(self) -> None:
        template = build_warmup_template(self._session.max_rpm)
        self._session.load_template(
            (cmd.rpm, cmd.duration_ms) for cmd in template
        )

    def _on_generate(self) -> None:
        gcode = self._session.gcode()
        logger.info("Generated %d G-code lines", gcode.count("\n"))
        GCodeDialog(gcode, parent=self).exec()
