"""Widget-level tests, run against Qt's offscreen platform."""

import math
import os

import pytest

pytest.importorskip("PyQt6.QtWidgets")
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtTest import QTest  # noqa: E402
from PyQt6.QtWidgets import QApplication  # noqa: E402

from spindlewarmup.core.session import EditorSession  # noqa: E402
from spindlewarmup.gui.main_window import MainWindow  # noqa: E402
from spindlewarmup.gui.panels.program_panel import ProgramPanel  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    return QApplication.instance() or QApplication([])


class TestProgramPanel:
    def test_choosing_preset_sets_max_rpm(self, qapp):
        panel = ProgramPanel("t", 24000)
        seen = []
        panel.max_rpm_changed.connect(seen.append)
        panel._preset.setCurrentIndex(3)
        assert seen == [10000]
        assert panel._max_rpm.text() == "10000"

    def test_typing_max_rpm_resets_preset_to_custom(self, qapp):
        panel = ProgramPanel("t", 24000)
        panel._preset.setCurrentIndex(1)
        seen = []
        panel.max_rpm_changed.connect(seen.append)
        panel._max_rpm.clear()
        QTest.keyClicks(panel._max_rpm, "15000")
        assert panel._preset.currentIndex() == 0
        assert panel._preset.currentText() == "Custom"
        assert seen[-1] == 15000

    def test_malformed_max_rpm_is_nan(self, qapp):
        panel = ProgramPanel("t", 24000)
        seen = []
        panel.max_rpm_changed.connect(seen.append)
        panel._max_rpm.clear()
        QTest.keyClicks(panel._max_rpm, "x")
        assert math.isnan(seen[-1])


class TestMainWindow:
    def test_bar_view_draws_one_patch_per_command(self, qapp):
        session = EditorSession(max_rpm=24000)
        session.load_template([(0, 5000), (12000, 10000)])
        window = MainWindow(session)
        assert len(window._plot.ax.lines) == 1

        window._bar_view.setChecked(True)
        assert len(window._plot.ax.patches) == 2

        window._bar_view.setChecked(False)
        assert len(window._plot.ax.patches) == 0
        assert len(window._plot.ax.lines) == 1

    def test_session_edits_redraw_bar_view(self, qapp):
        session = EditorSession()
        window = MainWindow(session)
        window._bar_view.setChecked(True)
        session.add_command()
        session.add_command()
        assert len(window._plot.ax.patches) == 2
