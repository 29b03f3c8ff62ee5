"""QApplication bootstrap for the editor window."""

from __future__ import annotations

import logging
import sys

from .config.defaults import APP_NAME, APP_ORGANIZATION
from .core.session import EditorSession

logger = logging.getLogger(__name__)

GUI_MISSING_MESSAGE = (
    "The editor window needs PyQt6.  Install the 'gui' extras:\n"
    "  pip install spindlewarmup[gui]"
)


def launch_gui(session: EditorSession | None = None) -> int:
    """Open the editor on *session* (a fresh one if omitted).  Returns exit code."""
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        print(GUI_MISSING_MESSAGE, file=sys.stderr)
        return 1

    from .gui.main_window import MainWindow

    # Reuse an application object created by an embedding host
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setOrganizationName(APP_ORGANIZATION)

    window = MainWindow(session)
    window.show()
    logger.debug("Editor window shown")

    return app.exec()
