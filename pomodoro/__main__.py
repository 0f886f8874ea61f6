"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import PomodoroWindow

logger = logging.getLogger("pomodoro")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    window = PomodoroWindow()
    window.show()
    logger.info("Pomodoro ready!")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
