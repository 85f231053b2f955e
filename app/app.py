import logging
import tkinter as tk

from core.config import LOG_FILE, LOG_LEVEL
from core.logging_setup import setup_logging
from controller.task_controller import TaskController
from gui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE or None)

    controller = TaskController()
    try:
        ui = MainWindow(controller)
    except tk.TclError as e:
        # no display, broken Tk install...
        logger.error("Cannot start the UI: %s", e)
        return 1

    controller.start()
    logger.info("Task list ready")
    ui.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
