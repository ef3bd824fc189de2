"""Main entry point for ThumbGrab application."""

import sys
import traceback
import logging

from .ui import ThumbGrabApp
from .utils import log_error
from .version import __version__

# Setup logging to console
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)
# Pillow and urllib3 are chatty at DEBUG
logging.getLogger("PIL").setLevel(logging.INFO)
logging.getLogger("urllib3").setLevel(logging.INFO)

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    try:
        logger.info(f"Starting ThumbGrab v{__version__}")
        app = ThumbGrabApp()
        logger.info("Application initialized, starting main loop...")
        app.mainloop()
        logger.info("Application closed normally")
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except Exception as e:
        logger.error(f"Fatal error in main(): {e}", exc_info=True)
        log_error("Fatal error in main()", e)
        # Try to show error dialog if Tkinter is partially working
        try:
            import tkinter as tk
            from tkinter import messagebox
            root = tk.Tk()
            root.withdraw()
            error_msg = f"Application failed to start.\n\nError: {e}\n\n{traceback.format_exc()}"
            messagebox.showerror("ThumbGrab Error", error_msg)
        except Exception as dialog_error:
            logger.debug(f"Could not show error dialog: {dialog_error}")
        raise


if __name__ == "__main__":
    main()
