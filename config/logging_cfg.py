import logging
import sys

_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send application logs to stdout; safe to call on every Streamlit rerun."""
    root = logging.getLogger()
    handler = next((h for h in root.handlers if getattr(h, "_maint_dashboard", False)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._maint_dashboard = True
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
