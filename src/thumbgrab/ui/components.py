"""Shared UI constants and the Tk-backed scheduler."""

import logging
import tkinter as tk

import customtkinter as ctk

logger = logging.getLogger(__name__)

# Theme colors as (light, dark) tuples
COLORS = {
    "primary": "#137fec",
    "primary_hover": "#0d6bc4",
    "background": ("#f6f7f8", "#101922"),
    "header_bg": ("#ffffff", "#101922"),
    "card": ("#ffffff", "#1e293b"),
    "border": ("#e5e7eb", "#1e293b"),
    "text_primary": ("#111827", "#ffffff"),
    "text_secondary": ("#6b7280", "#94a3b8"),
    "thumb_bg": ("#e5e7eb", "#0f172a"),
    "accent_green": "#22c55e",
    "accent_error": "#ef4444",
}


def make_fonts() -> dict:
    """Standardized fonts - Helvetica system font."""
    return {
        "h1": ctk.CTkFont(family="Helvetica", size=36, weight="bold"),
        "h2": ctk.CTkFont(family="Helvetica", size=18, weight="bold"),
        "body": ctk.CTkFont(family="Helvetica", size=15),
        "small": ctk.CTkFont(family="Helvetica", size=13),
        "caps": ctk.CTkFont(family="Helvetica", size=11, weight="bold"),
    }


class TkScheduler:
    """Runs session callbacks on the Tk main loop via ``after``."""

    def __init__(self, widget: tk.Misc):
        self.widget = widget

    def call_soon(self, fn):
        return self.call_later(0, fn)

    def call_later(self, delay_ms: int, fn):
        try:
            return self.widget.after(delay_ms, fn)
        except (RuntimeError, tk.TclError) as e:
            # Window already destroyed
            logger.debug(f"Dropping scheduled callback: {e}")
            return None

    def cancel(self, handle):
        if handle is None:
            return
        try:
            self.widget.after_cancel(handle)
        except (RuntimeError, tk.TclError):
            pass
