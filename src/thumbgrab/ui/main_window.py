"""Main application window."""

import logging
import threading
import tkinter as tk
from tkinter import filedialog
from typing import Dict, List, Optional, Tuple

import customtkinter as ctk

from ..core import (
    CardModel,
    Feedback,
    LANGUAGES,
    RenderModel,
    ResultSet,
    ThumbnailDownloader,
    ThumbnailProber,
    ThumbnailSession,
    Translator,
    project,
)
from ..utils import Config, copy_text, log_error
from ..version import __version__
from .components import COLORS, TkScheduler, make_fonts
from .thumbnail_card import ThumbnailCard

logger = logging.getLogger(__name__)

GRID_COLUMNS = 2


class ThumbGrabApp(ctk.CTk):
    """Main application window for ThumbGrab."""

    def __init__(self, config: Optional[Config] = None):
        super().__init__()
        self.config = config or Config()
        self.translator = Translator(self.config.language)

        self.title(f"{self.translator.get('siteTitle')} - ThumbGrab v{__version__}")
        self.geometry("1000x800")
        self.minsize(760, 600)
        ctk.set_appearance_mode(self.config.appearance_mode)
        ctk.set_default_color_theme("blue")
        self.configure(fg_color=COLORS["background"])

        self.fonts = make_fonts()

        # Widgets whose text follows the UI language: (widget, key, option)
        self._i18n_widgets: List[Tuple[tk.Misc, str, str]] = []
        self._feedback_job = None
        self._current_feedback: Optional[Feedback] = None

        # Data
        self.cards: Dict[str, ThumbnailCard] = {}
        self._rendered_generation: Optional[int] = None
        self.prober = ThumbnailProber(timeout=self.config.probe_timeout)
        self.downloader = ThumbnailDownloader()
        self.session = ThumbnailSession(
            self.prober,
            TkScheduler(self),
            grace_ms=self.config.grace_delay_ms,
            settle_ms=self.config.settle_delay_ms,
            on_update=self.on_session_update,
            on_feedback=self.show_feedback,
        )

        # Main Layout
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self.create_header()
        self.create_main_content()
        self.create_footer()
        self.create_feedback_banner()

        self.protocol("WM_DELETE_WINDOW", self.on_close)
        logger.info(f"Window ready (language={self.translator.language}, "
                    f"appearance={self.config.appearance_mode})")

    # Translation helpers
    def _t(self, widget, key: str, option: str = "text"):
        """Set a translated option on a widget and remember it for language changes."""
        self._i18n_widgets.append((widget, key, option))
        widget.configure(**{option: self.translator.get(key)})
        return widget

    def apply_language(self):
        """Re-translate every registered widget and the current cards."""
        for widget, key, option in self._i18n_widgets:
            if widget.winfo_exists():
                widget.configure(**{option: self.translator.get(key)})
        self.title(f"{self.translator.get('siteTitle')} - ThumbGrab v{__version__}")
        for card in self.cards.values():
            card.retranslate()
        if self._current_feedback is not None:
            self.feedback_label.configure(text=self.translator.get(self._current_feedback.key))

    # Layout
    def create_header(self):
        header = ctk.CTkFrame(self, height=64, corner_radius=0, fg_color=COLORS["header_bg"],
                              border_width=1, border_color=COLORS["border"])
        header.grid(row=0, column=0, sticky="ew")
        header.pack_propagate(False)

        brand = ctk.CTkFrame(header, fg_color="transparent")
        brand.pack(side="left", padx=30)
        ctk.CTkLabel(brand, text="ThumbGrab", font=self.fonts["h2"],
                     text_color=COLORS["primary"]).pack(side="left")

        actions = ctk.CTkFrame(header, fg_color="transparent")
        actions.pack(side="right", padx=30)

        self._t(ctk.CTkLabel(actions, font=self.fonts["small"], text_color=COLORS["text_secondary"]),
                "languageLabel").pack(side="left", padx=(0, 6))
        self.language_var = ctk.StringVar(value=LANGUAGES[self.translator.language])
        ctk.CTkOptionMenu(actions, values=list(LANGUAGES.values()), variable=self.language_var,
                          width=120, font=self.fonts["small"], fg_color=COLORS["primary"],
                          button_color=COLORS["primary"], button_hover_color=COLORS["primary_hover"],
                          command=self.change_language).pack(side="left", padx=6)

        self._t(ctk.CTkButton(actions, width=110, height=36, corner_radius=10, font=self.fonts["small"],
                              fg_color="transparent", border_width=1, border_color=COLORS["border"],
                              text_color=COLORS["text_primary"], hover_color=COLORS["border"],
                              command=self.choose_folder),
                "saveFolderBtn").pack(side="left", padx=6)

        self.theme_btn = ctk.CTkButton(actions, text=self._theme_icon(), width=40, height=36,
                                       corner_radius=10, fg_color="transparent",
                                       text_color=COLORS["text_primary"], hover_color=COLORS["border"],
                                       command=self.toggle_theme)
        self.theme_btn.pack(side="left", padx=6)

    def create_main_content(self):
        self.main_view = ctk.CTkScrollableFrame(self, fg_color=COLORS["background"], corner_radius=0)
        self.main_view.grid(row=1, column=0, sticky="nsew")
        self.main_view.grid_columnconfigure(0, weight=1)

        content = ctk.CTkFrame(self.main_view, fg_color="transparent")
        content.grid(row=0, column=0, pady=40, padx=20)

        # 1. Hero
        hero = ctk.CTkFrame(content, fg_color="transparent")
        hero.pack(fill="x", pady=(0, 30))
        self._t(ctk.CTkLabel(hero, font=self.fonts["h1"], text_color=COLORS["text_primary"]),
                "mainHeadline").pack()
        self._t(ctk.CTkLabel(hero, font=self.fonts["body"], text_color=COLORS["text_secondary"],
                             wraplength=760, justify="center"),
                "introParagraph").pack(pady=15)

        # 2. Input card
        card = ctk.CTkFrame(content, fg_color=COLORS["card"], corner_radius=20,
                            border_width=2, border_color=COLORS["border"])
        card.pack(fill="x", padx=10)

        row = ctk.CTkFrame(card, fg_color="transparent")
        row.pack(fill="x", padx=30, pady=30)

        input_bg = ctk.CTkFrame(row, fg_color=COLORS["header_bg"], border_width=1,
                                border_color=COLORS["border"], corner_radius=12, height=54)
        input_bg.pack(side="left", expand=True, fill="x", padx=(0, 15))
        input_bg.pack_propagate(False)

        ctk.CTkLabel(input_bg, text="🔗", font=self.fonts["body"],
                     text_color=COLORS["text_secondary"]).pack(side="left", padx=15)

        self.url_entry = ctk.CTkEntry(input_bg, border_width=0, fg_color="transparent",
                                      font=self.fonts["body"], width=460)
        self._t(self.url_entry, "urlPlaceholder", "placeholder_text")
        self.url_entry.pack(side="left", expand=True, fill="both", pady=2)
        self.url_entry.bind('<Return>', lambda e: self.fetch_thumbnails())

        ctk.CTkButton(input_bg, text="📋", width=32, height=32, corner_radius=8,
                      fg_color="transparent", text_color=COLORS["text_secondary"],
                      hover_color=COLORS["border"], command=self.paste_clip).pack(side="right", padx=8)

        self.get_btn = ctk.CTkButton(row, font=self.fonts["h2"], height=56, width=200,
                                     fg_color=COLORS["primary"], hover_color=COLORS["primary_hover"],
                                     corner_radius=12, command=self.fetch_thumbnails)
        self._t(self.get_btn, "getThumbnailsBtn")
        self.get_btn.pack(side="right")

        # 3. Results, hidden until a URL is recognised
        self.results_section = ctk.CTkFrame(content, fg_color="transparent")
        self._t(ctk.CTkLabel(self.results_section, font=self.fonts["h2"],
                             text_color=COLORS["text_primary"]),
                "resultsTitle").pack(anchor="w", padx=10, pady=(30, 10))
        self.results_grid = ctk.CTkFrame(self.results_section, fg_color="transparent")
        self.results_grid.pack(fill="x")
        for col in range(GRID_COLUMNS):
            self.results_grid.grid_columnconfigure(col, weight=1, uniform="col")

    def create_footer(self):
        f = ctk.CTkFrame(self, height=40, corner_radius=0, fg_color="transparent")
        f.grid(row=2, column=0, sticky="ew")
        self._t(ctk.CTkLabel(f, font=self.fonts["small"], text_color=COLORS["text_secondary"]),
                "siteTitle").pack(side="left", padx=40, pady=6)
        ctk.CTkLabel(f, text="img.youtube.com", font=self.fonts["small"],
                     text_color=COLORS["text_secondary"]).pack(side="right", padx=40, pady=6)

    def create_feedback_banner(self):
        self.feedback_label = ctk.CTkLabel(self, text="", font=self.fonts["body"], corner_radius=10,
                                           fg_color=COLORS["primary"], text_color="#ffffff",
                                           height=40, padx=20)

    # Feedback
    def show_feedback(self, feedback: Feedback):
        """Show a transient message for its configured duration."""
        logger.info(f"Feedback: {feedback.name}")
        if self._feedback_job is not None:
            self.after_cancel(self._feedback_job)

        error = feedback in (Feedback.INVALID_URL, Feedback.LOAD_ERROR, Feedback.COPY_FAIL,
                             Feedback.SAVE_FAIL, Feedback.UNEXPECTED)
        self._current_feedback = feedback
        self.feedback_label.configure(
            text=self.translator.get(feedback.key),
            fg_color=COLORS["accent_error"] if error else COLORS["primary"],
        )
        self.feedback_label.place(relx=0.5, y=80, anchor="n")
        self.feedback_label.lift()
        self._feedback_job = self.after(feedback.duration_ms, self.hide_feedback)

    def hide_feedback(self):
        self._feedback_job = None
        self._current_feedback = None
        self.feedback_label.place_forget()

    def _report_unexpected(self, context: str, exc: Exception):
        logger.error(f"{context}: {exc}", exc_info=True)
        log_error(context, exc)
        self.show_feedback(Feedback.UNEXPECTED)

    # Actions
    def fetch_thumbnails(self):
        """Submit the pasted URL."""
        try:
            result_set = self.session.submit(self.url_entry.get())
            if result_set is not None:
                # Clear input after processing
                self.url_entry.delete(0, "end")
        except Exception as e:
            self._report_unexpected("Error while fetching thumbnails", e)

    def paste_clip(self):
        """Paste URL from clipboard into the URL entry field."""
        try:
            clipboard_text = self.clipboard_get()
        except tk.TclError:
            return
        if clipboard_text:
            self.url_entry.delete(0, "end")
            self.url_entry.insert(0, clipboard_text.strip())

    def _tk_copy(self, text: str):
        self.clipboard_clear()
        self.clipboard_append(text)
        self.update()

    def copy_url(self, card: CardModel):
        if copy_text(card.url, primary=self._tk_copy):
            self.show_feedback(Feedback.COPIED)
        else:
            self.show_feedback(Feedback.COPY_FAIL)

    def download_thumbnail(self, card: CardModel):
        """Save a thumbnail into the download folder in the background."""
        output_path = self.config.download_path / card.filename
        threading.Thread(target=self._save_worker, args=(card.url, output_path), daemon=True).start()

    def _save_worker(self, url, output_path):
        try:
            self.downloader.save(url, output_path)
            self.after(0, lambda: self.show_feedback(Feedback.SAVED))
        except Exception as e:
            logger.error(f"Error saving thumbnail {url}: {e}", exc_info=True)
            self.after(0, lambda: self.show_feedback(Feedback.SAVE_FAIL))

    def change_language(self, display_name: str):
        code = next((c for c, name in LANGUAGES.items() if name == display_name), None)
        if code is None:
            return
        self.translator.language = code
        self.config.set_language(code)
        self.apply_language()

    def choose_folder(self):
        path = filedialog.askdirectory(initialdir=str(self.config.download_path))
        if path:
            self.config.set_download_path(path)
            logger.info(f"Download folder set to {path}")

    def _theme_icon(self) -> str:
        return "☀" if ctk.get_appearance_mode() == "Dark" else "🌙"

    def toggle_theme(self):
        """Toggle between light and dark theme."""
        new_mode = "Light" if ctk.get_appearance_mode() == "Dark" else "Dark"
        ctk.set_appearance_mode(new_mode)
        self.config.set_appearance_mode(new_mode)
        self.theme_btn.configure(text=self._theme_icon())

    # Rendering
    def on_session_update(self, result_set: Optional[ResultSet]):
        try:
            self.render(project(result_set, self.translator.get))
        except Exception as e:
            self._report_unexpected("Error while rendering results", e)

    def render(self, model: RenderModel):
        if not model.show_results:
            self.clear_results()
            return

        if model.generation != self._rendered_generation:
            self.clear_results()
            self._rendered_generation = model.generation
            for card_model in model.cards:
                self.cards[card_model.resolution.name] = ThumbnailCard(
                    self.results_grid, card_model, self.translator.get, self.fonts,
                    on_download=self.download_thumbnail, on_copy=self.copy_url,
                )
            self.results_section.pack(fill="x", pady=(10, 0))

        index = 0
        for card_model in model.cards:
            card = self.cards[card_model.resolution.name]
            card.update_model(card_model)
            if card_model.visible:
                card.grid(row=index // GRID_COLUMNS, column=index % GRID_COLUMNS,
                          padx=8, pady=8, sticky="nsew")
                index += 1
            else:
                card.grid_remove()

    def clear_results(self):
        for card in self.cards.values():
            card.destroy()
        self.cards = {}
        self._rendered_generation = None
        self.results_section.pack_forget()

    def on_close(self):
        logger.info("Closing window")
        self.session.clear()
        self.downloader.stop()
        self.prober.shutdown()
        self.destroy()
