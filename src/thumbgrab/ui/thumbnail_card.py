"""Thumbnail result card component."""

import customtkinter as ctk
from customtkinter import CTkImage
from PIL import Image

from ..core import CardModel, ProbeState
from .components import COLORS

THUMB_WIDTH, THUMB_HEIGHT = 320, 180


class ThumbnailCard(ctk.CTkFrame):
    """One resolution: preview, label and the Download / Copy URL buttons."""

    def __init__(self, parent, model: CardModel, translate, fonts: dict,
                 on_download, on_copy):
        super().__init__(parent, fg_color=COLORS["card"], corner_radius=12,
                         border_width=1, border_color=COLORS["border"])
        self.model = model
        self.translate = translate
        self._shown_image = None

        self.thumb = ctk.CTkLabel(self, text="", width=THUMB_WIDTH, height=THUMB_HEIGHT,
                                  fg_color=COLORS["thumb_bg"], corner_radius=8,
                                  font=fonts["body"], text_color=COLORS["text_secondary"])
        self.thumb.pack(padx=12, pady=(12, 8))

        self.res_label = ctk.CTkLabel(self, text=model.label, font=fonts["h2"],
                                      text_color=COLORS["text_primary"])
        self.res_label.pack(pady=(0, 8))

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.pack(pady=(0, 12))

        self.download_btn = ctk.CTkButton(buttons, text="", width=120, height=36,
                                          font=fonts["body"], corner_radius=10,
                                          fg_color=COLORS["primary"], hover_color=COLORS["primary_hover"],
                                          command=lambda: on_download(self.model))
        self.download_btn.pack(side="left", padx=4)

        self.copy_btn = ctk.CTkButton(buttons, text="", width=120, height=36,
                                      font=fonts["body"], corner_radius=10,
                                      fg_color="transparent", border_width=1,
                                      border_color=COLORS["border"], text_color=COLORS["text_primary"],
                                      hover_color=COLORS["border"],
                                      command=lambda: on_copy(self.model))
        self.copy_btn.pack(side="left", padx=4)

        self.update_model(model)

    def update_model(self, model: CardModel):
        """Redraw for a new probe state."""
        self.model = model

        if model.state is ProbeState.LOADED and model.image is not None:
            if self._shown_image is None:
                self._shown_image = self._make_image(model.image)
            self.thumb.configure(image=self._shown_image, text="")
        elif model.broken:
            self.thumb.configure(image=None, text=f"🖼✕\n{self.translate('thumbBroken')}",
                                 text_color=COLORS["accent_error"])
        else:
            self.thumb.configure(image=None, text=f"⏳\n{self.translate('thumbPending')}",
                                 text_color=COLORS["text_secondary"])

        state = "normal" if model.state is ProbeState.LOADED else "disabled"
        self.download_btn.configure(state=state)
        self.retranslate()

    def retranslate(self):
        self.res_label.configure(text=self.translate(self.model.resolution.label_key))
        self.download_btn.configure(text=self.translate("downloadBtn"))
        self.copy_btn.configure(text=self.translate("copyUrlBtn"))
        if self.model.broken and self._shown_image is None:
            self.thumb.configure(text=f"🖼✕\n{self.translate('thumbBroken')}")
        elif self.model.state is ProbeState.PENDING:
            self.thumb.configure(text=f"⏳\n{self.translate('thumbPending')}")

    @staticmethod
    def _make_image(pil_img: Image.Image) -> CTkImage:
        # Fit inside the preview box, keeping the aspect ratio
        ratio = min(THUMB_WIDTH / pil_img.width, THUMB_HEIGHT / pil_img.height)
        size = (max(1, int(pil_img.width * ratio)), max(1, int(pil_img.height * ratio)))
        resized = pil_img.convert("RGB").resize(size, Image.Resampling.LANCZOS)
        return CTkImage(light_image=resized, dark_image=resized, size=size)
