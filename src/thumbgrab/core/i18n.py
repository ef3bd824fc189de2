"""Translation tables and lookup with language fallback."""

import ctypes
import locale
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

# Display names for the language selector
LANGUAGES = {
    "en": "English",
    "ar": "العربية",
    "es": "Español",
}

# Windows reports locales by English name, e.g. "Arabic_Saudi Arabia"
_LANGUAGE_NAMES = {
    "english": "en",
    "arabic": "ar",
    "spanish": "es",
}

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "siteTitle": "YouTube Thumbnail Downloader",
        "modeLabel": "Mode",
        "mainHeadline": "Download YouTube Thumbnails",
        "introParagraph": (
            "Grab any YouTube video's thumbnail in high definition (HD), standard "
            "definition (SD) and the other available sizes. Paste the video link "
            "below and click 'Get Thumbnails'."
        ),
        "urlPlaceholder": "Paste YouTube video URL (e.g., https://www.youtube.com/watch?v=...)",
        "getThumbnailsBtn": "Get Thumbnails",
        "resultsTitle": "Available Thumbnails",
        "downloadBtn": "Download",
        "copyUrlBtn": "Copy URL",
        "saveFolderBtn": "Save Folder",
        "languageLabel": "Language",
        "feedbackCopied": "Image URL copied!",
        "feedbackCopyFail": "Failed to copy URL.",
        "feedbackInvalidUrl": "Invalid YouTube URL format. Please paste the full video URL.",
        "feedbackNoUrl": "Please paste a YouTube URL first.",
        "feedbackLoadError": "Could not load any thumbnails. Video might be private or deleted.",
        "feedbackUnexpectedError": "An unexpected error occurred.",
        "feedbackSaved": "Thumbnail saved!",
        "feedbackSaveFail": "Failed to save thumbnail.",
        "thumbPending": "Loading...",
        "thumbBroken": "Not available",
        "resMaxHd": "Max HD (1280x720)",
        "resSd": "SD (640x480)",
        "resHq": "HQ (480x360)",
        "resMq": "MQ (320x180)",
    },
    "ar": {
        "siteTitle": "تحميل صور يوتيوب المصغرة",
        "modeLabel": "الوضع",
        "mainHeadline": "تحميل صور يوتيوب المصغرة",
        "introParagraph": (
            "احصل على الصورة المصغرة لأي فيديو يوتيوب بدقة عالية (HD) وقياسية (SD) "
            "وبالأحجام الأخرى المتاحة. الصق رابط الفيديو أدناه وانقر على 'جلب الصور المصغرة'."
        ),
        "urlPlaceholder": "الصق رابط فيديو يوتيوب (مثال: https://www.youtube.com/watch?v=...)",
        "getThumbnailsBtn": "جلب الصور المصغرة",
        "resultsTitle": "الصور المصغرة المتاحة",
        "downloadBtn": "تحميل",
        "copyUrlBtn": "نسخ الرابط",
        "saveFolderBtn": "مجلد الحفظ",
        "languageLabel": "اللغة",
        "feedbackCopied": "تم نسخ رابط الصورة!",
        "feedbackCopyFail": "فشل نسخ الرابط.",
        "feedbackInvalidUrl": "تنسيق رابط يوتيوب غير صالح. يرجى لصق رابط الفيديو الكامل.",
        "feedbackNoUrl": "يرجى لصق رابط يوتيوب أولاً.",
        "feedbackLoadError": "تعذر تحميل أي صور مصغرة. قد يكون الفيديو خاصًا أو محذوفًا.",
        "feedbackUnexpectedError": "حدث خطأ غير متوقع.",
        "feedbackSaved": "تم حفظ الصورة المصغرة!",
        "feedbackSaveFail": "فشل حفظ الصورة المصغرة.",
        "thumbPending": "جارٍ التحميل...",
        "thumbBroken": "غير متاحة",
        "resMaxHd": "HD أقصى (1280x720)",
        "resSd": "SD (640x480)",
        "resHq": "HQ (480x360)",
        "resMq": "MQ (320x180)",
    },
    # Partial table, missing keys fall back to English
    "es": {
        "siteTitle": "Descargador de Miniaturas de YouTube",
        "feedbackCopied": "¡URL de imagen copiada!",
        "feedbackCopyFail": "Error al copiar URL.",
        "feedbackInvalidUrl": "Formato de URL de YouTube inválido. Por favor, pega la URL completa del video.",
        "feedbackNoUrl": "Por favor, pega primero una URL de YouTube.",
        "feedbackLoadError": "No se pudieron cargar miniaturas. El video podría ser privado o haber sido eliminado.",
        "feedbackUnexpectedError": "Ocurrió un error inesperado.",
        "resMaxHd": "HD Máx (1280x720)",
        "resSd": "SD (640x480)",
        "resHq": "HQ (480x360)",
        "resMq": "MQ (320x180)",
    },
}


def normalize_language(tag: Optional[str], default: str = DEFAULT_LANGUAGE,
                       available: Optional[Dict[str, Dict[str, str]]] = None) -> str:
    """Reduce a language tag like 'es-MX' or 'ar_EG' to a bundled language."""
    if available is None:
        available = TRANSLATIONS
    if not tag:
        return default
    base = tag.replace("_", "-").split("-")[0].lower()
    base = _LANGUAGE_NAMES.get(base, base)
    return base if base in available else default


def _windows_ui_language() -> Optional[str]:
    if not hasattr(ctypes, 'windll'):
        return None
    try:
        lcid = ctypes.windll.kernel32.GetUserDefaultUILanguage()
    except (AttributeError, OSError) as e:
        logger.debug(f"Could not read the Windows UI language: {e}")
        return None
    return locale.windows_locale.get(lcid)


def detect_language() -> str:
    """Best guess of the user's language from the OS locale."""
    tag = _windows_ui_language()
    if tag is None:
        try:
            tag = locale.getlocale()[0]
        except ValueError:
            tag = None
    return normalize_language(tag)


class Translator:
    """Looks up display strings.

    Resolution order: requested language, then the default language, then
    the key itself, so a missing translation never renders blank.
    """

    def __init__(self, language: Optional[str] = None, default: str = DEFAULT_LANGUAGE,
                 tables: Optional[Dict[str, Dict[str, str]]] = None):
        self.tables = tables if tables is not None else TRANSLATIONS
        self.default = default
        self._language = normalize_language(language, default, self.tables)

    @property
    def language(self) -> str:
        return self._language

    @language.setter
    def language(self, value: str):
        self._language = normalize_language(value, self.default, self.tables)
        logger.info(f"Language set to {self._language}")

    def get(self, key: str, language: Optional[str] = None) -> str:
        lang = language or self._language
        for table in (self.tables.get(lang, {}), self.tables.get(self.default, {})):
            value = table.get(key)
            if value:
                return value
        return key

    __call__ = get
