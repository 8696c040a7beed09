"""Simple two-language (en/ar) translation helper."""

from prayerly.models import EventKind

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "en": "Prayerly",
        "ar": "مواقيت الصلاة",
    },
    "label_place": {
        "en": "Location",
        "ar": "المكان",
    },
    "label_date": {
        "en": "Date",
        "ar": "التاريخ",
    },
    "label_method": {
        "en": "Method",
        "ar": "طريقة الحساب",
    },
    "btn_view_times": {
        "en": "☾ View Times",
        "ar": "☾ عرض المواقيت",
    },
    "placeholder": {
        "en": "Enter a location and date to see the prayer times",
        "ar": "أدخل المكان والتاريخ لعرض مواقيت الصلاة",
    },
    "loading_compute": {
        "en": "☾ Computing the prayer times",
        "ar": "☾ جارٍ حساب المواقيت",
    },
    "error_address": {
        "en": "Address not found. Try a more specific address. ({error})",
        "ar": "لم يتم العثور على العنوان. جرّب عنواناً أدق. ({error})",
    },
    "error_config": {
        "en": "Invalid calculation settings. ({error})",
        "ar": "إعدادات الحساب غير صالحة. ({error})",
    },
    "event_fajr": {
        "en": "Fajr",
        "ar": "الفجر",
    },
    "event_dhuhr": {
        "en": "Dhuhr",
        "ar": "الظهر",
    },
    "event_asr": {
        "en": "Asr",
        "ar": "العصر",
    },
    "event_maghrib": {
        "en": "Maghrib",
        "ar": "المغرب",
    },
    "event_isha": {
        "en": "Isha",
        "ar": "العشاء",
    },
    "event_sunrise": {
        "en": "Sunrise",
        "ar": "الشروق",
    },
    "event_half_night": {
        "en": "Half Night",
        "ar": "منتصف الليل",
    },
}

_EVENT_KEYS: dict[EventKind, str] = {
    EventKind.FAJR: "event_fajr",
    EventKind.DHUHR: "event_dhuhr",
    EventKind.ASR: "event_asr",
    EventKind.MAGHRIB: "event_maghrib",
    EventKind.ISHA: "event_isha",
    EventKind.SUNRISE: "event_sunrise",
    EventKind.HALF_NIGHT: "event_half_night",
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def event_name(kind: EventKind, lang: str = "en") -> str:
    """Human-readable name of a schedule event."""
    return t(_EVENT_KEYS[kind], lang)
