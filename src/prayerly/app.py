"""Prayerly — Streamlit app for the prayer times of a place on a given date."""

import datetime
import html
import os

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from prayerly.compute import GeocodingError, run  # noqa: E402
from prayerly.config import DEFAULT_METHOD, METHODS, ConfigError, load_settings, method_settings  # noqa: E402
from prayerly.i18n import event_name, t  # noqa: E402
from prayerly.models import CalculationSettings, QueryInput  # noqa: E402
from prayerly.renderers.plotly_2d import render_plotly_chart  # noqa: E402

# --- Language detection (browser-first via streamlit-js-eval) ---
# navigator.language is read once and cached in session_state.
# On the first run the JS call returns None; the rerun triggered by
# streamlit_js_eval fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ar" if _browser_lang.lower().startswith("ar") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="☾",
    layout="wide",
    initial_sidebar_state="collapsed",
)

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    .overlay-box {
        padding: 0.8rem 1.2rem;
        border-radius: 8px;
        background: rgba(10, 16, 32, 0.95);
        color: #e8d5a3;
    }
    .schedule-table td {
        padding: 0.25rem 1.2rem;
        color: #e8d5a3;
    }
    label, [data-testid="stWidgetLabel"] p {
        color: #c9a96e !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---
if "day_schedule" not in st.session_state:
    st.session_state.day_schedule = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None


def _settings_for(method_key: str) -> CalculationSettings:
    # The env-configured method keeps its overrides; other choices use the preset.
    if method_key == (os.environ.get("PRAYERLY_METHOD") or DEFAULT_METHOD):
        return load_settings()
    return method_settings(method_key)


# --- Input bar ---
col1, col2, col3, col4 = st.columns([3, 2, 2, 1.5])
with col1:
    address = st.text_input(t("label_place", _lang), label_visibility="visible")
with col2:
    date_val = st.date_input(
        t("label_date", _lang),
        value=datetime.date.today(),
        min_value=datetime.date(1900, 1, 1),
        label_visibility="visible",
    )
with col3:
    method_keys = list(METHODS)
    method_key = st.selectbox(
        t("label_method", _lang),
        method_keys,
        index=method_keys.index(DEFAULT_METHOD),
        format_func=lambda key: METHODS[key]["name"],
    )
with col4:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    submitted = st.button(t("btn_view_times", _lang), use_container_width=True)

# --- Form submission handler ---
if submitted and address:
    st.session_state.error_msg = None
    with st.spinner(t("loading_compute", _lang)):
        try:
            settings = _settings_for(method_key)
            st.session_state.day_schedule = run(
                QueryInput(address=address, when=date_val.strftime("%Y-%m-%d")),
                settings,
            )
        except GeocodingError as e:
            st.session_state.error_msg = t("error_address", _lang).format(error=html.escape(str(e)))
        except ConfigError as e:
            st.session_state.error_msg = t("error_config", _lang).format(error=html.escape(str(e)))

# --- Error message ---
if st.session_state.error_msg:
    st.markdown(
        f"<div class='overlay-box' style='border:1px solid #ff6b6b; color:#ff9999;'>"
        f"{st.session_state.error_msg}</div>",
        unsafe_allow_html=True,
    )

# --- Schedule and dial ---
day_schedule = st.session_state.day_schedule
if day_schedule is not None:
    table_col, chart_col = st.columns([1, 2])
    with table_col:
        rows = "".join(
            f"<tr><td>{event_name(kind, _lang)}</td><td>{time.display}</td></tr>"
            for kind, time in day_schedule.schedule.items()
        )
        st.markdown(
            f"<div class='overlay-box'>"
            f"<p>{html.escape(day_schedule.context.address_display)}</p>"
            f"<table class='schedule-table'>{rows}</table></div>",
            unsafe_allow_html=True,
        )
    with chart_col:
        st.plotly_chart(
            render_plotly_chart(day_schedule, lang=_lang),
            use_container_width=False,
            config={"displayModeBar": False},
        )
else:
    st.markdown(
        "<div style='height:60vh; display:flex; align-items:center; justify-content:center;"
        f" color:#334466; font-size:1.2rem;'>{t('placeholder', _lang)}</div>",
        unsafe_allow_html=True,
    )
