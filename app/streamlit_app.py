"""Streamlit preview UI for the landing page designer.

Runs the same generation pipeline as the serverless endpoint so designs can be
tried locally without deploying:
- Describe a business, generate one landing page per style
- Rendered preview, raw HTML source, and download per design
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import streamlit as st
import streamlit.components.v1 as components

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.config import TEMPERATURE_RANGE, Settings
from core.models import DEFAULT_STYLES, DesignRequest, RequestValidationError
from core.pipeline import run_generation
from core.providers import UpstreamError, get_generator

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)

# ============================================================================
# Page config
# ============================================================================

st.set_page_config(
    page_title="Landing Page Designer",
    layout="wide",
)

# ============================================================================
# Session state initialization
# ============================================================================


def init_session_state():
    defaults = {
        "designs": [],
        "last_description": "",
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


init_session_state()

# ============================================================================
# Sidebar: Configuration
# ============================================================================

with st.sidebar:
    st.markdown("### Configuration")

    # Manual entry overrides .env
    api_key = st.text_input(
        "Gemini API Key",
        value="",
        type="password",
        help="Optional: leave blank to use GEMINI_API_KEY or GOOGLE_API_KEY from your environment/.env.",
    )
    if api_key:
        st.caption("Using Gemini key from sidebar input.")
    elif os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"):
        st.caption("Using Gemini key from environment (.env).")

    model_name = st.text_input("Model", value=settings.model)
    temperature = st.slider("Temperature", *TEMPERATURE_RANGE, settings.temperature, 0.05)
    preview_height = st.slider("Preview height", 400, 1600, 800, 50)

# ============================================================================
# Main area
# ============================================================================

st.title("Landing Page Designer")

description = st.text_area(
    "Business description",
    value=st.session_state["last_description"],
    placeholder="Cafetería de especialidad en el centro de Madrid con repostería artesanal",
)

if st.button("Generate designs", type="primary", use_container_width=True):
    try:
        request = DesignRequest.from_body({"description": description})
        generator = get_generator(
            settings.provider,
            api_key=api_key or None,
            model=model_name,
            temperature=temperature,
            max_output_tokens=settings.max_output_tokens,
        )
        with st.spinner(f"Generating {len(DEFAULT_STYLES)} designs..."):
            st.session_state["designs"] = run_generation(request.description, generator)
        st.session_state["last_description"] = description
    except RequestValidationError as e:
        st.error(str(e))
    except (ValueError, UpstreamError) as e:
        st.error(f"Generation failed: {e}")

designs = st.session_state["designs"]
if designs:
    tabs = st.tabs([style.value for style in DEFAULT_STYLES])
    for tab, style, html in zip(tabs, DEFAULT_STYLES, designs):
        with tab:
            components.html(html, height=preview_height, scrolling=True)
            with st.expander("HTML source", expanded=False):
                st.code(html, language="html")
            st.download_button(
                f"Download {style.value}.html",
                data=html,
                file_name=f"landing_{style.name.lower()}.html",
                mime="text/html",
                key=f"download_{style.name}",
            )
