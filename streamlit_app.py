"""Streamlit Web UI for the AI text improver.

Paste a piece of resume content, pick an action (or a tone), review the
suggestion and apply it back to the text area.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so backend clients can read them
for key in ("OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from resume_builder.config import AppConfig, load_config
from resume_builder.errors import InputValidationError, UpstreamError
from resume_builder.logging.usage_store import UsageStore
from resume_builder.models.improvement import Action, ImprovementRequest, Tone
from resume_builder.pipeline.text_improver import build_improver

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="AI Resume Text Improver",
    page_icon=":sparkles:",
    layout="centered",
)

CONTENT_TYPES = ["general", "summary", "description", "bullet"]

TONE_LABELS = {
    Tone.PROFESSIONAL: "👔 Professional",
    Tone.EXECUTIVE: "🎯 Executive",
    Tone.TECHNICAL: "💻 Technical",
    Tone.CREATIVE: "🎨 Creative",
    Tone.CASUAL: "🙂 Casual",
}

MORE_ACTIONS = {
    Action.BULLETIZE: "• Convert to bullets",
    Action.SHORTEN: "✂️ Shorten",
    Action.SUGGESTIONS: "💡 Suggestions",
    Action.SKILLS: "🧰 Suggest skills",
    Action.CERTIFICATIONS: "📜 Suggest certifications",
    Action.KEYWORDS: "🔑 ATS keywords",
}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@st.cache_resource
def _get_config() -> AppConfig:
    return load_config()


@st.cache_resource
def _get_usage_store() -> UsageStore | None:
    config = _get_config()
    if not config.usage.enabled:
        return None
    return UsageStore(db_path=config.usage.resolved_db_path)


def _run_action(action: Action, tone: Tone | None = None) -> None:
    text = st.session_state.get("source_text", "")
    if not text or not text.strip():
        st.session_state.error = "Please enter some text first"
        return

    request = ImprovementRequest(
        text=text,
        action=action.value,
        type=st.session_state.get("content_type"),
        tone=tone.value if tone else None,
    )
    # Each asyncio.run gets a new loop, so the client is built per click
    improver = build_improver(
        _get_config().llm, usage_store=_get_usage_store(), session_id="streamlit"
    )
    try:
        with st.spinner("Improving..."):
            result = asyncio.run(improver.improve(request))
    except (InputValidationError, UpstreamError) as e:
        logger.warning("Improvement failed: %s", e)
        st.session_state.error = str(e)
        return

    st.session_state.error = ""
    st.session_state.improved_text = result.improved


def _apply_improvement() -> None:
    st.session_state.source_text = st.session_state.improved_text
    st.session_state.improved_text = ""


def _discard_improvement() -> None:
    st.session_state.improved_text = ""


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

st.session_state.setdefault("source_text", "")
st.session_state.setdefault("improved_text", "")
st.session_state.setdefault("error", "")

st.title("AI Improvements")

st.selectbox("Content type", CONTENT_TYPES, key="content_type")
st.text_area("Resume text", key="source_text", height=180)

if not st.session_state.improved_text:
    tab_improve, tab_tone, tab_more = st.tabs(["Improve", "Tone", "More"])

    with tab_improve:
        st.button("✨ Make it better", on_click=_run_action, args=(Action.IMPROVE,),
                  use_container_width=True)
        st.button("📝 Fix grammar", on_click=_run_action, args=(Action.GRAMMAR,),
                  use_container_width=True)
        st.button("📊 Add metrics", on_click=_run_action, args=(Action.QUANTIFY,),
                  use_container_width=True)

    with tab_tone:
        for tone, label in TONE_LABELS.items():
            st.button(label, on_click=_run_action, args=(Action.TONE, tone),
                      use_container_width=True)

    with tab_more:
        for action, label in MORE_ACTIONS.items():
            st.button(label, on_click=_run_action, args=(action,),
                      use_container_width=True)
else:
    st.subheader("Suggestion")
    st.code(st.session_state.improved_text, language=None)
    col_apply, col_discard = st.columns(2)
    col_apply.button("✓ Apply", on_click=_apply_improvement, type="primary",
                     use_container_width=True)
    col_discard.button("Try again", on_click=_discard_improvement,
                       use_container_width=True)

if st.session_state.error:
    st.error(st.session_state.error)
