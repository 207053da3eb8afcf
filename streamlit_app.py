# streamlit_app.py
import html
import os
import time
import streamlit as st
from dotenv import load_dotenv
load_dotenv()

from backend.client import DEFAULT_URL, FactsAPIError, FactsClient

st.set_page_config(
    page_title="Dog Facts",
    page_icon="🐶",
    layout="centered",
    menu_items={
        "Get help": None,
        "Report a bug": None,
        "About": "Random dog facts served from a JSON file by a small Flask API",
    },
)

# ---------- Minimal CSS polish ----------
st.markdown(
    """
    <style>
      .app-title { font-size: 1.8rem; font-weight: 700; letter-spacing: .3px; }
      .subtitle { color: var(--text-color-secondary); margin-top: -6px; }
      .fact-card { background: rgba(0,0,0,0.03); border: 1px solid rgba(0,0,0,0.08);
                   border-radius: 12px; padding: 12px 14px; margin-bottom: 8px; }
      .meta-row { font-size: 0.82rem; color: var(--text-color-secondary); }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------- Sidebar controls ----------
with st.sidebar:
    st.markdown("**Settings**")
    api_url = st.text_input("API URL", value=DEFAULT_URL)
    count = st.slider("How many facts", 1, 20, 3)
    token = st.text_input("x-token", value=os.getenv("X_TOKEN", ""), type="password")
    st.caption("The token is only needed to add facts.")

client = FactsClient(api_url, token=token or None)

if "facts" not in st.session_state:
    st.session_state.facts = []
if "last_latency_ms" not in st.session_state:
    st.session_state.last_latency_ms = None

# ---------- Header ----------
st.markdown("<div class='app-title'>Dog Facts</div>", unsafe_allow_html=True)
st.markdown("<div class='subtitle'>A random handful every time you ask.</div>", unsafe_allow_html=True)
st.divider()

if st.button("Fetch facts", type="primary", use_container_width=True):
    started = time.perf_counter()
    try:
        st.session_state.facts = client.random_facts(count)
        st.session_state.last_latency_ms = int((time.perf_counter() - started) * 1000)
    except FactsAPIError as e:
        st.error(e.detail)
    except Exception as e:
        st.error(f"Request failed: {e}")

if not st.session_state.facts:
    st.info("No facts yet. Press the button to fetch some.")
for fact in st.session_state.facts:
    st.markdown(f"<div class='fact-card'>{html.escape(fact)}</div>", unsafe_allow_html=True)
if st.session_state.last_latency_ms is not None:
    st.markdown(f"<div class='meta-row'>Latency: {st.session_state.last_latency_ms} ms</div>",
                unsafe_allow_html=True)

st.divider()
with st.form("new_fact", clear_on_submit=True):
    st.subheader("Add a fact")
    description = st.text_area("Fact", placeholder="e.g., Dogs have three eyelids", height=90)
    submitted = st.form_submit_button("Add")
    if submitted:
        try:
            created = client.add_fact(description.strip())
            st.success(f"Added: {created['description']}")
        except FactsAPIError as e:
            st.error(e.detail)
        except Exception as e:
            st.error(f"Request failed: {e}")
