# streamlit_app.py
import json
import time
from functools import partial

import streamlit as st
import streamlit.components.v1 as components

from sqlrelay.client import call_relay
from sqlrelay.config import settings
from sqlrelay.examples import EXAMPLE_QUERIES
from sqlrelay.form import ConverterForm
from sqlrelay.schema import TABLES

# ---------- Page setup ----------
st.set_page_config(page_title="NL to SQL", layout="wide")

# Minimal, subtle styling (no loud colors, no emojis)
st.markdown("""
    <style>
    .main .block-container {padding-top: 2rem; padding-bottom: 3rem; max-width: 1200px;}
    .small-muted {color:#6b7280; font-size:13px;}
    .section-title {font-weight:600; font-size: 18px; margin-top: 1rem;}
    .placeholder {border:1px solid #e5e7eb; border-radius:6px; padding:60px 10px; text-align:center; color:#9ca3af;}
    .hr {border-top:1px solid #e5e7eb; margin: 20px 0;}
    </style>
""", unsafe_allow_html=True)

def write_clipboard(text: str):
    # runs in the component iframe, so go through the parent window
    components.html(
        f"<script>window.parent.navigator.clipboard.writeText({json.dumps(text)});</script>",
        height=0,
    )

# ---------- Sidebar ----------
with st.sidebar:
    st.header("Settings")
    api_url = st.text_input("API base URL", value=settings.relay_url)
    st.markdown("<div class='small-muted'>The API should be running via <code>uvicorn sqlrelay.main:app --reload</code>.</div>", unsafe_allow_html=True)

# ---------- Session state ----------
if "form" not in st.session_state:
    st.session_state.form = ConverterForm(clipboard=write_clipboard)
form = st.session_state.form
form.relay = partial(call_relay, api_url=api_url)
if "converting" not in st.session_state:
    st.session_state.converting = False

def request_conversion():
    # picked up below, after the inputs have been drawn disabled
    st.session_state.converting = True

def pick_example(example: str):
    st.session_state.question = example
    form.use_example(example)

# ---------- Header ----------
st.title("Natural Language to SQL")
st.markdown("<div class='small-muted'>Convert plain English questions into SQL queries instantly using AI.</div>", unsafe_allow_html=True)

col_in, col_out = st.columns(2)
busy = st.session_state.converting or form.loading

# ---------- Input ----------
with col_in:
    form.input = st.text_area(
        "Your Question in English",
        key="question",
        height=200,
        placeholder="e.g., Show all customers who ordered in the last month...",
        disabled=busy,
    )
    st.button(
        "Convert to SQL",
        key="convert",
        type="primary",
        use_container_width=True,
        disabled=busy,
        on_click=request_conversion,
    )

    st.markdown("<div class='section-title'>Try These Examples</div>", unsafe_allow_html=True)
    for i, example in enumerate(EXAMPLE_QUERIES):
        st.button(example, key=f"example-{i}", on_click=pick_example, args=(example,), disabled=busy)

if st.session_state.converting:
    st.session_state.converting = False
    with col_out:
        with st.spinner("Generating SQL..."):
            form.submit()
    # redraw with the inputs enabled again
    st.rerun()

# ---------- Output ----------
with col_out:
    head_title, head_copy = st.columns([4, 1])
    with head_title:
        st.markdown("<div class='section-title'>Generated SQL Query</div>", unsafe_allow_html=True)
    if form.output:
        with head_copy:
            if st.button("Copy", use_container_width=True):
                form.copy()
            if form.copied:
                st.markdown("<div class='small-muted'>Copied</div>", unsafe_allow_html=True)
        st.code(form.output, language="sql")
    else:
        st.markdown("<div class='placeholder'>Your SQL query will appear here</div>", unsafe_allow_html=True)

for level, message in form.pop_notifications():
    st.toast(message, icon=":material/check_circle:" if level == "success" else ":material/error:")

st.markdown("<div class='hr'></div>", unsafe_allow_html=True)

# ---------- Schema ----------
st.subheader("Sample Database Schema")
for col, (table, columns) in zip(st.columns(len(TABLES)), TABLES.items()):
    with col:
        st.markdown(f"**{table}**")
        st.markdown("\n".join(f"- {c}" for c in columns))

# Clear the copied indicator once it has been on screen long enough
if form.copied:
    time.sleep(form.copied_remaining())
    st.rerun()
