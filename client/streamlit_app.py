"""Streamlit rendering of the website chat widget.

Features
--------
* Shows the website content as the page body.
* A toggle button opens and closes the "Gradiator Chatbot" panel; the
  conversation survives closing the panel.
* The panel summarizes the website in the background as soon as the session
  starts and answers questions through the chat service.
* Enter sends a message, Shift+Enter inserts a newline.

Run with:
    $ uvicorn app.main:app
    $ streamlit run client/streamlit_app.py

The project must be installed (``pip install -e .``) so ``client`` is
importable from the Streamlit script.
"""

from __future__ import annotations

import streamlit as st

from client.chat_session import ChatSession, SummaryFailed, SummaryPending
from client.config import load_client_settings
from client.flow_client import FlowClient

ROLE_BY_SENDER = {"user": "user", "bot": "assistant"}

###############################################################################
# Page setup
###############################################################################

st.set_page_config(page_title="Acme Corp", page_icon="💬", layout="wide")

###############################################################################
# Session‑state helpers
###############################################################################

settings = load_client_settings()

if "chat" not in st.session_state:
    client = FlowClient(settings.api_base_url, timeout=settings.request_timeout)
    st.session_state.chat = ChatSession(client, settings.load_website_content())

chat: ChatSession = st.session_state.chat
chat.start()

###############################################################################
# Sidebar ­– configuration
###############################################################################

st.sidebar.header("Server configuration")
api_base_url: str = st.sidebar.text_input(
    "API Base URL", value=chat.client.base_url, help="Where the chat service lives"
)
chat.client.base_url = api_base_url.rstrip("/")

###############################################################################
# Website body + chat widget
###############################################################################

# poll only while the summary is still being generated
SUMMARY_POLL_SECONDS = 1.0 if isinstance(chat.summary, SummaryPending) else None


@st.fragment(run_every=SUMMARY_POLL_SECONDS)
def summary_status() -> None:
    status = chat.summary
    if isinstance(status, SummaryPending):
        st.caption("Reading the website…")
    elif SUMMARY_POLL_SECONDS is not None:
        # resolved since the last full run: rerun the page to stop polling
        st.rerun()
    elif isinstance(status, SummaryFailed):
        st.caption("⚠️ The website could not be summarized.")


page_col, widget_col = st.columns([2, 1])

with page_col:
    st.markdown(chat.website_content)

with widget_col:
    if not chat.is_open:
        st.button("💬 Open Chat", on_click=chat.toggle, type="primary", key="open_chat")
    else:
        header_col, close_col = st.columns([4, 1])
        header_col.subheader("Gradiator Chatbot")
        close_col.button("✕", on_click=chat.toggle, help="Close Chat", key="close_chat")

        summary_status()

        # a fixed-height container keeps the newest message in view
        history = st.container(height=300)
        for msg in chat.messages:
            with history.chat_message(ROLE_BY_SENDER[msg.sender]):
                st.markdown(msg.text)

        user_prompt = st.chat_input("Type your message…")
        if user_prompt:
            chat.send(user_prompt)
            st.rerun()
