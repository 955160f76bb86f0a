"""Streamlit status page for the pomodoro timer.

Run with ``streamlit run src/pomostatus/streamlit_app.py``. It shares the
config and state files with the ``pomostatus`` command, so a pomodoro started
from the terminal shows up here and the other way round.
"""
from __future__ import annotations

import time

import streamlit as st

from pomostatus import session
from pomostatus.phase import Done, Idle, Rest, Work, compute_phase, format_phase, phase_progress
from pomostatus.scheduler import build_plan
from pomostatus.store import Store, StoreError

PHASE_LABELS = {
    Idle: "Idle",
    Work: "Working",
    Rest: "Resting",
    Done: "Done",
}


def format_minutes(seconds: int) -> str:
    return f"{seconds // 60} min"


def main() -> None:
    st.set_page_config(page_title="Pomodoro Status", layout="centered")

    st.title("Pomodoro")

    store = Store()
    try:
        config = store.load_config()
        state = store.load_state(config)
    except StoreError as e:
        st.error(str(e))
        return

    with st.sidebar:
        st.write(f"Work: {format_minutes(config.work_duration)}")
        st.write(f"Rest: {format_minutes(config.rest_duration)}")
        st.write(f"Pomodoros per set: {config.repeat_count}")
        st.caption(f"Config: {store.config_path}")

    st.markdown(
        """
        <style>
        .big-timer {font-size:56px; font-weight:700; text-align:center; margin: 12px 0}
        div.stButton > button {height:64px; width:100%; font-size:18px}
        </style>
        """,
        unsafe_allow_html=True,
    )

    # Controls
    c1, c2 = st.columns([1, 1])
    try:
        if c1.button("Start"):
            session.start(store)
            st.rerun()
        if c2.button("Stop"):
            session.stop(store)
            st.rerun()
    except StoreError as e:
        st.error(str(e))

    phase = compute_phase(state.started_at, session.now(), config)
    st.subheader(PHASE_LABELS[type(phase)])
    st.markdown(f"<div class='big-timer'>{format_phase(phase, compact=config.compact)}</div>", unsafe_allow_html=True)
    st.progress(phase_progress(phase, config))

    st.write("---")
    with st.expander("Planned intervals"):
        for it in build_plan(config):
            st.write(f"- {it.label}: {format_minutes(it.duration_seconds)}")

    if isinstance(phase, (Work, Rest)):
        time.sleep(1)
        st.rerun()


if __name__ == "__main__":
    main()
