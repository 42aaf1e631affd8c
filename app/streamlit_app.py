import sys, os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import io
import time

import pandas as pd
import streamlit as st

from examslots.config import get_active_config
from examslots.io_utils import load_time_ranges, schedule_rows
from examslots.report import collect_stats, render_report, render_stats
from examslots.scheduling.evaluation import summary
from examslots.session import build_session, generate_time_ranges
from examslots.slots import all_slots

# ---------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------
st.set_page_config(page_title="ExamSlots – Scheduler", layout="wide")
st.title("ExamSlots – Evening-Aware Exam Slot Assignment")

# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _bytes_of(upload):
    if upload is None:
        return None
    return upload.getvalue()


@st.cache_data
def load_time_ranges_cached(data: bytes):
    return load_time_ranges(io.BytesIO(data))


def slots_frame(session) -> pd.DataFrame:
    rows = []
    for slot in all_slots(session.slots):
        s = slot.assigned_set
        rows.append({
            "slot": slot.id,
            "day": slot.day,
            "evening": slot.evening,
            "filled": slot.filled,
            "set": s.id if s is not None else "",
            "members": len(s.members) if s is not None else 0,
        })
    return pd.DataFrame(rows)


# ---------------------------------------------------------------------
# UI
# ---------------------------------------------------------------------
st.subheader("Inputs")
mode = st.radio("Input mode", ["Time range file", "Synthetic"], horizontal=True)

with st.form("controls"):
    if mode == "Time range file":
        times_file = st.file_uploader("Time ranges (one HH:MMAM-HH:MMPM per line)", type=["dat", "txt"])
        n = None
    else:
        n = st.number_input("Synthetic time ranges (N)", 1, 500, 20, step=1)
        times_file = None

    c1, c2, c3 = st.columns(3)
    strategy = c1.selectbox("Clustering", ["first_fit", "components"], index=0)
    cutoff = c2.text_input("Evening cutoff", get_active_config()["evening_cutoff"])
    seed = c3.number_input("Random seed", 0, 1_000_000, 42, step=1)

    submitted = st.form_submit_button("Run Scheduler")

# ---------------------------------------------------------------------
# Run on Submit
# ---------------------------------------------------------------------
if submitted:
    t0 = time.perf_counter()
    if mode == "Time range file":
        if times_file is None:
            st.error("Please upload a time range file.")
            st.stop()
        time_ranges = load_time_ranges_cached(_bytes_of(times_file))
    else:
        time_ranges = generate_time_ranges(int(n), seed=int(seed))

    config = get_active_config()
    config["evening_cutoff"] = cutoff
    try:
        session = build_session(time_ranges, config=config, seed=int(seed), strategy=strategy)
    except ValueError as e:
        st.error(f"Scheduling failed: {e}")
        st.stop()
    t1 = time.perf_counter()

    report_text = render_report(session) + render_stats(collect_stats(session))
    summary_text = summary(session)

    st.subheader("Summary")
    st.text(summary_text)
    st.caption(f"Total time: {t1 - t0:.3f}s")

    st.subheader("Exam slots")
    st.dataframe(slots_frame(session), use_container_width=True)

    csv_df = pd.DataFrame(schedule_rows(session), columns=["slot_id", "set_id", "offering"])
    st.download_button("Download schedule.csv", csv_df.to_csv(index=False), file_name="schedule.csv", mime="text/csv")
    st.download_button("Download report", report_text, file_name="schedule.dat", mime="text/plain")

    with st.expander("Full report"):
        st.text(report_text)
    st.success("Scheduling complete.")
