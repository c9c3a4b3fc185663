# ui/streamlit_app.py
import os
import json
from typing import Any, Dict, List

import requests
import streamlit as st

from core.report import cached_report, demo_inputs


# ----------------- helpers: safe secrets/env -----------------
def safe_secret(key: str, default=None):
    """
    Read from Streamlit secrets first (if present), else from env, else default.
    """
    try:
        return st.secrets.get(key, os.environ.get(key, default))  # type: ignore[attr-defined]
    except Exception:
        return os.environ.get(key, default)


# ----------------- configuration -----------------
st.set_page_config(page_title="Skill Assessment Engine", layout="wide")
st.title("🎯 Skill Assessment Engine")
st.caption(
    "Provide the master catalog of skills alongside the student's passed and "
    "attempted-but-not-passed skills. Every entry is aligned to the catalog, gaps are "
    "surfaced and the untouched skills become the recommendation list."
)

DEBUG = (safe_secret("DEBUG", "0") == "1")
API_BASE = safe_secret("API_BASE", None)  # optional; compute locally when unset

API_PROTECT_HEADER = safe_secret("API_PROTECT_HEADER", "X-Render-Secret")
API_PROTECT_TOKEN = safe_secret("RENDER_API_SECRET", None)

if DEBUG:
    st.sidebar.caption("API base (debug)")
    api_base = st.sidebar.text_input("Base URL", value=(API_BASE or "")).rstrip("/")
else:
    api_base = (API_BASE or "").rstrip("/")

def _auth_headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if API_PROTECT_TOKEN:
        headers[API_PROTECT_HEADER] = API_PROTECT_TOKEN
    return headers

if api_base:
    if st.sidebar.button("Check API health"):
        try:
            r = requests.get(f"{api_base}/healthz", headers=_auth_headers(), timeout=10)
            r.raise_for_status()
            st.sidebar.success(r.json())
        except requests.RequestException as e:
            st.sidebar.error(f"Health failed: {e}")
    st.sidebar.caption(f"API: {api_base}")
else:
    st.sidebar.caption("Computing in this session (no API_BASE set)")


# ----------------- inputs -----------------
for key in ("master_text", "passed_text", "failed_text"):
    st.session_state.setdefault(key, "")

def _load_demo() -> None:
    for key, value in demo_inputs().items():
        st.session_state[key] = value

st.button("Load demo data", on_click=_load_demo)

c_master, c_passed, c_failed = st.columns(3)
with c_master:
    st.subheader("Master skills")
    st.text_area(
        "Master catalog",
        key="master_text",
        placeholder="One skill per line, comma-separated list, or JSON array.",
        height=260,
    )
with c_passed:
    st.subheader("Passed")
    st.text_area(
        "Passed skills",
        key="passed_text",
        placeholder="Enter skills the student has mastered.",
        height=260,
    )
with c_failed:
    st.subheader("Failed")
    st.text_area(
        "Attempted but not passed",
        key="failed_text",
        placeholder="Enter skills attempted but not yet passed.",
        height=260,
    )

payload = {
    "master_text": st.session_state["master_text"],
    "passed_text": st.session_state["passed_text"],
    "failed_text": st.session_state["failed_text"],
}

if DEBUG:
    with st.expander("Request payload (read-only)"):
        st.code(json.dumps(payload, indent=2), language="json")


# ----------------- HTTP -----------------
def post_json(path: str, body: Dict[str, Any], timeout: int = 30) -> Dict[str, Any]:
    url = f"{api_base}{path}"
    r = requests.post(url, json=body, headers=_auth_headers(), timeout=timeout)
    r.raise_for_status()
    return r.json()


def get_report(body: Dict[str, str]) -> Dict[str, Any]:
    if api_base:
        return post_json("/reconcile", body)
    return cached_report(body["master_text"], body["passed_text"], body["failed_text"]).to_dict()


# ----------------- render helpers -----------------
def render_list(items: List[str], empty_label: str) -> None:
    if not items:
        st.caption(empty_label)
        return
    st.markdown("\n".join(f"- {s}" for s in items))

def render_unknown(items: List[str], title: str) -> None:
    if items:
        st.warning(f"**{title}**\n\n" + "\n".join(f"- {s}" for s in items))


# ----------------- report -----------------
try:
    report = get_report(payload)
except requests.RequestException as e:
    st.error(f"Reconcile request failed: {e}")
    st.stop()

counts = report["counts"]
m1, m2, m3, m4, m5 = st.columns(5)
m1.metric("Master skills", counts["master"])
m2.metric("Passed", counts["passed"])
m3.metric("Failed", counts["failed"])
m4.metric("Recommended next", counts["recommended"])
m5.metric("Coverage", f"{report['coverage']}%")

st.markdown("---")

r_passed, r_failed, r_rec = st.columns(3)
with r_passed:
    st.subheader("Passed skills")
    st.caption(f"Sorted alphabetically · {counts['passed']} skills")
    render_list(report["passed"]["canonical"], "No passed skills yet.")
    render_unknown(report["passed"]["unknown"], "Outside master catalog")

with r_failed:
    st.subheader("Failed skills")
    st.caption(f"Attempted but not passed · {counts['failed']} skills")
    render_list(report["failed"]["canonical"], "No failed skills yet.")
    render_unknown(report["failed"]["unknown"], "Outside master catalog")

with r_rec:
    st.subheader("Recommended skills")
    st.caption(f"Not yet passed or attempted · {counts['recommended']} skills")
    render_list(report["recommended"], "All skills have been attempted.")
    st.write(f"Total skills attempted so far: {report['attempted_count']}")
    st.write(
        f"Remaining gap: {counts['recommended']} of {counts['master']} "
        f"({report['remaining_gap_percent']}%)"
    )
