"""
Olympic Medal Dashboard
Run with:  streamlit run medal_dashboard_app.py
Expects data/olympic_games.csv (and optionally data/population.csv).
"""

import logging
from dataclasses import asdict

import streamlit as st
import pandas as pd
import plotly.express as px

from medal_dashboard import DashboardConfig, DatasetError, MedalSession
from medal_dashboard.config import MC

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Olympic Medal Dashboard", page_icon="🏅", layout="wide")

st.markdown("""<style>
  .stApp { background-color: #0d1b2a; color: #e8edf2; }
  section[data-testid="stSidebar"] {
      background: linear-gradient(180deg, #1a2d44 0%, #0d1b2a 100%);
      border-right: 1px solid #2a4060; }
  .metric-card { background: linear-gradient(135deg,#1e3a5f,#162d48);
      border:1px solid #2a5080; border-radius:12px; padding:18px 20px;
      text-align:center; margin-bottom:6px; }
  .metric-card .val { font-size:2rem; font-weight:700; color:#7ec8e3; line-height:1; }
  .metric-card .lbl { font-size:.74rem; color:#8aafc8; margin-top:4px;
      text-transform:uppercase; letter-spacing:.08em; }
  .gold{color:#ffd700!important} .silver{color:#c0c0c0!important} .bronze{color:#cd7f32!important}
  h1{color:#e8edf2!important} h2,h3{color:#b8d4e8!important} label{color:#8aafc8!important}
</style>""", unsafe_allow_html=True)

_L = dict(
    paper_bgcolor="#111e2d",
    plot_bgcolor="#0d1b2a",
    font=dict(color="#e8edf2", family="Inter,sans-serif"),
    margin=dict(t=40, b=40, l=60, r=20),
    legend=dict(
        title_text="",
        bgcolor="rgba(0,0,0,0.55)",
        bordercolor="rgba(255,255,255,0.25)",
        borderwidth=1,
        font=dict(color="#e8edf2", size=12),
    ),
)


# Shared across users: tables, global stats and scale only. Selections live in
# each browser session's own fork.
@st.cache_resource(show_spinner="Loading Olympic data…")
def load_session():
    return MedalSession.from_config(DashboardConfig())


try:
    base = load_session()
except DatasetError as e:
    st.error(f"Could not load medal data: {e}")
    st.stop()

if "session" not in st.session_state:
    st.session_state["session"] = base.fork()
session = st.session_state["session"]

if session.default_selection() is None:
    st.info("The medal dataset is empty.")
    st.stop()

# ── Sidebar ──────────────────────────────────
with st.sidebar:
    st.markdown("## 🏅 Filters")
    yrs = session.years()
    yr = st.select_slider("Year", options=yrs, value=yrs[-1])
    seasons = session.seasons_for(yr)
    ss = st.selectbox("Season", seasons) if seasons else None
    st.caption("Map colors use fixed classes computed over all editions.")

sel = session.select(yr, ss)

st.markdown("# 🏅 Olympic Medal Dashboard")
st.caption(f"{yr} {ss or ''} · {len(sel.aggregated)} countries")

if sel.empty:
    st.info("No medal data for this selection.")
    st.stop()


def kpi(col, v, l, c=""):
    col.markdown(f'<div class="metric-card"><div class="val {c}">{v}</div>'
                 f'<div class="lbl">{l}</div></div>', unsafe_allow_html=True)


allc = session.composition()
ranked = session.ranked()
c1, c2, c3, c4 = st.columns(4)
kpi(c1, f"{allc.gold:,}", "Gold", "gold")
kpi(c2, f"{allc.silver:,}", "Silver", "silver")
kpi(c3, f"{allc.bronze:,}", "Bronze", "bronze")
kpi(c4, ranked.rows[0].country, "Top Country")
st.markdown("---")

# ── Map ──────────────────────────────────────
st.markdown("### Total Medals by Country")
mp = pd.DataFrame([asdict(r) for r in session.map_rows()])
fm = px.choropleth(
    mp, locations="country", locationmode="country names", color="color",
    color_discrete_map={c: c for c in mp["color"].unique()},
    hover_name="country", hover_data={"status": True, "color": False, "country": False},
)
fm.update_layout(**_L, height=520, showlegend=False,
                 geo=dict(bgcolor="#0d1b2a", projection_type="equal earth"))
st.plotly_chart(fm, use_container_width=True)
lg = session.scale.legend()
st.caption(" · ".join(f"{e.lower}+" if e.upper is None else f"{e.lower}–{e.upper}" for e in lg))

L, R = st.columns([3, 2], gap="large")
with L:
    st.markdown(f"### Top {len(ranked.rows)} Countries")
    bd = pd.DataFrame([asdict(r) for r in ranked.rows])
    fb = px.bar(bd, x="total", y="country", orientation="h", text="total",
                category_orders={"country": bd["country"].tolist()},
                labels={"total": "Total medals", "country": ""})
    fb.add_vline(x=ranked.mean_total, line_color="red", line_width=2,
                 annotation_text=f"mean {ranked.mean_total:.1f}", annotation_font_color="red")
    fb.update_layout(**_L, height=min(50 + len(bd) * 25, 400) + 60)
    st.plotly_chart(fb, use_container_width=True)

with R:
    st.markdown("### Gold vs Total")
    ad = pd.DataFrame([asdict(r) for r in sel.aggregated])
    fs = px.scatter(ad, x="gold", y="total", size="total", hover_name="country",
                    labels={"gold": "Gold", "total": "Total medals"})
    fs.update_layout(**_L, height=400)
    st.plotly_chart(fs, use_container_width=True)

# ── Per capita ───────────────────────────────
pc = session.per_capita()
if pc:
    st.markdown("### Medals per Million Inhabitants")
    pd_ = pd.DataFrame([asdict(r) for r in pc])
    fp = px.bar(pd_, x="medals_per_million", y="country", orientation="h",
                category_orders={"country": pd_["country"].tolist()},
                hover_data={"population": ":,.0f", "total": True},
                labels={"medals_per_million": "Medals per million", "country": ""})
    fp.update_layout(**_L, height=400)
    st.plotly_chart(fp, use_container_width=True)


def donut(items, title, colors=None):
    dd = pd.DataFrame(items, columns=["label", "value"])
    f = px.pie(dd, names="label", values="value", hole=0.5, title=title,
               color="label", color_discrete_map=colors or {})
    f.update_layout(**_L, height=320)
    return f


# ── Donuts ───────────────────────────────────
d1, d2, d3 = st.columns(3)
with d1:
    who = st.selectbox("Country", ["All countries"] + sorted(c.country for c in sel.aggregated))
    comp = session.composition(None if who == "All countries" else who)
    if comp is None:
        st.info("No data.")
    elif comp.no_medals:
        st.info(f"{who} won no medals.")
    else:
        st.plotly_chart(donut(comp.items(), "Medal Composition", MC), use_container_width=True)
for col, share, title in ((d2, session.host_share(), "Host vs Rest"),
                          (d3, session.top_share(), f"Top {session.cfg.top_share_n} vs Rest")):
    with col:
        if share.pct is None:
            st.info(f"{title}: no medals awarded.")
        else:
            st.plotly_chart(donut(share.items(), f"{title} ({share.pct:.1f}%)"), use_container_width=True)
