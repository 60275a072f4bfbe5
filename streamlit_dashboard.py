
import streamlit as st
import pandas as pd
import plotly.express as px

from src.config import (
    COURSE_PROFILES,
    DEFAULT_COURSE,
    DEFAULT_SCORECARD,
    INVALID_SCORE_POLICY,
)
from src.ingestion.scorecard import ScorecardError, load_scorecard_csv
from src.skins.engine import run_skins_analysis
from src.skins.reporting import hole_results_frame, net_scores_frame, summary_frame
from src.utils import setup_logging, escape_markdown, get_course_profile

logger = setup_logging(__name__)

# --- Page Configuration ---
st.set_page_config(
    page_title="Golf Skins",
    page_icon="⛳",
    layout="wide",
    initial_sidebar_state="expanded"
)

# --- Design System ---
# Accent colors are the same in both themes, only text/background colors differ
ACCENT_COLORS = {
    "primary": "#10B981",       # Green - skin won
    "muted": "#6B7280",         # Gray - no winner
    "info": "#3B82F6",          # Blue - lowest net on a hole
    "danger": "#EF4444",
    "chart_palette": [
        "#10B981", "#3B82F6", "#F59E0B", "#8B5CF6", "#EC4899",
        "#06B6D4", "#84CC16", "#F97316", "#6366F1", "#FF6B6B"
    ],
}

SCORE_POLICY_OPTIONS = {
    "Reject the scorecard": "fail",
    "Leave the player out of that hole": "exclude",
}


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures.

    Text colors are NOT explicitly set, allowing Streamlit to inject theme-aware
    colors automatically. Only structural elements (grids, backgrounds) use
    explicit neutral colors.
    """
    system_font = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
    grid_color = "rgba(128, 128, 128, 0.4)"
    line_color = "rgba(128, 128, 128, 0.3)"

    fig.update_layout(
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family=system_font, size=16),
        xaxis=dict(gridcolor=grid_color, linecolor=line_color, showgrid=False, zeroline=False),
        yaxis=dict(gridcolor=grid_color, linecolor=line_color, showgrid=True, zeroline=False,
                   dtick=1),
        showlegend=False,
        hoverlabel=dict(
            bgcolor="rgba(50, 50, 50, 0.9)",
            bordercolor="rgba(0,0,0,0)",
            font=dict(color="#FFFFFF", family=system_font, size=14),
        ),
        dragmode=False,  # Disable pan/zoom to prevent scroll hijacking on mobile
    )
    return fig


# --- Data Loading Functions ---
@st.cache_data(ttl=3600)
def load_default_scorecard():
    """Load the bundled scorecard, or None when the file is absent."""
    if not DEFAULT_SCORECARD.exists():
        logger.info("No default scorecard found")
        return None
    return load_scorecard_csv(DEFAULT_SCORECARD)


def format_net_cell(gross, strokes, net):
    """Render a score as 'net (gross-strokes)', e.g. '4 (5-1)'."""
    if pd.isna(net):
        return "–"
    if strokes > 0:
        return f"{net} ({gross}-{strokes})"
    return f"{net} ({gross})"


def build_results_table(result):
    """Wide hole-by-hole table plus a matching mask of lowest net cells."""
    scores = net_scores_frame(result)
    scores['cell'] = [
        format_net_cell(g, s, n)
        for g, s, n in zip(scores['gross'], scores['strokes'], scores['net'])
    ]

    order = [p.name for p in result.players]
    labels = {p.name: f"{p.name} ({p.half_handicap:g}) [Net]" for p in result.players}

    cells = scores.pivot(index='hole', columns='player', values='cell')[order].rename(columns=labels)
    lowest = scores.pivot(index='hole', columns='player', values='is_lowest')[order].rename(columns=labels)

    holes = hole_results_frame(result).set_index('hole')
    table = holes[['hole_difficulty', 'winner', 'skin_value']].rename(
        columns={'hole_difficulty': 'HCP', 'winner': 'Winner', 'skin_value': 'Value'}
    ).join(cells)
    table.index.name = 'Hole'
    return table, lowest


def style_results_table(table, lowest, has_winner):
    def highlight(col):
        if col.name == 'Winner':
            return [
                f"color: {ACCENT_COLORS['primary'] if has_winner[hole] else ACCENT_COLORS['muted']}"
                for hole in col.index
            ]
        if col.name in lowest.columns:
            return [
                f"font-weight: bold; color: {ACCENT_COLORS['info']}" if lowest.loc[hole, col.name] else ""
                for hole in col.index
            ]
        return [""] * len(col)

    return table.style.apply(highlight, axis=0)


def render_results(result):
    st.subheader("Skins Results")
    st.caption(
        "Hole handicaps: "
        + ", ".join(f"Hole {h.hole_number}({h.hole_difficulty})" for h in result.hole_results)
    )

    table, lowest = build_results_table(result)
    has_winner = {h.hole_number: h.has_winner for h in result.hole_results}
    st.dataframe(style_results_table(table, lowest, has_winner), use_container_width=True)


def render_summary(result):
    st.subheader("Skins Summary")

    for hole_number, winner in result.summary.skins_by_hole:
        st.markdown(f"**{escape_markdown(winner)}** won on hole {hole_number} · 1 skin")

    winners = summary_frame(result)
    if winners.empty:
        st.info("Every hole was tied - no skins won.")
        return

    st.markdown("#### Total Skins by Player")
    for row in winners.itertuples(index=False):
        st.markdown(f"**{escape_markdown(row.player)}**: {row.skins} {'skin' if row.skins == 1 else 'skins'}")

    fig = px.bar(
        winners,
        x='player',
        y='skins',
        color='player',
        color_discrete_sequence=ACCENT_COLORS["chart_palette"],
        labels={'player': 'Player', 'skins': 'Skins'},
    )
    st.plotly_chart(apply_plotly_style(fig), use_container_width=True)


# --- Main App ---
def main():
    st.title("Golf Skins")
    st.caption("Upload your CSV file or use the default data")

    with st.sidebar:
        st.header("⛳ Course")
        course = st.selectbox(
            "Course",
            options=list(COURSE_PROFILES.keys()),
            index=list(COURSE_PROFILES.keys()).index(DEFAULT_COURSE),
            format_func=lambda key: key.replace("_", " ").title(),
            label_visibility="collapsed"
        )

        st.markdown("---")
        st.header("✏️ Unreadable Scores")
        policy_labels = list(SCORE_POLICY_OPTIONS.keys())
        default_label = next(
            label for label, value in SCORE_POLICY_OPTIONS.items() if value == INVALID_SCORE_POLICY
        )
        policy_label = st.radio(
            "Unreadable scores",
            options=policy_labels,
            index=policy_labels.index(default_label),
            label_visibility="collapsed"
        )
        score_policy = SCORE_POLICY_OPTIONS[policy_label]

    uploaded = st.file_uploader("Scorecard CSV", type=["csv"])

    try:
        if uploaded is not None:
            df = load_scorecard_csv(uploaded)
        else:
            df = load_default_scorecard()
            if df is None:
                st.info("No default scorecard found. Upload a CSV to get started.")
                return

        result = run_skins_analysis(df, get_course_profile(course), score_policy=score_policy)
    except (ScorecardError, ValueError) as e:
        logger.warning(f"Scorecard rejected: {e}")
        st.error(f"Error parsing file: {e}")
        return

    render_results(result)
    st.markdown("---")
    render_summary(result)


if __name__ == "__main__":
    main()
