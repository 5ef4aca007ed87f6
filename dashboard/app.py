"""SkySync live weather dashboard — Streamlit + Plotly + Open-Meteo."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    CONDITION_COLORS,
    CONDITION_ICONS,
    FEATURE_SIGNIFICANCE,
    PLOTLY_LAYOUT_DEFAULTS,
    describe_correlation,
    format_coordinates,
    format_reading,
    get_app_state,
    pressure_variability,
    rainfall_totals,
    render_location_sidebar,
    run,
    summarise_series,
    temperature_humidity_correlation,
)
from shared.constants import ALERT_RED, BRAND_AMBER, BRAND_BLUE, BRAND_MINT
from shared.services.analytics import METRICS

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="SkySync Weather",
    page_icon="\U0001f324️",
    layout="wide",
)

state = get_app_state()
controller = state.controller

render_location_sidebar(state)

# First load resolves the caller's position
if not state.initial_fetch_done:
    state.initial_fetch_done = True
    with st.spinner("Locating and fetching live weather..."):
        run(controller.refresh())


# ── Panels ───────────────────────────────────────────────────────────────────


def _render_header() -> None:
    display = controller.compute_display()
    icon = CONDITION_ICONS[display.condition]
    left, right = st.columns([3, 1])
    with left:
        st.markdown(f"# {icon} {display.condition.value}")
        st.markdown(f"**{display.location_label}** | updated {display.timestamp}")
        if controller.location is not None:
            st.caption(format_coordinates(controller.location.lat, controller.location.lon))
    with right:
        if controller.loading:
            st.markdown("**SYNCING...**")
        elif controller.auto_sync_enabled:
            st.markdown(f"**LIVE FEED** · next sync in {controller.seconds_until_next_refresh}s")
            st.progress(controller.countdown_fraction)
        else:
            st.markdown("**OFFLINE**")

    st.markdown(
        f'<div style="height:4px;background:{CONDITION_COLORS[display.condition]};'
        f'border-radius:2px;margin-bottom:1rem"></div>',
        unsafe_allow_html=True,
    )


def _render_current() -> None:
    display = controller.compute_display()
    kpi1, kpi2, kpi3, kpi4, kpi5 = st.columns(5)
    kpi1.metric("Temperature", format_reading(display.temperature, "°C"))
    kpi2.metric("Humidity", format_reading(display.humidity, "%", digits=0))
    kpi3.metric("Wind Speed", format_reading(display.wind_speed, "km/h"))
    kpi4.metric("Pressure", format_reading(display.pressure, "hPa", digits=0))
    kpi5.metric("Precipitation", format_reading(display.precipitation, "mm"))


def _render_forecast() -> None:
    points = controller.compute_display().hourly_forecast
    hours = [p.timestamp for p in points]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=hours, y=[p.temperature for p in points], name="Temp (°C)",
        mode="lines", line=dict(color=BRAND_AMBER, width=4, shape="spline"),
        fill="tozeroy", fillcolor="rgba(245,166,35,0.12)",
    ))
    fig.add_trace(go.Scatter(
        x=hours, y=[p.humidity for p in points], name="Humidity (%)",
        mode="lines", line=dict(color=BRAND_MINT, width=3, dash="dash", shape="spline"),
    ))
    fig.update_layout(**PLOTLY_LAYOUT_DEFAULTS, title="Atmospheric Trend (Next 24h)", height=420)
    st.plotly_chart(fig, use_container_width=True)

    st.dataframe(
        [
            {
                "Hour": p.timestamp,
                "Condition": f"{CONDITION_ICONS[p.condition]} {p.condition.value}",
                "Temp (°C)": p.temperature,
                "Humidity (%)": p.humidity,
                "Pressure (hPa)": p.pressure,
                "Wind (km/h)": p.wind_speed,
                "Rain (mm)": p.rainfall,
            }
            for p in points
        ],
        hide_index=True,
        use_container_width=True,
    )


def _render_analytics() -> None:
    points = controller.compute_display().hourly_forecast
    r = temperature_humidity_correlation(points)
    rain = rainfall_totals(points)

    stats_col, chart_col = st.columns([1, 2])
    with stats_col:
        st.metric("Temp / Humid Correlation", f"{r:.2f}", delta=describe_correlation(r),
                  delta_color="off")
        st.metric("Pressure Variability", f"{pressure_variability(points):.2f}%")
        st.metric("Rainfall (24h)", format_reading(rain.total_mm, "mm"),
                  delta=f"{rain.rain_hours} wet hours", delta_color="off")

        st.markdown("##### Feature Significance")
        for name, (weight, _color) in FEATURE_SIGNIFICANCE.items():
            st.progress(weight / 100, text=f"{name} — {weight}%")

    with chart_col:
        scatter = go.Figure(go.Scatter(
            x=[p.temperature for p in points],
            y=[p.humidity for p in points],
            mode="markers",
            marker=dict(
                size=[max(p.pressure - 990, 4) for p in points],
                sizemode="area", sizeref=0.15,
                color=BRAND_BLUE, opacity=0.5,
            ),
            text=[p.timestamp for p in points],
        ))
        scatter.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS, title="Atmospheric Correlation",
            xaxis_title="Temperature (°C)", yaxis_title="Humidity (%)", height=380,
        )
        st.plotly_chart(scatter, use_container_width=True)

    bars = go.Figure(go.Bar(
        x=[p.timestamp for p in points], y=[p.rainfall for p in points], marker_color=BRAND_MINT,
    ))
    bars.update_layout(**PLOTLY_LAYOUT_DEFAULTS, title="Precipitation Profile (mm)", height=320)
    st.plotly_chart(bars, use_container_width=True)

    summary = summarise_series(points)
    st.dataframe(
        [
            {
                "Metric": f"{field.replace('_', ' ').title()} ({unit})",
                "Min": round(summary[field].minimum, 1),
                "Mean": round(summary[field].mean, 1),
                "Max": round(summary[field].maximum, 1),
            }
            for field, unit in METRICS
            if field in summary
        ],
        hide_index=True,
        use_container_width=True,
    )


def _render_alerts() -> None:
    if controller.error:
        st.markdown(
            f'<div style="border-left:6px solid {ALERT_RED};padding:0.75rem 1rem">'
            f"<strong>Active Warning</strong><br>{controller.error}</div>",
            unsafe_allow_html=True,
        )
        retry_col, dismiss_col, _ = st.columns([1, 1, 4])
        if retry_col.button("Retry", disabled=controller.loading):
            run(controller.refresh(controller.location))
            st.rerun(scope="fragment")
        if dismiss_col.button("Dismiss"):
            controller.dismiss_error()
            st.rerun(scope="fragment")
    else:
        st.success("Atmosphere stable — no sync errors across the current observation grid.")


# ── Live fragment ────────────────────────────────────────────────────────────


@st.fragment(run_every=state.tick_interval)
def live_dashboard() -> None:
    if controller.auto_sync_enabled and not controller.loading and state.tick_due():
        run(controller.tick())

    _render_header()

    current_tab, forecast_tab, analytics_tab, alerts_tab = st.tabs(
        ["Current Weather", "Forecast", "Analytics", "Alerts"],
    )
    with current_tab:
        _render_current()
    with forecast_tab:
        _render_forecast()
    with analytics_tab:
        _render_analytics()
    with alerts_tab:
        _render_alerts()


live_dashboard()
