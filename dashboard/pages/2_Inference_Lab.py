"""SkySync Inference Lab — synthetic parameter simulation and model benchmarks."""

from __future__ import annotations

import streamlit as st

from shared import (
    CONDITION_ICONS,
    MODEL_BENCHMARKS,
    PredictionService,
    Season,
    format_confidence,
    format_reading,
    get_app_state,
    run,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="SkySync Inference Lab",
    page_icon="\U0001f9e0",
    layout="wide",
)

state = get_app_state()
service = PredictionService()

st.title("Inference Laboratory")
st.caption("Synthetic parameter simulation on pre-trained LSTM-XGB architectures.")

form_col, result_col = st.columns([1, 2])

# ── Synthetic input ──────────────────────────────────────────────────────────

with form_col:
    with st.form("inference_form"):
        temp = st.number_input("Reference Temp (°C)", value=24.5, step=0.1, format="%.1f")
        humidity = st.slider("Target Humidity (%)", min_value=0, max_value=100, value=65)
        pressure = st.number_input("Isobaric Pressure (hPa)", value=1013, step=1)
        wind = st.number_input("Wind Speed (km/h)", value=12.0, step=0.5)
        season = st.selectbox("Seasonal Context", [s.value for s in Season])
        submitted = st.form_submit_button("Execute Inference", use_container_width=True)

    if submitted:
        with st.spinner("Running inference..."):
            state.prediction = run(service.run(temp, humidity, pressure, wind, season))

# ── Result ───────────────────────────────────────────────────────────────────

with result_col:
    prediction = state.prediction
    if prediction is None:
        st.info(
            "Awaiting simulation. Adjust the synthetic atmospheric parameters and "
            "trigger the inference engine to generate a forecast."
        )
    else:
        st.markdown(
            f"## {CONDITION_ICONS[prediction.condition]} {prediction.condition.value}"
            f"  \n**{format_reading(prediction.temperature, '°C')}** · propagated forecast T+6h"
        )
        kpi1, kpi2, kpi3, kpi4 = st.columns(4)
        kpi1.metric("Humidity", format_reading(prediction.humidity, "%", digits=0))
        kpi2.metric("Wind Rate", format_reading(prediction.wind_speed, "km/h"))
        kpi3.metric("Rainfall", format_reading(prediction.rainfall, "mm"))
        kpi4.metric("Confidence", format_confidence(prediction.confidence))

        st.markdown("##### Algorithmic Justification")
        st.markdown(f"> {prediction.reasoning}")

# ── Model benchmarks ─────────────────────────────────────────────────────────

st.divider()
st.subheader("AI Model Benchmarks")
st.dataframe(
    [
        {
            "Model": m["name"],
            "MAE": m["mae"],
            "RMSE": m["rmse"],
            "Accuracy (%)": m["accuracy"],
            "Latency": m["inference_time"],
            "Notes": m["description"],
        }
        for m in MODEL_BENCHMARKS
    ],
    hide_index=True,
    use_container_width=True,
)
