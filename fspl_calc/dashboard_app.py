"""Streamlit page for the FSPL / received-power calculator.

Renders:
- Mode tabs (single frequency / frequency range)
- Input form: transmit power, distance, frequency or sweep, gains, loss
- Result fields, range summary, Pr line chart and a CSV download of the sweep

Usage:
    streamlit run fspl_calc/dashboard_app.py

Pressing Enter inside any field submits the form, same as "Calculate".
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

# Ensure project root is on sys.path when run via `streamlit run .../dashboard_app.py`
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from fspl_calc import (
    DEFAULTS,
    DISTANCE_UNITS,
    FREQUENCY_UNITS,
    POWER_UNITS,
    Calculator,
    LinkInputs,
    Measurement,
    sweep_to_table,
)
from fspl_calc.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

_MODE_LABELS = {"single": "Single frequency", "range": "Frequency range"}
_OUTPUT_LABELS = [
    ("pt", "Transmit power"),
    ("distance", "Distance"),
    ("frequency", "Frequency"),
    ("fspl", "FSPL"),
    ("pr", "Received power Pr"),
]


def _default_widget_values() -> dict:
    d = DEFAULTS
    return {
        "pt_value": str(d.pt_value),
        "pt_unit": d.pt_unit,
        "d_value": str(d.d_value),
        "d_unit": d.d_unit,
        "f_value": str(d.f_value),
        "f_unit": d.f_unit,
        "f_start": str(d.f_start),
        "f_stop": str(d.f_stop),
        "f_step": str(d.f_step),
        "f_range_unit": d.f_range_unit,
        "gt": str(d.gt_db),
        "gr": str(d.gr_db),
        "loss": str(d.loss_db),
    }


def _inputs_from_state() -> LinkInputs:
    s = st.session_state
    return LinkInputs(
        power=Measurement(s.pt_value, s.pt_unit),
        distance=Measurement(s.d_value, s.d_unit),
        frequency=Measurement(s.f_value, s.f_unit),
        f_start=s.f_start,
        f_stop=s.f_stop,
        f_step=s.f_step,
        f_range_unit=s.f_range_unit,
        gt=s.gt,
        gr=s.gr,
        loss=s.loss,
    )


def _remember(outcome) -> None:
    # Keep the last good result for the table/download; errors leave it alone.
    if outcome.ok:
        st.session_state.last_result = outcome.result


def _init_state() -> None:
    if "calc" in st.session_state:
        return
    setup_logging()
    for key, value in _default_widget_values().items():
        st.session_state[key] = value
    st.session_state.mode = "single"
    st.session_state.last_result = None
    calc = Calculator()
    st.session_state.calc = calc
    _remember(calc.calculate(LinkInputs.from_defaults()))


def _on_mode_change() -> None:
    st.session_state.calc.set_mode(st.session_state.mode)


def _on_reset() -> None:
    for key, value in _default_widget_values().items():
        st.session_state[key] = value
    st.session_state.mode = "single"
    _, outcome = st.session_state.calc.reset()
    logger.debug("inputs reset to defaults")
    _remember(outcome)


def render_inputs(mode: str) -> bool:
    """Draw the input form for ``mode``; returns True when it was submitted."""
    with st.form("link_form"):
        c1, c2 = st.columns([3, 1])
        c1.text_input("Transmit power Pt", key="pt_value")
        c2.selectbox("Unit", POWER_UNITS, key="pt_unit")
        c1, c2 = st.columns([3, 1])
        c1.text_input("Distance d", key="d_value")
        c2.selectbox("Unit", DISTANCE_UNITS, key="d_unit")

        if mode == "single":
            c1, c2 = st.columns([3, 1])
            c1.text_input("Frequency f", key="f_value")
            c2.selectbox("Unit", FREQUENCY_UNITS, key="f_unit")
        else:
            unit = st.session_state.f_range_unit
            c1, c2, c3, c4 = st.columns(4)
            c1.text_input(f"Start ({unit})", key="f_start")
            c2.text_input(f"Stop ({unit})", key="f_stop")
            c3.text_input(f"Step ({unit})", key="f_step")
            c4.selectbox("Range unit", FREQUENCY_UNITS, key="f_range_unit")

        c1, c2, c3 = st.columns(3)
        c1.text_input("Tx gain Gt (dB)", key="gt")
        c2.text_input("Rx gain Gr (dB)", key="gr")
        c3.text_input("Misc. loss L (dB)", key="loss")
        return st.form_submit_button("Calculate", type="primary")


def render_outputs(calc: Calculator) -> None:
    if calc.error:
        st.error(calc.error)

    cols = st.columns(len(_OUTPUT_LABELS))
    for col, (key, label) in zip(cols, _OUTPUT_LABELS):
        col.caption(label)
        col.markdown(f"**{calc.fields.get(key, '—')}**")

    if calc.summary:
        st.info(calc.summary)

    if calc.chart.is_open:
        st.pyplot(calc.chart.figure, clear_figure=False)

    result = st.session_state.last_result
    points = getattr(result, "points", None)
    if calc.mode == "range" and points:
        table = sweep_to_table(points)
        with st.expander("Sweep table"):
            st.dataframe(pd.DataFrame(table[1:], columns=table[0]), use_container_width=True)
        st.download_button(
            label="Download CSV",
            data="\n".join([",".join(r) for r in table]),
            file_name="fspl_sweep.csv",
            mime="text/csv",
        )


def main():
    st.set_page_config(page_title="FSPL Calculator", layout="wide")
    st.title("Free-space path loss / received power")
    st.caption("FSPL(dB) = 32.44 + 20 log10(d_km) + 20 log10(f_MHz);  Pr(dBm) = Pt + Gt + Gr − FSPL − L")

    _init_state()
    calc: Calculator = st.session_state.calc

    st.radio(
        "Mode",
        list(_MODE_LABELS),
        format_func=_MODE_LABELS.get,
        horizontal=True,
        key="mode",
        on_change=_on_mode_change,
    )

    submitted = render_inputs(calc.mode)
    st.button("Reset to defaults", on_click=_on_reset)

    if submitted:
        _remember(calc.calculate(_inputs_from_state()))

    render_outputs(calc)


if __name__ == "__main__":
    main()
