import logging

import streamlit as st

from core.rules import evaluate_inputs
from core.version import __version__
from simulador.calculators import compute_results, parse_inputs
from simulador.presets import DISCLAIMER, LOG_LEVEL
from ui.forms import render_input_card
from ui.results import render_notices, render_results_card

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Simulador Financeiro", page_icon="🧮", layout="wide")

st.title("🧮 Simulador Financeiro")
st.caption(f"Avaliação de Projetos - Equipamentos • v{__version__}")

left, right = st.columns(2)
with left:
    inputs = render_input_card()

# Every rerun recomputes the whole result from the current form snapshot.
result = compute_results(inputs)

with right:
    render_results_card(result, parse_inputs(inputs))

render_notices(evaluate_inputs(inputs))

with st.container(border=True):
    st.caption(DISCLAIMER)
