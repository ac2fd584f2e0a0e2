import streamlit as st

from core.state import FIELD_KEYS, init_form_state, sanitize_field, current_inputs
from simulador.models import SimulationInputs
from simulador.presets import INPUT_LABELS


def render_input_card() -> SimulationInputs:
    """Render the five operation fields and return the sanitized snapshot."""
    init_form_state()
    with st.container(border=True):
        st.subheader("Dados da Operação")
        st.caption("Insira os valores para calcular")
        for field, label in INPUT_LABELS.items():
            st.text_input(
                label,
                key=FIELD_KEYS[field],
                placeholder="0",
                on_change=sanitize_field,
                args=(field,),
            )
    return current_inputs()
