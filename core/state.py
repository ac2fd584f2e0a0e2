import streamlit as st

from simulador.calculators import sanitize_input
from simulador.models import SimulationInputs

# Widget keys for the five form fields. Values only live in
# ``st.session_state`` for the current browser session and are never
# written to disk.
FIELD_KEYS = {field: f"input_{field}" for field in SimulationInputs.model_fields}


def init_form_state() -> None:
    """Seed the form fields with their defaults before widgets are created."""
    for field, default in SimulationInputs().model_dump().items():
        st.session_state.setdefault(FIELD_KEYS[field], default)


def sanitize_field(field: str) -> None:
    """``on_change`` callback that keeps only digits and separators."""
    key = FIELD_KEYS[field]
    st.session_state[key] = sanitize_input(st.session_state.get(key, ""))


def current_inputs() -> SimulationInputs:
    """Snapshot the form fields as an immutable input record."""
    return SimulationInputs(
        **{
            field: sanitize_input(st.session_state.get(key, ""))
            for field, key in FIELD_KEYS.items()
        }
    )
