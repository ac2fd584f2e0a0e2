from typing import List

import streamlit as st

from core.rules import Notice
from core.utils import format_currency, format_months, format_percent
from simulador.calculators import amortization_schedule
from simulador.models import ParsedInputs, SimulationResult
from simulador.presets import MAX_SCHEDULE_MONTHS, RESULT_LABELS

MONEY_FIELDS = [
    "rent_receipt_value",
    "pis_cofins_credit",
    "net_rent_after_pis_cofins",
    "income_tax_reduction",
    "net_rent_value",
]


def render_notices(notices: List[Notice]) -> None:
    for n in notices:
        if n.severity == "warn":
            st.warning(f"[{n.code}] {n.message}")
        else:
            st.info(f"[{n.code}] {n.message}")


def render_results_card(result: SimulationResult, parsed: ParsedInputs) -> None:
    """Results card: every derived value formatted for display."""
    with st.container(border=True):
        st.subheader("Resultados")
        st.caption("Valores calculados automaticamente")
        st.metric(RESULT_LABELS["operation_value"], format_currency(result.operation_value))
        st.metric(RESULT_LABELS["term_months"], f"{format_months(result.term_months)} meses")
        for field in MONEY_FIELDS:
            st.metric(RESULT_LABELS[field], format_currency(getattr(result, field)))
        st.divider()
        st.metric(
            RESULT_LABELS["total_net_investment"],
            format_currency(result.total_net_investment),
        )
        with st.expander("Detalhes da operação"):
            st.caption(f"Taxa banco: {format_percent(parsed.bank_rate)}")
            st.caption(f"IOF: {format_percent(parsed.iof)}")
            if not float(result.term_months).is_integer():
                st.caption("Tabela de amortização disponível apenas para prazos em meses inteiros.")
            elif 0 < result.term_months <= MAX_SCHEDULE_MONTHS:
                schedule = amortization_schedule(
                    parsed.bank_rate, result.term_months, result.operation_value
                )
                st.dataframe(schedule, hide_index=True)
            elif result.term_months > MAX_SCHEDULE_MONTHS:
                st.caption(
                    f"Tabela de amortização disponível para prazos de até {MAX_SCHEDULE_MONTHS} meses."
                )
