DISCLAIMER = (
    "Este cálculo utiliza valores e taxas de mercado apenas como referência, "
    "sem validade para propostas comerciais."
)

# Fixed business rules applied to the rent receipt value.
PIS_COFINS_RATE = 0.0925
INCOME_TAX_RATE = 0.34

INPUT_LABELS = {
    "asset_value": "Valor do bem",
    "term_months": "Prazo em meses",
    "bank_rate": "Taxa banco (%)",
    "iof": "IOF (%)",
    "extra_expenses": "Despesas extras",
}

RESULT_LABELS = {
    "operation_value": "Valor da operação",
    "term_months": "Prazo",
    "rent_receipt_value": "Valor recibo de aluguel",
    "pis_cofins_credit": "Créditos Pis e Cofins",
    "net_rent_after_pis_cofins": "Vlr liq alug Pis Cofins rec",
    "income_tax_reduction": "Redução do I.R.",
    "net_rent_value": "Valor líquido do aluguel",
    "total_net_investment": "Investimento Líquido Total",
}

LOG_LEVEL = "INFO"

# Longest term shown month by month in the schedule table.
MAX_SCHEDULE_MONTHS = 600
