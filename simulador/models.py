from pydantic import BaseModel, ConfigDict


class SimulationInputs(BaseModel):
    """Raw form fields exactly as typed (after sanitizing)."""

    model_config = ConfigDict(frozen=True)

    asset_value: str = "50000000"
    term_months: str = "60"
    bank_rate: str = "2.5"
    iof: str = "0"
    extra_expenses: str = "0"


class ParsedInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    asset_value: float = 0.0
    term_months: float = 0.0
    bank_rate: float = 0.0
    iof: float = 0.0
    extra_expenses: float = 0.0


class SimulationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    operation_value: float = 0.0
    term_months: float = 0.0
    rent_receipt_value: float = 0.0
    pis_cofins_credit: float = 0.0
    net_rent_after_pis_cofins: float = 0.0
    income_tax_reduction: float = 0.0
    net_rent_value: float = 0.0
    total_net_investment: float = 0.0


class ScheduleRow(BaseModel):
    Mes: int = 1
    SaldoInicial: float = 0.0
    Juros: float = 0.0
    Amortizacao: float = 0.0
    Parcela: float = 0.0
    SaldoFinal: float = 0.0
