from __future__ import annotations
import logging
import math
import re
from typing import Mapping, Union

import pandas as pd

from simulador.models import ParsedInputs, ScheduleRow, SimulationInputs, SimulationResult
from simulador.presets import INCOME_TAX_RATE, PIS_COFINS_RATE

logger = logging.getLogger(__name__)

_NOT_NUMERIC = re.compile(r"[^\d.,]")
# Longest leading decimal literal, read the way a browser ``parseFloat`` does.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

SCHEDULE_COLUMNS = list(ScheduleRow.model_fields)


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Parsed form fields and spreadsheet-like inputs may come through as
    ``None`` or ``NaN``.  Coercing them here keeps later math from breaking
    when a value is missing.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def sanitize_input(value) -> str:
    """Strip every character that is not a digit, ``.`` or ``,``.

    Well-formedness is not checked: ``"1.2.3"`` passes through unchanged.
    """

    if value is None:
        return ""
    return _NOT_NUMERIC.sub("", str(value))


def parse_number(value) -> float:
    """Parse a form field into a float, degrading anything unreadable to ``0``.

    The first comma is treated as the decimal separator, then the longest
    numeric prefix is read.  ``"1,5"`` gives ``1.5`` and ``"12abc"`` gives
    ``12``.  A value mixing both separators such as ``"1.234,56"`` becomes
    ``"1.234.56"`` and reads as ``1.234``.
    """

    if value is None:
        return 0.0
    text = str(value).strip()
    if not text:
        return 0.0
    match = _NUMBER_PREFIX.match(text.replace(",", ".", 1))
    if match is None:
        return 0.0
    return nz(match.group(0))


def payment(rate_percent, periods, present_value):
    """Constant installment that repays ``present_value`` in ``periods`` steps.

    ``rate_percent`` is the periodic interest rate as a percentage (``2.5``
    for 2.5% a month).  A zero rate divides the principal evenly.  The
    number of periods must be positive; callers short-circuit a zero term
    before getting here.
    """

    if periods <= 0:
        raise ValueError("periods must be > 0")
    if rate_percent == 0:
        return present_value / periods
    r = rate_percent / 100
    try:
        growth = (1 + r) ** periods
    except OverflowError:
        # growth / (growth - 1) tends to 1 for very long terms
        return present_value * r
    if growth == 1:
        return present_value / periods
    return present_value * r * growth / (growth - 1)


def apply_tax_adjustments(rent_receipt_value):
    """Apply the PIS/COFINS credit and the income tax reduction in sequence."""

    pis_cofins_credit = rent_receipt_value * PIS_COFINS_RATE
    net_rent_after_pis_cofins = rent_receipt_value - pis_cofins_credit
    income_tax_reduction = net_rent_after_pis_cofins * INCOME_TAX_RATE
    net_rent_value = net_rent_after_pis_cofins - income_tax_reduction
    return {
        "pis_cofins_credit": pis_cofins_credit,
        "net_rent_after_pis_cofins": net_rent_after_pis_cofins,
        "income_tax_reduction": income_tax_reduction,
        "net_rent_value": net_rent_value,
    }


def parse_inputs(inputs: Union[SimulationInputs, Mapping[str, str]]) -> ParsedInputs:
    """Parse the five fields the way the form does.

    Every value goes through ``sanitize_input`` first, so signs and other
    noise are dropped and no field is ever negative.  A mapping that leaves
    a field out reads it as empty, that is ``0``.
    """

    if isinstance(inputs, SimulationInputs):
        raw = inputs.model_dump()
    else:
        raw = {field: "" for field in SimulationInputs.model_fields}
        raw.update({k: v for k, v in dict(inputs).items() if k in raw})
    return ParsedInputs(
        **{field: parse_number(sanitize_input(value)) for field, value in raw.items()}
    )


def compute_results(inputs: Union[SimulationInputs, Mapping[str, str]]) -> SimulationResult:
    """Recompute every derived value from the raw form fields.

    A term of zero months (or less) yields a rent receipt of ``0`` and
    therefore zero for everything downstream.  IOF is parsed but does not
    take part in any figure.
    """

    p = parse_inputs(inputs)
    operation_value = p.asset_value + p.extra_expenses
    if p.term_months > 0:
        rent_receipt_value = payment(p.bank_rate, p.term_months, operation_value)
    else:
        rent_receipt_value = 0.0
    taxes = apply_tax_adjustments(rent_receipt_value)
    result = SimulationResult(
        operation_value=operation_value,
        term_months=p.term_months,
        rent_receipt_value=rent_receipt_value,
        total_net_investment=taxes["net_rent_value"] * p.term_months,
        **taxes,
    )
    logger.debug(
        "recomputed: operation=%s term=%s rate=%s rent=%s total=%s",
        operation_value,
        p.term_months,
        p.bank_rate,
        rent_receipt_value,
        result.total_net_investment,
    )
    return result


def amortization_schedule(rate_percent, periods, present_value) -> pd.DataFrame:
    """Month-by-month breakdown of the constant installment.

    Each row splits the installment into interest on the opening balance
    and principal repaid.  The closing balance of the last row is zero up
    to floating point error.  Fractional terms are truncated to whole
    installments for the table.
    """

    n = int(nz(periods))
    if n < 1:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    installment = payment(nz(rate_percent), n, nz(present_value))
    r = nz(rate_percent) / 100
    balance = nz(present_value)
    rows = []
    for month in range(1, n + 1):
        interest = balance * r
        principal = installment - interest
        closing = balance - principal
        rows.append(
            ScheduleRow(
                Mes=month,
                SaldoInicial=balance,
                Juros=interest,
                Amortizacao=principal,
                Parcela=installment,
                SaldoFinal=closing,
            ).model_dump()
        )
        balance = closing
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)
