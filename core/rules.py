from __future__ import annotations
from typing import Literal, List, Dict, Any, Mapping, Union
from pydantic import BaseModel, Field

from simulador.calculators import parse_number
from simulador.models import SimulationInputs
from simulador.presets import INPUT_LABELS


class Notice(BaseModel):
    code: str
    severity: Literal["info", "warn"]
    message: str
    context: Dict[str, Any] = Field(default_factory=dict)


def evaluate_inputs(raw: Union[SimulationInputs, Mapping[str, str]]) -> List[Notice]:
    """Informational notices about how the form fields were interpreted."""
    if isinstance(raw, SimulationInputs):
        raw = raw.model_dump()
    res: List[Notice] = []

    for field, label in INPUT_LABELS.items():
        value = str(raw.get(field, "") or "")
        if "." in value and "," in value:
            res.append(
                Notice(
                    code="AMBIGUOUS_SEPARATORS",
                    severity="warn",
                    message=(
                        f"{label}: use apenas um separador decimal (ponto ou vírgula); "
                        f"valor lido como {parse_number(value)}."
                    ),
                    context={"field": field, "value": value, "parsed": parse_number(value)},
                )
            )

    iof = parse_number(raw.get("iof"))
    if iof > 0:
        res.append(
            Notice(
                code="IOF_NOT_APPLIED",
                severity="info",
                message="O IOF informado não é aplicado no cálculo.",
                context={"iof": iof},
            )
        )

    if parse_number(raw.get("term_months")) <= 0:
        res.append(
            Notice(
                code="ZERO_TERM",
                severity="info",
                message="Prazo igual a zero: todos os valores calculados são zero.",
            )
        )

    return res


def has_warnings(res: List[Notice]) -> bool:
    return any(n.severity == "warn" for n in res)
