from core.rules import evaluate_inputs, has_warnings
from simulador.models import SimulationInputs


def _codes(raw):
    return {r.code for r in evaluate_inputs(raw)}


def test_defaults_raise_no_notices():
    assert _codes(SimulationInputs()) == set()


def test_mixed_separators_flagged():
    res = evaluate_inputs({"asset_value": "1.234,56", "term_months": "12"})
    codes = {r.code for r in res}
    assert "AMBIGUOUS_SEPARATORS" in codes
    notice = next(r for r in res if r.code == "AMBIGUOUS_SEPARATORS")
    assert notice.context["field"] == "asset_value"
    assert abs(notice.context["parsed"] - 1.234) < 1e-9
    assert has_warnings(res)


def test_iof_notice_only_when_positive():
    assert "IOF_NOT_APPLIED" in _codes({"iof": "0,38", "term_months": "12"})
    assert "IOF_NOT_APPLIED" not in _codes({"iof": "0", "term_months": "12"})


def test_zero_term_notice():
    assert "ZERO_TERM" in _codes({"term_months": ""})
    assert "ZERO_TERM" not in _codes({"term_months": "1"})


def test_info_notices_are_not_warnings():
    res = evaluate_inputs({"iof": "1", "term_months": "0"})
    assert res
    assert not has_warnings(res)
