from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def test_app_renders_without_exceptions():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    assert at.title[0].value.endswith("Simulador Financeiro")
    assert any("sem validade para propostas comerciais" in c.value for c in at.caption)


def test_app_shows_notices_for_ambiguous_input():
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    at.text_input(key="input_asset_value").input("1.234,56").run()
    assert any("AMBIGUOUS_SEPARATORS" in w.value for w in at.warning)
    at.text_input(key="input_iof").input("0,38").run()
    assert any("IOF_NOT_APPLIED" in i.value for i in at.info)
