import pytest


@pytest.fixture(autouse=True)
def clean_swu_env(monkeypatch):
    """Keep developer SWU_CALC_* settings out of the tests."""
    for name in ("SWU_CALC_LOG_LEVEL", "SWU_CALC_MASS_UNIT", "SWU_CALC_ASSAY_UNIT"):
        monkeypatch.delenv(name, raising=False)
