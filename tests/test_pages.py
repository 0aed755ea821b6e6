import logging
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

ROOT = Path(__file__).resolve().parent.parent
PAGES = sorted((ROOT / "pages").glob("*.py"))


def test_pages_exist():
    assert len(PAGES) == 5


@pytest.mark.parametrize("script", [ROOT / "app.py"] + PAGES, ids=lambda p: p.name)
def test_page_runs(script):
    at = AppTest.from_file(str(script), default_timeout=120)
    at.run()
    assert not at.exception
    assert at.title


def test_degree_slider_updates_metrics():
    at = AppTest.from_file(str(ROOT / "pages" / "03_Polynomial_Degree.py"), default_timeout=60)
    at.run()
    before = at.metric[0].value
    at.slider(key="poly_degree").set_value(8).run()
    assert not at.exception
    assert at.metric[0].value != before


@pytest.mark.parametrize("script", PAGES, ids=lambda p: p.name)
def test_page_sets_up_logging(script):
    logger = logging.getLogger("biasvariance")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    at = AppTest.from_file(str(script), default_timeout=120)
    at.run()
    assert not at.exception
    assert logger.handlers
    assert logger.level == logging.INFO


def test_seed_input_rejects_negative_values():
    at = AppTest.from_file(str(ROOT / "pages" / "01_Mean_Only_Model.py"), default_timeout=60)
    at.run()
    assert at.number_input(key="seed").min == 0
