import os

# Keep test runs from writing log files next to the sources
os.environ.setdefault("GSTKIT_LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client():
    from gstkit.main import app
    return TestClient(app)


@pytest.fixture
def standard_rates():
    from gstkit.schemas.gst import TaxRate
    return TaxRate(cgst_rate=9, sgst_rate=9, igst_rate=18, cess_rate=0)
