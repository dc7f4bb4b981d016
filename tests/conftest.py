import pytest

from degree_audit.data import AuditParser
from degree_audit.exceptions import CatalogTransportError

from helpers import SAMPLE_AUDIT


@pytest.fixture
def sample_audit():
    return SAMPLE_AUDIT


@pytest.fixture
def requirements(sample_audit):
    return AuditParser().parse(sample_audit)


@pytest.fixture
def transport_error():
    return CatalogTransportError("connection reset")
