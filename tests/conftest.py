import logging

import pytest

# Header tal cual viene en el export (con los espacios raros)
RAW_HEADER = [" Date", "Description", "Customer  Reference", "Bank     Reference", "Credit", "Debit"]


@pytest.fixture
def raw_header():
    return list(RAW_HEADER)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
