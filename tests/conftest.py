import sys

import pytest


@pytest.fixture
def digit_limit():
    """Sets the process-wide int <-> str digit limit; restored afterwards."""
    previous = sys.get_int_max_str_digits()
    yield sys.set_int_max_str_digits
    sys.set_int_max_str_digits(previous)
