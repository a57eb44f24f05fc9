import pytest
import numpy.random
from setalgebra import continue_element_checks


@pytest.fixture(autouse=True)
def restore_storage_registry():
    from setalgebra import construct
    registered = dict(construct._registered_storage)
    yield
    construct._registered_storage.clear()
    construct._registered_storage.update(registered)


def pytest_runtest_setup(item):
    """ Hook function which is called before every test """
    continue_element_checks()

    # Fix the seed so that the random property tests are reproducible
    numpy.random.seed(21)
