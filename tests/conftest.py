import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from fspl_calc import Calculator, LinkInputs


@pytest.fixture
def calc():
    c = Calculator()
    yield c
    c.close()
    plt.close("all")


@pytest.fixture
def defaults():
    return LinkInputs.from_defaults()
