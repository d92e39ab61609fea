from pytest import fixture

from orderedbag.configurations import Configurations


@fixture
def strict_configurations():
    return Configurations(verify_invariants=True)
