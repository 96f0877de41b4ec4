import pytest
from ime_layouts.fixtures import layout_params
from ime_layouts.layout.layout_base import LayoutBase


@pytest.fixture(scope="function", params=(True, False), ids=("phone", "tablet"))
def is_phone(request: pytest.FixtureRequest) -> bool:
    """
    Parameterizes the form factor.
    """
    return request.param


@pytest.fixture(scope="function", params=layout_params())
def layout(request: pytest.FixtureRequest) -> LayoutBase:
    """
    Parameterizes the registered layouts, restricted by 'IME_LAYOUTS_LOCALES' when set.
    """
    return request.param()
