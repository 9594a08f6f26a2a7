import pytest

from tests.helpers.optional_imports import module_available


def test_ct_gui_dependency_availability() -> None:
    if not module_available("PySide6"):
        pytest.skip("ct_gui dependencies missing")
    assert module_available("ct_gui.viewmodels") is True
