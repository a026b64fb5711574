"""Tests to verify project scaffolding is correct."""


def test_import_planificador():
    """Verify planificador package can be imported."""
    import planificador

    assert planificador.__version__ == "0.1.0"


def test_import_core_modules():
    """Verify core submodules can be imported."""
    from planificador import core
    from planificador.core import entities
    from planificador.core import errors
    from planificador.core import result
    from planificador.core import scenario

    assert core is not None
    assert entities is not None
    assert errors is not None
    assert result is not None
    assert scenario is not None


def test_import_client_and_session_modules():
    """Verify client and session submodules can be imported."""
    from planificador.client import solver
    from planificador.session import controller
    from planificador.session import state

    assert solver is not None
    assert controller is not None
    assert state is not None


def test_import_results_modules():
    """Verify results submodules can be imported."""
    from planificador import results
    from planificador.results import geometry
    from planificador.results import rows
    from planificador.results import series
    from planificador.results import views

    assert results is not None
    assert geometry is not None
    assert rows is not None
    assert series is not None
    assert views is not None


def test_import_dependencies():
    """Verify key dependencies are installed."""
    import numpy as np
    import pandas as pd
    import plotly
    import requests
    import streamlit

    assert np is not None
    assert pd is not None
    assert plotly is not None
    assert requests is not None
    assert streamlit is not None
