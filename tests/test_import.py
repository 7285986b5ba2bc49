"""Basic import tests to verify package structure."""


def test_import_watorsim():
    """Verify main package imports."""
    import watorsim
    assert watorsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from watorsim import core
    assert hasattr(core, "__doc__")
    assert hasattr(core, "World")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from watorsim import analysis
    assert hasattr(analysis, "__doc__")


def test_import_viz():
    """Verify viz module structure exists."""
    from watorsim import viz
    assert hasattr(viz, "render_text")
