"""Basic import tests to verify package structure."""


def test_import_lifesim():
    """Verify main package imports."""
    import lifesim
    assert lifesim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from lifesim import core
    assert hasattr(core, "Grid")
    assert hasattr(core, "InvalidDimensions")


def test_import_patterns():
    """Verify patterns module structure exists."""
    from lifesim import patterns
    assert hasattr(patterns, "__doc__")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from lifesim import analysis
    assert hasattr(analysis, "__doc__")
