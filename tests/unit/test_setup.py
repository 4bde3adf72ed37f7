"""
Basic test to verify package setup is correct.
"""

def test_package_imports():
    """Test that the package can be imported."""
    import smtembed
    assert smtembed.__version__ == "0.1.0"
    assert hasattr(smtembed, '__version__')


def test_package_structure():
    """Test that subpackages are accessible."""
    from smtembed import solver, translator
    assert hasattr(solver, "Z3Solver")
    assert hasattr(translator, "SortTranslator")
