"""Test public API imports for ksgte package."""


def test_main_package_import():
    """Test that the main ksgte package can be imported."""
    import ksgte

    assert hasattr(ksgte, "__version__")
    assert isinstance(ksgte.__version__, str)
    assert len(ksgte.__version__) > 0


def test_main_exports():
    """Test that main exports are available."""
    import ksgte

    assert hasattr(ksgte, "TEVars")
    assert hasattr(ksgte, "transferentropy_kraskov")
    assert hasattr(ksgte, "transferentropy_kraskov_k1k2")
    assert hasattr(ksgte, "DimensionalityError")
    assert hasattr(ksgte, "NeighborCountError")
    assert hasattr(ksgte, "PartitionIndexError")


def test_submodule_imports():
    """Test that submodules are importable."""
    import ksgte.information
    import ksgte.utils

    assert hasattr(ksgte.information, "__all__")
    assert hasattr(ksgte.utils, "__all__")


def test_aliases():
    """Short aliases point at the estimators."""
    from ksgte import information

    assert information.tekraskov is information.transferentropy_kraskov
    assert information.tekNN is information.transferentropy_kraskov_k1k2


def test_all_names_resolve():
    """Every name in __all__ is an attribute of its module."""
    import ksgte
    import ksgte.information
    import ksgte.utils

    for module in (ksgte, ksgte.information, ksgte.utils):
        for name in module.__all__:
            assert hasattr(module, name), f"{module.__name__}.{name} missing"
