"""Verify package imports work correctly."""


def test_import_xmlbuilder() -> None:
    """Test that xmlbuilder can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import xmlbuilder

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert xmlbuilder.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from xmlbuilder import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Everything in __all__ is importable from the package root."""
    import xmlbuilder

    for name in xmlbuilder.__all__:
        assert hasattr(xmlbuilder, name), name


def test_render() -> None:
    from xmlbuilder import BuilderConfig, render

    assert render(lambda b: b.tag("br")) == "<br />\n"
    assert render(lambda b: b.element("a").tag("b").end(), config=BuilderConfig(pretty=False)) == (
        "<a><b /></a>"
    )


def test_logger_prefix() -> None:
    from xmlbuilder.utils import get_logger

    assert get_logger("mymodule").name == "xmlbuilder.mymodule"
    assert get_logger("xmlbuilder.builder").name == "xmlbuilder.builder"


def test_builder_module_logger_name() -> None:
    from xmlbuilder import builder

    assert builder.logger.name == "xmlbuilder.builder"
