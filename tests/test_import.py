"""Verify package imports work correctly."""


def test_import_ramitas() -> None:
    """Test that ramitas can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import ramitas

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert ramitas.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from ramitas import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import ramitas

    for name in ramitas.__all__:
        assert hasattr(ramitas, name), name


def test_renderer_conforms_to_protocol() -> None:
    from ramitas import HtmlRenderer, MarkupRenderer

    assert isinstance(HtmlRenderer(), MarkupRenderer)
