"""PKGCFG test suite.

Folder taxonomy
- unit/  : Isolated, fast checks of a single module/class/function.
- e2e/   : The ``pkgcfg`` command driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; HTTP goes through ``httpx.MockTransport``.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property, e2e
"""
