"""ENLIST test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : The real in-memory adapters wired together by the bootstrap.
- e2e/          : The `enlist` CLI invoked through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; collaborators are replaced by the stubs,
  fakes and spies in `tests/unit/service_layer/doubles.py`.
- Coroutine tests use `@pytest.mark.asyncio`.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, e2e, property
"""
