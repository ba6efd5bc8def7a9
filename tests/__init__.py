"""AEROCODE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the local filesystem (JSON documents, reports).
- e2e/          : The installed CLI driven end-to-end through Click's CliRunner.
- fixtures/     : Shared data builders (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer in-memory adapters over mocks.
- Integration uses real files under pytest's tmp_path.
- E2E asserts user-observable output and on-disk results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
