"""ROSTER test suite.

Folder taxonomy
- unit/         : Parser, handlers, bus, config, and CLI helpers in isolation.
- contract/     : Collection behavior every directory adapter must share.
- functional/   : What a new user sees through `roster --help` and the shell.
- e2e/          : Full `roster` invocations through Click's CliRunner.

Markers
- unit, contract, and functional are applied by each folder's conftest.
- Hypothesis tests carry @pytest.mark.property and live beside the layer they exercise.
"""
