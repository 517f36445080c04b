"""Unit tests for the process entry point transport selection."""

from unittest.mock import MagicMock, patch

import capmesh.__main__ as entrypoint
from capmesh.server.core.config import Settings


class TestMain:
    def test_sse_transport_runs_http(self):
        sse_settings = Settings(transport="sse")

        with (
            patch.object(entrypoint, "settings", sse_settings),
            patch.object(entrypoint, "run_http") as run_http,
            patch.object(entrypoint, "create_server") as create_server,
        ):
            entrypoint.main()

        run_http.assert_called_once_with(sse_settings)
        create_server.assert_not_called()

    def test_stdio_transport_runs_stdio(self):
        stdio_settings = Settings(transport="stdio")
        server = MagicMock()

        with (
            patch.object(entrypoint, "settings", stdio_settings),
            patch.object(entrypoint, "setup_logging") as setup_logging,
            patch.object(entrypoint, "create_server", return_value=(server, MagicMock())) as create_server,
            patch.object(entrypoint, "run_stdio", new_callable=MagicMock) as run_stdio,
            patch.object(entrypoint.asyncio, "run") as asyncio_run,
        ):
            entrypoint.main()

        setup_logging.assert_called_once_with()
        create_server.assert_called_once_with(stdio_settings)
        run_stdio.assert_called_once_with(server)
        asyncio_run.assert_called_once_with(run_stdio.return_value)

    def test_keyboard_interrupt_is_clean_exit(self):
        with (
            patch.object(entrypoint, "settings", Settings(transport="stdio")),
            patch.object(entrypoint, "setup_logging"),
            patch.object(entrypoint, "create_server", return_value=(MagicMock(), MagicMock())),
            patch.object(entrypoint, "run_stdio"),
            patch.object(entrypoint.asyncio, "run", side_effect=KeyboardInterrupt),
        ):
            entrypoint.main()
