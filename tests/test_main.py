from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from verformat.__main__ import _print_startup_error, main


@pytest.mark.unit
class TestMain:
    """Tests for main() entry point function."""

    @pytest.mark.parametrize(
        "exit_code",
        [0, 1, 2, 130],
        ids=["success", "failure", "usage", "interrupted"],
    )
    def test_returns_cli_exit_code(self, exit_code: int) -> None:
        """Test main returns the exit code of the CLI entry point."""
        cli_module = MagicMock()
        cli_module.main = MagicMock(return_value=exit_code)

        with patch.dict("sys.modules", {"verformat.cli": cli_module}):
            result = main()

        assert result == exit_code
        cli_module.main.assert_called_once_with()

    def test_import_error_returns_one(self, capsys: pytest.CaptureFixture) -> None:
        """Test main returns 1 and reports when the CLI cannot be imported."""
        with patch.dict("sys.modules", {"verformat.cli": None}):
            result = main()

        assert result == 1
        captured = capsys.readouterr()
        assert "verformat CLI could not be loaded" in captured.err
        assert "ImportError:" in captured.err


@pytest.mark.unit
class TestPrintStartupError:
    """Tests for _print_startup_error."""

    def test_includes_versions_and_error(self, capsys: pytest.CaptureFixture) -> None:
        """Test the report names Python, verformat and the import error."""
        _print_startup_error(ImportError("No module named 'click'"))

        err = capsys.readouterr().err
        assert "Python version" in err
        assert "verformat version: 1.0.0" in err
        assert "No module named 'click'" in err
