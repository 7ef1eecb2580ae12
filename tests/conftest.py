#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from xvalues.cli import main


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys) -> Callable[..., tuple[int, list[str], str]]:
    """Fixture to run the CLI with given arguments and collect exit status, stdout lines and stderr."""

    def _run(*args: str) -> tuple[int, list[str], str]:
        status = main(list(args))
        captured = capsys.readouterr()
        return status, captured.out.splitlines(), captured.err

    return _run
