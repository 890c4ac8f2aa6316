"""Error hierarchy and message formatting."""

import pytest

from lineblocks import convert
from lineblocks.errors import ConfigError, ContractError, LineblocksError
from lineblocks.flavors import get_flavor


class TestContractError:
    """ContractError formatting and hierarchy."""

    def test_basic_format(self) -> None:
        err = ContractError("bulleted", "matched an empty marker")
        assert str(err) == "bulleted: matched an empty marker"
        assert err.lineno is None

    def test_with_line_number(self) -> None:
        err = ContractError("document", "missing line", lineno=0)
        assert str(err) == "document (line 0): missing line"
        assert err.collaborator == "document"

    def test_is_lineblocks_error(self) -> None:
        assert isinstance(ContractError("x", "y"), LineblocksError)


class TestConfigError:
    """ConfigError surfaces through the public API."""

    def test_is_lineblocks_error(self) -> None:
        assert issubclass(ConfigError, LineblocksError)

    def test_unknown_flavor(self) -> None:
        with pytest.raises(ConfigError):
            get_flavor("nope")


class TestMalformedInput:
    """Odd markup renders instead of raising."""

    @pytest.mark.parametrize(
        "source",
        [
            "-",
            "- ",
            "-  \n\n\n",
            "    > orphan quote",
            "- a\n\t\t",
            "- a\n    >",
            "\n\n\n- a\n\n\n\n",
            "1. \n2.",
        ],
    )
    def test_renders(self, source: str) -> None:
        assert isinstance(convert(source), str)
