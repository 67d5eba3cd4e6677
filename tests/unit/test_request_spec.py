import pytest

from kneel.models import RequestSpec
from kneel.types import NOTHING


class TestRequestSpec:
    """Tests for RequestSpec input validation."""

    def test_url_only(self) -> None:
        spec = RequestSpec("https://x/y")
        assert spec.method is None
        assert spec.headers is None
        assert spec.input is NOTHING
        assert not spec.has_input
        assert spec.auto_content_type

    def test_input_and_schema(self) -> None:
        spec = RequestSpec("https://x/y", input={"name": "A"}, input_schema=dict)
        assert spec.has_input

    def test_none_is_a_valid_input(self) -> None:
        spec = RequestSpec("https://x/y", input=None, input_schema=type(None))
        assert spec.has_input

    def test_input_without_schema_raises(self) -> None:
        with pytest.raises(ValueError, match="input requires an input_schema"):
            RequestSpec("https://x/y", input={"name": "A"})

    def test_schema_without_input_raises(self) -> None:
        with pytest.raises(ValueError, match="input_schema requires an input"):
            RequestSpec("https://x/y", input_schema=dict)

    def test_replace(self) -> None:
        spec = RequestSpec("/users", method="GET")
        replaced = spec.replace(url="https://api.example.com/users")
        assert replaced == RequestSpec("https://api.example.com/users", method="GET")
        assert spec.url == "/users"

    def test_replace_revalidates(self) -> None:
        spec = RequestSpec("/users", input={"a": 1}, input_schema=dict)
        with pytest.raises(ValueError):
            spec.replace(input_schema=None)
