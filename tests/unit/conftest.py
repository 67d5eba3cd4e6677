import pytest

from kneel.http.types import Request, Response


class FakeHttp:
    def __init__(self, response: Response) -> None:
        self.response = response
        self.requests: list[Request] = []

    async def __call__(self, request: Request) -> Response:
        self.requests.append(request)
        return self.response

    @property
    def request(self) -> Request:
        assert len(self.requests) == 1
        return self.requests[0]


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp(Response(200, b'{ "message": "hello" }'))
