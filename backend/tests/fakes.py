"""Test doubles - stub resolver and spy services at the service boundary."""

from placeshare.core.domain_types import Coordinates
from placeshare.core.result import Ok, Result

EMPIRE_STATE = Coordinates(lat=40.7484, lng=-73.9857)


class StubResolver:
    """CoordinateResolver returning a fixed result and recording addresses."""

    def __init__(self, result: Result[Coordinates] | None = None):
        self.result = result if result is not None else Ok(EMPIRE_STATE)
        self.calls: list[str] = []

    async def resolve(self, address: str) -> Result[Coordinates]:
        self.calls.append(address)
        return self.result


class SpyService:
    """Records every operation call; any call made is a test failure signal."""

    def __init__(self):
        self.calls: list[str] = []

    def __getattr__(self, name: str):
        async def _record(*args, **kwargs):
            self.calls.append(name)
            raise AssertionError(f"{name} should not have been called")
        return _record
