from datetime import UTC, datetime, timedelta

TEST_SECRET = "unit-test-secret"
T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=UTC)
ACCESS_TTL = timedelta(minutes=15)
REFRESH_TTL = timedelta(days=7)


class FakeClock:
    """Часы, которые двигаются только вручную."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta
