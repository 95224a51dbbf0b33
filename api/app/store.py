import logging
import math

from fastapi import Request

from .errors import InvalidField, MissingField, NotFound
from .pace import calculate_pace
from .schemas import Run, RunIn

logger = logging.getLogger("running_tracker.store")

SEED_RUNS = [
    {
        "id": 1,
        "date": "2024-01-15",
        "distance": 5.2,
        "duration": 28,
        "pace": "5:23",
        "location": "Central Park",
    },
    {
        "id": 2,
        "date": "2024-01-17",
        "distance": 3.1,
        "duration": 18,
        "pace": "5:48",
        "location": "Riverside Trail",
    },
]

ID_POLICIES = ("counter", "length")


def _is_blank(value) -> bool:
    # null, "" and 0 all count as absent
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    return value == 0


def _to_number(value) -> float:
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidField()
    if not math.isfinite(number) or number <= 0:
        raise InvalidField()
    return number


class RunStore:
    """Process-local, insertion-ordered collection of runs."""

    def __init__(self, runs: list[Run] | None = None, id_policy: str = "counter"):
        if id_policy not in ID_POLICIES:
            raise ValueError(f"unknown id policy: {id_policy!r}")
        self.id_policy = id_policy
        self._runs: list[Run] = list(runs or [])
        self._last_id = max((r.id for r in self._runs), default=0)

    @classmethod
    def seeded(cls, id_policy: str = "counter") -> "RunStore":
        return cls([Run(**r) for r in SEED_RUNS], id_policy=id_policy)

    def __len__(self) -> int:
        return len(self._runs)

    def _next_id(self) -> int:
        if self.id_policy == "length":
            return len(self._runs) + 1
        return self._last_id + 1

    def all(self) -> list[Run]:
        return list(self._runs)

    def create(self, payload: RunIn) -> Run:
        if _is_blank(payload.date) or _is_blank(payload.distance) or _is_blank(payload.duration):
            raise MissingField()

        distance = _to_number(payload.distance)
        duration = int(_to_number(payload.duration))
        if duration <= 0:
            raise InvalidField()
        # tiny distances overflow the pace division
        if not math.isfinite(duration / distance):
            raise InvalidField()

        run = Run(
            id=self._next_id(),
            date=payload.date,
            distance=distance,
            duration=duration,
            pace=calculate_pace(distance, duration),
            location=payload.location or "Unknown",
        )
        self._runs.append(run)
        self._last_id = max(self._last_id, run.id)
        logger.info("created run id=%s pace=%s", run.id, run.pace)
        return run

    def delete(self, run_id: int) -> None:
        for index, run in enumerate(self._runs):
            if run.id == run_id:
                del self._runs[index]
                logger.info("deleted run id=%s", run_id)
                return
        raise NotFound()

    def clear(self) -> None:
        self._runs.clear()


async def get_store(request: Request) -> RunStore:
    return request.app.state.store
