from pydantic import BaseModel


class RunIn(BaseModel):
    date: str | None = None
    distance: float | str | None = None
    duration: float | str | None = None
    location: str | None = None


class Run(BaseModel):
    id: int
    date: str
    distance: float
    duration: int
    pace: str
    location: str


class HealthOut(BaseModel):
    status: str
    timestamp: str


class ErrorOut(BaseModel):
    error: str
