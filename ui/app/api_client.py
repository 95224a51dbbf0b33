import os

import requests

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")


def list_runs() -> list[dict]:
    r = requests.get(f"{API_BASE_URL}/api/runs", timeout=15)
    r.raise_for_status()
    return r.json()


def create_run(payload: dict) -> dict:
    r = requests.post(f"{API_BASE_URL}/api/runs", json=payload, timeout=15)
    r.raise_for_status()
    return r.json()


def delete_run(run_id: int) -> None:
    r = requests.delete(f"{API_BASE_URL}/api/runs/{run_id}", timeout=15)
    r.raise_for_status()


def health() -> dict:
    r = requests.get(f"{API_BASE_URL}/health", timeout=5)
    r.raise_for_status()
    return r.json()


def error_message(exc: requests.HTTPError) -> str:
    if exc.response is None:
        return str(exc)
    try:
        return exc.response.json().get("error", str(exc))
    except ValueError:
        return str(exc)
