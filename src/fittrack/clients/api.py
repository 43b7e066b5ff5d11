"""HTTP client for the fittrack API."""

import logging
import os

import httpx

from ..exceptions import APIError
from ..models.exercises import Exercise
from ..models.workout import Workout

logger = logging.getLogger(__name__)

API_URL_ENV = "FITTRACK_API_URL"
DEFAULT_API_URL = "http://127.0.0.1:3000"


def get_api_url(url: str | None = None) -> str:
    """Resolve the API base URL: argument, ``FITTRACK_API_URL``, default."""
    return (url or os.environ.get(API_URL_ENV) or DEFAULT_API_URL).rstrip("/")


class FitnessTrackerClient:
    """Client for the ``/api`` endpoints of a running fittrack server."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = get_api_url(base_url)
        self._transport = transport
        self._timeout = timeout

    async def _request(self, method: str, path: str, **kwargs):
        async with httpx.AsyncClient(
            base_url=f"{self.base_url}/api",
            transport=self._transport,
            timeout=self._timeout,
        ) as client:
            try:
                response = await client.request(method, path, **kwargs)
            except httpx.HTTPError as e:
                logger.error("%s %s failed: %s", method, path, e)
                raise APIError(f"Could not reach {self.base_url}: {e}") from e

        if response.status_code >= 400:
            try:
                message = response.json().get("error", response.text)
            except (ValueError, AttributeError):
                message = response.text
            raise APIError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("%s %s returned a non-JSON body", method, path)
            raise APIError(
                f"Unexpected response from {self.base_url}", status_code=response.status_code
            ) from e

    def _expect_list(self, data, what: str) -> list:
        if not isinstance(data, list):
            raise APIError(f"Expected a list of {what} from {self.base_url}")
        return data

    async def get_exercises(self) -> list[Exercise]:
        """Fetch the exercise catalog."""
        data = self._expect_list(await self._request("GET", "/exercises"), "exercises")
        return [Exercise.from_dict(e) for e in data if isinstance(e, dict) and e.get("name")]

    async def create_exercise(
        self, name: str, category: str | None = None, equipment: str | None = None
    ) -> Exercise:
        """Add an exercise to the catalog."""
        payload = {"name": name, "category": category, "equipment": equipment}
        data = await self._request("POST", "/exercises", json=payload)
        return Exercise.from_dict(data)

    async def get_workouts(self) -> list[Workout]:
        """Fetch every logged workout."""
        data = self._expect_list(await self._request("GET", "/workouts"), "workouts")
        return [Workout.from_dict(w) for w in data if isinstance(w, dict)]

    async def get_workout(self, workout_id: int) -> Workout:
        data = await self._request("GET", f"/workouts/{workout_id}")
        return Workout.from_dict(data)

    async def create_workout(self, workout: Workout) -> Workout:
        """Log a workout; returns it with its assigned id."""
        payload = workout.to_dict()
        payload.pop("id", None)
        data = await self._request("POST", "/workouts", json=payload)
        return Workout.from_dict(data)

    async def update_workout(self, workout_id: int, **changes) -> Workout:
        """Update selected fields of a workout (e.g. ``notes="..."``)."""
        data = await self._request("PUT", f"/workouts/{workout_id}", json=changes)
        return Workout.from_dict(data)

    async def delete_workout(self, workout_id: int) -> Workout:
        data = await self._request("DELETE", f"/workouts/{workout_id}")
        return Workout.from_dict(data["workout"])

    async def get_stats(self) -> dict:
        """Fetch the server-side summary statistics."""
        return await self._request("GET", "/stats")
