"""
Pytest configuration and shared fakes.

Why: Force AnyIO to use the asyncio backend, and give every test an
in-memory stand-in for the records backend wired through
`httpx.MockTransport`, so no test needs a running server.
"""
from __future__ import annotations

import json
import re
from typing import Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from studentms.identity_access.stores import SessionStore
from studentms.records.client import RecordsApi
from studentms.web.config import Settings
from studentms.web.main import create_app

BACKEND_BASE = "http://backend.test/api"

Override = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeClock:
    """Manually advanced monotonic clock for toast expiry."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBackend:
    """Minimal records backend following api/records-backend.yml."""

    def __init__(self) -> None:
        self.students: Dict[int, dict] = {}
        self.users: Dict[int, dict] = {
            1: {"id": 1, "username": "admin", "password": "admin123", "role": "ADMIN"},
            2: {"id": 2, "username": "user1", "password": "user123", "role": "USER"},
        }
        self.calls: List[Tuple[str, str]] = []
        self.bodies: List[Optional[dict]] = []
        self._overrides: Dict[Tuple[str, str], Override] = {}
        self._next_student_id = 1
        self._next_user_id = 3

    # --- Test helpers -----------------------------------------------------

    def add_student(self, name: str, email: str, course: str = "B.Tech", department: str = "Computer Science") -> dict:
        sid = self._next_student_id
        self._next_student_id += 1
        rec = {"id": sid, "name": name, "email": email, "course": course, "department": department}
        self.students[sid] = rec
        return rec

    def fail(self, method: str, path: str, outcome: Override) -> None:
        """Force the next and all later calls of `method path` to `outcome`."""
        self._overrides[(method, path)] = outcome

    def recover(self, method: str, path: str) -> None:
        self._overrides.pop((method, path), None)

    def count(self, method: Optional[str] = None, path: Optional[str] = None) -> int:
        return sum(
            1 for m, p in self.calls if (method is None or m == method) and (path is None or p == path)
        )

    # --- Transport --------------------------------------------------------

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path.startswith("/api"):
            path = path[len("/api"):]
        body = json.loads(request.content) if request.content else None
        self.calls.append((request.method, path))
        self.bodies.append(body)

        override = self._overrides.get((request.method, path))
        if isinstance(override, Exception):
            raise override
        if isinstance(override, httpx.Response):
            return override
        if callable(override):
            return override(request)
        return self._route(request.method, path, request, body)

    def _route(self, method: str, path: str, request: httpx.Request, body: Optional[dict]) -> httpx.Response:
        if (method, path) == ("POST", "/auth/login"):
            for user in self.users.values():
                if user["username"] == body.get("username") and user["password"] == body.get("password"):
                    return httpx.Response(
                        200, json={"username": user["username"], "role": user["role"], "message": "Login successful!"}
                    )
            return httpx.Response(401, json={"message": "Invalid username or password"})

        if (method, path) == ("GET", "/students/count"):
            return httpx.Response(200, json={"total": len(self.students)})
        if (method, path) == ("GET", "/students"):
            return httpx.Response(200, json=list(self.students.values()))
        if (method, path) == ("GET", "/students/search"):
            needle = request.url.params.get("name", "").lower()
            return httpx.Response(200, json=[s for s in self.students.values() if needle in s["name"].lower()])
        if (method, path) == ("POST", "/students"):
            if any(s["email"] == body["email"] for s in self.students.values()):
                return httpx.Response(400, json={"message": "Email already exists: " + body["email"]})
            rec = self.add_student(body["name"], body["email"], body["course"], body["department"])
            return httpx.Response(201, json=rec)

        match = re.fullmatch(r"/students/(\d+)", path)
        if match:
            sid = int(match.group(1))
            if sid not in self.students:
                return httpx.Response(404, json={"message": "Student not found"})
            if method == "PUT":
                self.students[sid].update(body)
                return httpx.Response(200, json=self.students[sid])
            if method == "DELETE":
                self.students.pop(sid)
                return httpx.Response(200, json={"message": "Student deleted successfully"})

        if (method, path) == ("GET", "/users"):
            return httpx.Response(
                200, json=[{k: v for k, v in u.items() if k != "password"} for u in self.users.values()]
            )
        if (method, path) == ("POST", "/users"):
            if any(u["username"] == body["username"] for u in self.users.values()):
                return httpx.Response(409, json={"message": f"Username '{body['username']}' is already taken."})
            uid = self._next_user_id
            self._next_user_id += 1
            self.users[uid] = {"id": uid, **body}
            return httpx.Response(
                201,
                json={"message": "User created successfully!", "id": uid, "username": body["username"], "role": body["role"]},
            )

        match = re.fullmatch(r"/users/(\d+)", path)
        if match and method == "DELETE":
            uid = int(match.group(1))
            if self.users.pop(uid, None) is None:
                return httpx.Response(404, json={"message": "User not found"})
            return httpx.Response(200, json={"message": "User deleted"})

        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def api(backend: FakeBackend) -> RecordsApi:
    return RecordsApi(BACKEND_BASE, transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app(api: RecordsApi, clock: FakeClock):
    settings = Settings(environment="dev", api_base_url=BACKEND_BASE, demo_login=True)
    return create_app(settings, session_store=SessionStore(), api=api, clock=clock)


CSRF_PATTERN = re.compile(r'name="csrf_token" value="([^"]+)"')


def extract_csrf(html: str) -> str:
    match = CSRF_PATTERN.search(html)
    assert match, "page should carry a CSRF token"
    return match.group(1)


async def login_as(client: httpx.AsyncClient, username: str, password: str) -> httpx.Response:
    resp = await client.post("/login", data={"username": username, "password": password})
    assert resp.status_code == 303, resp.text
    return resp


def client_for(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")


def session_csrf(app, client: httpx.AsyncClient) -> str:
    """CSRF token of the client's session (issued once a page was rendered)."""
    return app.state.csrf_tokens[client.cookies.get("studentms_session")]
