"""Request-scoped transaction: a failed commit must reach the client."""
from fastapi import Depends
from sqlalchemy.exc import OperationalError

from myflix.infrastructure.database import connection
from myflix.interfaces.dependencies import get_facade


class _FailingCommitSession:
    def __init__(self):
        self.rolled_back = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def commit(self):
        raise OperationalError("COMMIT", {}, Exception("server closed the connection unexpectedly"))

    async def rollback(self):
        self.rolled_back = True


def _client_with_session(monkeypatch, session):
    from fastapi.testclient import TestClient

    from myflix.main import create_app

    monkeypatch.setattr(connection, "get_session_factory", lambda: (lambda: session))
    app = create_app()

    @app.post("/_commit_check")
    async def commit_check(facade=Depends(get_facade)):
        return {"ok": True}

    return TestClient(app, raise_server_exceptions=False)


def test_failed_commit_is_503_not_success(monkeypatch):
    session = _FailingCommitSession()
    client = _client_with_session(monkeypatch, session)

    resp = client.post("/_commit_check")

    assert resp.status_code == 503
    assert resp.json() == {"detail": "Service temporarily unavailable"}
    assert session.rolled_back
