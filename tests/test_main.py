"""
tests/test_main.py - app wiring and entry point
"""

from unittest.mock import patch

from growth_tracker import main
from growth_tracker.core.config import settings


def test_healthcheck(client):
    response = client.get("/healthcheck")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_domain_errors_become_json_detail(client):
    response = client.get("/api/v1/users/12345")
    assert response.status_code == 404
    assert response.json() == {"detail": "User with id 12345 not found"}


def test_entry_point_serves_app_with_uvicorn():
    with patch.object(settings, "PORT", 9100), patch("growth_tracker.main.uvicorn.run") as run:
        main.main()

    run.assert_called_once_with(
        "growth_tracker.main:app",
        host=settings.HOST,
        port=9100,
        reload=settings.RELOAD,
    )
