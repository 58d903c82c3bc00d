# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Integration tests for the admin API endpoints."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from baila_admin.api.app import create_app
from baila_admin.api.dependencies import (
    get_auth_service,
    get_enrollment_service,
    get_page_size,
    get_report_service,
    get_roster_service,
    get_section_service,
    get_waitlist_service,
    require_admin,
)
from baila_admin.domains.auth.service import InvalidCredentialsError, LoginDisabledError
from baila_admin.domains.enrollment.service import (
    AmbiguousEnrollmentError,
    InvalidDayError,
    SectionFullError,
)
from baila_admin.domains.reports.service import (
    RosterExport,
    UnknownDayError,
    UnsupportedFormatError,
)
from baila_admin.domains.roster.service import StudentNotFoundError
from baila_admin.domains.sections.service import SectionNotFoundError
from baila_admin.models.auth import TokenResponse
from baila_admin.models.enrollment import MoveEnrollmentResponse
from baila_admin.models.reports import MailtoLink, StudentPage


@pytest.fixture
def mock_user():
    """Create mock admin user."""
    user = MagicMock()
    user.id = "admin"
    user.role = "admin"
    user.is_admin = True
    return user


@pytest.fixture
def roster_service():
    return MagicMock(
        list_students=AsyncMock(return_value=[]),
        get_student=AsyncMock(),
        update_payment=AsyncMock(),
    )


@pytest.fixture
def enrollment_service():
    return MagicMock(move_student=AsyncMock())


@pytest.fixture
def report_service():
    return MagicMock(
        summary=AsyncMock(),
        day_roster=AsyncMock(return_value=[]),
        search=AsyncMock(),
        day_mailto=AsyncMock(),
        waitlist_mailto=AsyncMock(),
        export_day=AsyncMock(),
    )


@pytest.fixture
def app(mock_user, roster_service, enrollment_service, report_service):
    """Create app with the admin and services overridden."""
    app = create_app()
    app.dependency_overrides[require_admin] = lambda: mock_user
    app.dependency_overrides[get_roster_service] = lambda: roster_service
    app.dependency_overrides[get_enrollment_service] = lambda: enrollment_service
    app.dependency_overrides[get_report_service] = lambda: report_service
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


class TestAdminAPIRouting:
    """Tests for admin API routing."""

    def test_routes_registered(self, app):
        routes = set(app.openapi()["paths"])

        assert "/api/admin/auth/login" in routes
        assert "/api/admin/students" in routes
        assert "/api/admin/students/{student_id}" in routes
        assert "/api/admin/sections" in routes
        assert "/api/admin/enrollment" in routes
        assert "/api/admin/waitlist" in routes
        assert "/api/admin/reports/summary" in routes
        assert "/api/admin/reports/days/{day}" in routes
        assert "/api/admin/reports/search" in routes
        assert "/api/admin/reports/mailto" in routes
        assert "/api/admin/reports/mailto/waitlist" in routes
        assert "/api/admin/reports/export/{day}.{fmt}" in routes
        assert "/health/live" in routes


class TestAuthentication:
    """Tests for endpoint protection and login."""

    def test_requires_token(self):
        client = TestClient(create_app())

        response = client.get("/api/admin/students")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_bad_token(self):
        client = TestClient(create_app())

        response = client.get(
            "/api/admin/students", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    def test_login_success(self, app, client):
        service = MagicMock()
        service.login.return_value = TokenResponse(access_token="tok", expires_in=3600)
        app.dependency_overrides[get_auth_service] = lambda: service

        response = client.post(
            "/api/admin/auth/login", json={"username": "admin", "password": "secret"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "accessToken": "tok",
            "tokenType": "Bearer",
            "expiresIn": 3600,
        }
        service.login.assert_called_once_with("admin", "secret")

    def test_login_bad_credentials(self, app, client):
        service = MagicMock()
        service.login.side_effect = InvalidCredentialsError("nope")
        app.dependency_overrides[get_auth_service] = lambda: service

        response = client.post(
            "/api/admin/auth/login", json={"username": "admin", "password": "wrong"}
        )

        assert response.status_code == 401

    def test_login_disabled(self, app, client):
        service = MagicMock()
        service.login.side_effect = LoginDisabledError("Admin login is not configured")
        app.dependency_overrides[get_auth_service] = lambda: service

        response = client.post(
            "/api/admin/auth/login", json={"username": "admin", "password": "x"}
        )

        assert response.status_code == 503


class TestStudentsAPI:
    """Tests for student endpoints."""

    def test_list_students_camel_case(self, client, roster_service, make_admin_student):
        roster_service.list_students.return_value = [make_admin_student()]

        response = client.get("/api/admin/students", params={"session": "FALL_2026"})

        assert response.status_code == 200
        item = response.json()[0]
        assert item["studentName"] == "Sofia Ramirez"
        assert item["selectedDays"] == ["Tuesday"]
        assert item["amountOwed"] == 245.0
        roster_service.list_students.assert_awaited_once_with("FALL_2026")

    def test_list_students_default_term(self, client, roster_service):
        response = client.get("/api/admin/students")

        assert response.status_code == 200
        roster_service.list_students.assert_awaited_once_with("SPRING_2026")

    def test_update_payment(self, client, roster_service):
        student_id = str(uuid4())

        response = client.put(
            "/api/admin/students",
            json={"id": student_id, "paymentStatus": "PAID", "paymentMethod": "Zelle"},
        )

        assert response.status_code == 200
        assert response.json() == {"ok": True}
        update = roster_service.update_payment.call_args[0][0]
        assert str(update.id) == student_id
        assert update.payment_method == "Zelle"
        assert roster_service.update_payment.call_args[1]["updated_by"] == "admin"

    def test_update_payment_missing_id(self, client):
        response = client.put("/api/admin/students", json={"paymentStatus": "PAID"})

        assert response.status_code == 400

    def test_update_payment_bad_status(self, client):
        response = client.put(
            "/api/admin/students", json={"id": str(uuid4()), "paymentStatus": "LATER"}
        )

        assert response.status_code == 400

    def test_update_payment_unknown_student(self, client, roster_service):
        roster_service.update_payment.side_effect = StudentNotFoundError("missing")

        response = client.put("/api/admin/students", json={"id": str(uuid4())})

        assert response.status_code == 404

    def test_get_student_not_found(self, client, roster_service):
        roster_service.get_student.side_effect = StudentNotFoundError("missing")

        response = client.get(f"/api/admin/students/{uuid4()}")

        assert response.status_code == 404


class TestSectionsAndWaitlistAPI:
    """Tests for section and waitlist listings."""

    def test_list_sections(self, app, client):
        service = MagicMock(list_sections=AsyncMock(return_value=[]))
        app.dependency_overrides[get_section_service] = lambda: service

        response = client.get("/api/admin/sections")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_waitlist(self, app, client):
        service = MagicMock(list_entries=AsyncMock(return_value=[]))
        app.dependency_overrides[get_waitlist_service] = lambda: service

        response = client.get("/api/admin/waitlist", params={"session": "FALL_2026"})

        assert response.status_code == 200
        service.list_entries.assert_awaited_once_with("FALL_2026")


class TestEnrollmentAPI:
    """Tests for moving students."""

    def test_move_student(self, client, enrollment_service):
        section_id = uuid4()
        enrollment_service.move_student.return_value = MoveEnrollmentResponse(
            section_id=section_id
        )

        response = client.put(
            "/api/admin/enrollment",
            json={"studentId": str(uuid4()), "day": "Wednesday", "label": "B"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "sectionId": str(section_id),
            "created": False,
        }

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (InvalidDayError("bad day"), 400),
            (SectionNotFoundError("none"), 404),
            (AmbiguousEnrollmentError("which"), 409),
            (SectionFullError("full"), 409),
        ],
    )
    def test_move_errors(self, client, enrollment_service, error, status_code):
        enrollment_service.move_student.side_effect = error

        response = client.put(
            "/api/admin/enrollment",
            json={"studentId": str(uuid4()), "day": "Wednesday", "label": "A"},
        )

        assert response.status_code == status_code

    def test_move_bad_label(self, client):
        response = client.put(
            "/api/admin/enrollment",
            json={"studentId": str(uuid4()), "day": "Wednesday", "label": "C"},
        )

        assert response.status_code == 400


class TestReportsAPI:
    """Tests for report endpoints."""

    def test_day_roster_unknown_day(self, client, report_service):
        report_service.day_roster.side_effect = UnknownDayError("Unknown day: x")

        response = client.get("/api/admin/reports/days/x")

        assert response.status_code == 400

    def test_search_defaults(self, client, report_service):
        report_service.search.return_value = StudentPage(
            items=[], page=1, per_page=5, total=0, total_pages=0
        )

        response = client.get("/api/admin/reports/search", params={"q": "ana"})

        assert response.status_code == 200
        assert response.json()["totalPages"] == 0
        kwargs = report_service.search.call_args[1]
        assert kwargs["query"] == "ana"
        assert kwargs["page"] == 1
        assert kwargs["per_page"] == 5
        assert kwargs["owes_first"] is False

    def test_search_default_page_size_is_injectable(self, app, client, report_service):
        app.dependency_overrides[get_page_size] = lambda: 20
        report_service.search.return_value = StudentPage(
            items=[], page=1, per_page=20, total=0, total_pages=0
        )

        response = client.get("/api/admin/reports/search")

        assert response.status_code == 200
        assert report_service.search.call_args[1]["per_page"] == 20

    def test_search_explicit_page_size_wins(self, app, client, report_service):
        app.dependency_overrides[get_page_size] = lambda: 20
        report_service.search.return_value = StudentPage(
            items=[], page=1, per_page=10, total=0, total_pages=0
        )

        response = client.get("/api/admin/reports/search", params={"per_page": 10})

        assert response.status_code == 200
        assert report_service.search.call_args[1]["per_page"] == 10

    def test_search_rejects_page_zero(self, client):
        response = client.get("/api/admin/reports/search", params={"page": 0})

        assert response.status_code == 400

    def test_mailto(self, client, report_service):
        report_service.day_mailto.return_value = MailtoLink(
            href="mailto:?bcc=a%40x.com", recipients=["a@x.com"]
        )

        response = client.get("/api/admin/reports/mailto", params={"day": "Monday"})

        assert response.status_code == 200
        assert response.json()["href"] == "mailto:?bcc=a%40x.com"
        assert report_service.day_mailto.call_args[0][1] == "Monday"

    def test_export(self, client, report_service):
        report_service.export_day.return_value = RosterExport(
            filename="tuesday-students.csv",
            media_type="text/csv; charset=utf-8",
            content=b"\xef\xbb\xbfName\r\n",
        )

        response = client.get("/api/admin/reports/export/tuesday.csv")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert (
            response.headers["content-disposition"]
            == 'attachment; filename="tuesday-students.csv"'
        )
        assert response.content == b"\xef\xbb\xbfName\r\n"
        assert report_service.export_day.call_args[0][1:] == ("tuesday", "csv")

    def test_export_unsupported_format(self, client, report_service):
        report_service.export_day.side_effect = UnsupportedFormatError("docx")

        response = client.get("/api/admin/reports/export/tuesday.docx")

        assert response.status_code == 400


class TestHealthAPI:
    """Tests for health endpoints."""

    def test_liveness(self, client):
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive"}
