"""Pytest configuration and fixtures."""

from datetime import date, datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from serviceboard.database import Base, get_db
from serviceboard.domain.calendar.schemas import MaintenanceStatus, MaintenanceTask, Technician
from serviceboard.domain.calendar.service import CalendarService, build_calendar_config
from serviceboard.domain.tickets.schemas import ServiceTicket, TicketPriority
from serviceboard.domain.tickets.service import TicketService
from serviceboard.main import app
from serviceboard.models import Customer

# Wednesday, ISO week 11 of 2024
TODAY = date(2024, 3, 13)
NOW = datetime(2024, 3, 13, 12, 0)


def make_task(task_id, scheduled_date, technician_id=None, status=MaintenanceStatus.PLANNED, **extra):
    return MaintenanceTask(
        id=task_id,
        contact_person=extra.pop("contact_person", f"Kontakt {task_id}"),
        location=extra.pop("location", "Hauptstraße 1, 10115 Berlin"),
        scheduled_date=scheduled_date,
        maintenance_status=status,
        technician_id=technician_id,
        **extra,
    )


@pytest.fixture
def technicians():
    return [
        Technician(id="t1", name="Thomas Berger", initials="TB", color="bg-blue-500"),
        Technician(id="t2", name="Sabine Krüger", initials="SK", color="bg-emerald-500"),
    ]


@pytest.fixture
def calendar_config(technicians):
    return build_calendar_config(technicians)


@pytest.fixture
def tasks():
    return [
        make_task("m1", date(2024, 3, 11), "t1", MaintenanceStatus.PLANNED),
        make_task("m2", date(2024, 3, 11), "t2", MaintenanceStatus.CONTACTED),
        make_task("m3", date(2024, 3, 11), None, MaintenanceStatus.UNPLANNED),
        make_task("m4", date(2024, 3, 13), "t1", MaintenanceStatus.NOT_ANSWERED),
        make_task("m5", date(2024, 3, 16), "t1", MaintenanceStatus.PLANNED),
        make_task("m6", date(2024, 3, 20), "t9", MaintenanceStatus.PLANNED),
        # Outside a four week window starting 2024-03-11
        make_task("m7", date(2024, 5, 6), "t1", MaintenanceStatus.PLANNED),
    ]


@pytest.fixture
def calendar_service(tasks, calendar_config):
    return CalendarService(tasks, calendar_config, clock=lambda: TODAY)


@pytest.fixture
def tickets():
    return [
        ServiceTicket(
            id="s1",
            title="Wartung anfragen",
            contact_person="Felix Braun",
            location="Rosenweg 3, 20095 Hamburg",
            priority=TicketPriority.LOW,
            created_at=datetime(2024, 3, 1, 9, 0),
        ),
        ServiceTicket(
            id="s2",
            title="Heizung fällt aus",
            contact_person="Petra Schulz",
            location="Gartenstraße 8, 10115 Berlin",
            priority=TicketPriority.URGENT,
            created_at=datetime(2024, 3, 13, 7, 45),
        ),
        ServiceTicket(
            id="s3",
            title="Thermostat tauschen",
            contact_person="Uwe Kern",
            location="Ringstraße 2, 80331 München",
            priority=TicketPriority.HIGH,
            created_at=datetime(2024, 3, 10, 16, 0),
        ),
        ServiceTicket(
            id="s4",
            title="Leck im Keller",
            contact_person="Maria Lang",
            location="Seeweg 5, 20095 Hamburg",
            priority=TicketPriority.URGENT,
            created_at=datetime(2024, 3, 12, 8, 0),
        ),
    ]


@pytest.fixture
def ticket_service(tickets):
    return TicketService(tickets, clock=lambda: NOW)


@pytest.fixture
def engine():
    """In-memory database shared across threads for the lifetime of a test."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def session(session_factory):
    """Create a temporary in-memory database session for testing."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def customers(session):
    rows = [
        Customer(anl_id=1, nachname="Müller", vorname="Hans", ort="Berlin", plz="10115",
                 strasse="Lindenstraße", haus_nr="4", eigentuemer_nr="E-001"),
        Customer(anl_id=2, nachname="Özdemir", vorname="Ayşe", ort="Hamburg", plz="20457"),
        Customer(anl_id=3, nachname="Zimmermann", vorname="Karl", ort="Berlin", plz="10117"),
        Customer(anl_id=4, nachname="Schmidt", vorname="Anna", firma="Müllerei GmbH",
                 ort="München", plz="80331"),
        Customer(anl_id=5, nachname="Becker", vorname="Paul", ort="Hamburg",
                 email="paul.mueller@example.de"),
        Customer(anl_id=6, nachname="Adler", vorname="Eva"),
    ]
    session.add_all(rows)
    session.commit()
    return rows


@pytest.fixture
def client(session, calendar_service, ticket_service):
    """API client bound to the test database and fixed calendar/ticket data."""

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.calendar_service = calendar_service
    app.state.ticket_service = ticket_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
