"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any
from datetime import date
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar antes de importar la aplicación
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "clave-de-pruebas-suficientemente-larga-para-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

from main import app
from database.db import get_db
from database.models import Base, UsuarioORM, AnimalORM
from core.security import hash_password
from core.rate_limit import login_rate_limiter
from auth import create_token_for_usuario


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def reset_login_rate_limiter():
    """Cada test empieza con la ventana de intentos de login vacía."""
    login_rate_limiter.reset()
    yield
    login_rate_limiter.reset()


# ==================== User Fixtures ====================

PASSWORD = "password123"


def _crear_usuario(db: Session, nombre: str, correo: str, rol: str, estado: str = "ACTIVO") -> UsuarioORM:
    usuario = UsuarioORM(
        nombre=nombre,
        correo=correo,
        telefono="5512345678",
        direccion="Calle Falsa 123",
        rol=rol,
        password_hash=hash_password(PASSWORD),
        estado=estado,
    )
    db.add(usuario)
    db.commit()
    db.refresh(usuario)
    return usuario


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def admin_usuario(db_session: Session) -> UsuarioORM:
    return _crear_usuario(db_session, "Admin Test", "admin@refugio.com", "ADMIN")


@pytest.fixture
def voluntario_usuario(db_session: Session) -> UsuarioORM:
    return _crear_usuario(db_session, "Voluntario Test", "voluntario@refugio.com", "VOLUNTARIO")


@pytest.fixture
def adoptante_usuario(db_session: Session) -> UsuarioORM:
    return _crear_usuario(db_session, "Adoptante Test", "adoptante@correo.com", "ADOPTANTE")


@pytest.fixture
def visitante_usuario(db_session: Session) -> UsuarioORM:
    return _crear_usuario(db_session, "Visitante Test", "visitante@correo.com", "VISITANTE")


@pytest.fixture
def usuario_inactivo(db_session: Session) -> UsuarioORM:
    return _crear_usuario(db_session, "Inactivo Test", "inactivo@correo.com", "ADOPTANTE", estado="INACTIVO")


@pytest.fixture
def usuario_data() -> Dict[str, Any]:
    """Sample registration payload."""
    return {
        "nombre": "Nuevo Adoptante",
        "correo": "nuevo@correo.com",
        "telefono": "5598765432",
        "direccion": "Av. Siempre Viva 742",
        "password": "secreto123",
    }


# ==================== Auth Token Fixtures ====================

@pytest.fixture
def auth_headers_admin(admin_usuario: UsuarioORM) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token_for_usuario(admin_usuario)}"}


@pytest.fixture
def auth_headers_voluntario(voluntario_usuario: UsuarioORM) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token_for_usuario(voluntario_usuario)}"}


@pytest.fixture
def auth_headers_adoptante(adoptante_usuario: UsuarioORM) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token_for_usuario(adoptante_usuario)}"}


@pytest.fixture
def auth_headers_visitante(visitante_usuario: UsuarioORM) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_token_for_usuario(visitante_usuario)}"}


# ==================== Animal Fixtures ====================

@pytest.fixture
def animal_data() -> Dict[str, Any]:
    """Sample animal payload."""
    return {
        "nombre": "Firulais",
        "especie": "Perro",
        "raza": "Mestizo",
        "edad": 3,
        "sexo": "Macho",
        "descripcion": "Muy juguetón",
    }


def _crear_animal(db: Session, nombre: str, estado: str = "DISPONIBLE", activo: bool = True) -> AnimalORM:
    animal = AnimalORM(
        nombre=nombre,
        especie="Perro",
        raza="Mestizo",
        edad=2,
        sexo="Hembra",
        estado=estado,
        fecha_ingreso=date(2024, 1, 15),
        activo=activo,
    )
    db.add(animal)
    db.commit()
    db.refresh(animal)
    return animal


@pytest.fixture
def animal_disponible(db_session: Session) -> AnimalORM:
    return _crear_animal(db_session, "Luna")


@pytest.fixture
def animal_adoptado(db_session: Session) -> AnimalORM:
    return _crear_animal(db_session, "Rocky", estado="ADOPTADO")


@pytest.fixture
def animal_inactivo(db_session: Session) -> AnimalORM:
    return _crear_animal(db_session, "Toby", activo=False)
