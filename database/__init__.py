from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
    Base,
    UsuarioORM,
    AnimalORM,
    HistorialMedicoORM,
    TareaVoluntarioORM,
    SolicitudAdopcionORM,
)

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "Base",
    "UsuarioORM",
    "AnimalORM",
    "HistorialMedicoORM",
    "TareaVoluntarioORM",
    "SolicitudAdopcionORM",
]
