from sqlalchemy import Column, String, Integer, DateTime, Text, ForeignKey, Date, Boolean
from sqlalchemy.orm import declarative_base, relationship

from utils.datetime_utils import local_now_naive, local_today

Base = declarative_base()


#ORM: Usuarios
class UsuarioORM(Base):
    __tablename__ = "usuarios"
    #columna en DB: id_usuario, atributo python: id
    id = Column("id_usuario", Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    correo = Column(String(150), nullable=False, unique=True, index=True)
    telefono = Column(String(20))
    direccion = Column(String(255))
    rol = Column(String(20), nullable=False, default="ADOPTANTE")
    password_hash = Column(String(255), nullable=False)
    estado = Column(String(10), nullable=False, default="ACTIVO")
    fecha_registro = Column(DateTime, default=local_now_naive)


#ORM: Animales
class AnimalORM(Base):
    __tablename__ = "animales"
    id = Column("id_animal", Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(100), nullable=False)
    especie = Column(String(50), nullable=False)
    raza = Column(String(100))
    edad = Column(Integer)
    sexo = Column(String(10))
    descripcion = Column(Text)
    estado = Column(String(20), nullable=False, default="DISPONIBLE")
    foto_url = Column(String(500))
    fecha_ingreso = Column(Date, default=local_today)
    #borrado lógico
    activo = Column(Boolean, nullable=False, default=True)


#ORM: Historial médico
class HistorialMedicoORM(Base):
    __tablename__ = "historial_medico"
    id = Column("id_historial", Integer, primary_key=True, autoincrement=True)
    animal_id = Column("id_animal", Integer, ForeignKey("animales.id_animal"), nullable=False, index=True)
    fecha = Column(Date, nullable=False, default=local_today)
    diagnostico = Column(Text)
    tratamiento = Column(Text)
    veterinario = Column(String(100))
    notas = Column(Text)

    animal = relationship("AnimalORM", lazy="joined")


#ORM: Tareas de voluntarios
class TareaVoluntarioORM(Base):
    __tablename__ = "tareas_voluntario"
    id = Column("id_tarea", Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(150), nullable=False)
    descripcion = Column(Text)
    estado = Column(String(30), nullable=False, default="PENDIENTE")
    prioridad = Column(String(20))
    fecha_limite = Column(Date)
    id_voluntario = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=True, index=True)

    voluntario = relationship("UsuarioORM", lazy="joined")


#ORM: Solicitudes de adopción
class SolicitudAdopcionORM(Base):
    __tablename__ = "solicitudes_adopcion"
    id = Column("id_solicitud", Integer, primary_key=True, autoincrement=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id_usuario"), nullable=False, index=True)
    id_animal = Column(Integer, ForeignKey("animales.id_animal"), nullable=False, index=True)
    observaciones = Column(Text)
    estado = Column(String(20), nullable=False, default="PENDIENTE")
    fecha_solicitud = Column(DateTime, default=local_now_naive)
    #borrado lógico
    activo = Column(Boolean, nullable=False, default=True)

    usuario = relationship("UsuarioORM", lazy="joined")
    animal = relationship("AnimalORM", lazy="joined")


__all__ = [
    "Base",
    "UsuarioORM",
    "AnimalORM",
    "HistorialMedicoORM",
    "TareaVoluntarioORM",
    "SolicitudAdopcionORM",
]
