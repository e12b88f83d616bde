from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class TareaBase(BaseModel):
    titulo: str = Field(..., min_length=1, max_length=150)
    descripcion: Optional[str] = None
    # estado y prioridad son texto libre
    estado: str = Field("PENDIENTE", min_length=1, max_length=30)
    prioridad: Optional[str] = Field(None, max_length=20)
    fecha_limite: Optional[date] = None
    id_voluntario: Optional[int] = Field(None, ge=1)


class TareaCreate(TareaBase):
    pass


class TareaUpdate(BaseModel):
    titulo: Optional[str] = Field(None, min_length=1, max_length=150)
    descripcion: Optional[str] = None
    estado: Optional[str] = Field(None, min_length=1, max_length=30)
    prioridad: Optional[str] = Field(None, max_length=20)
    fecha_limite: Optional[date] = None
    id_voluntario: Optional[int] = Field(None, ge=1)


class Tarea(TareaBase):
    id_tarea: int
    nombre_voluntario: Optional[str] = None
