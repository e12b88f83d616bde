from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class HistorialBase(BaseModel):
    animal_id: int = Field(..., ge=1)
    fecha: Optional[date] = None
    diagnostico: Optional[str] = None
    tratamiento: Optional[str] = None
    veterinario: Optional[str] = Field(None, max_length=100)
    notas: Optional[str] = None


class HistorialCreate(HistorialBase):
    pass


class HistorialUpdate(BaseModel):
    animal_id: Optional[int] = Field(None, ge=1)
    fecha: Optional[date] = None
    diagnostico: Optional[str] = None
    tratamiento: Optional[str] = None
    veterinario: Optional[str] = Field(None, max_length=100)
    notas: Optional[str] = None


class Historial(HistorialBase):
    id_historial: int
    fecha: date
    nombre_animal: Optional[str] = None
