from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from enum import Enum


class EstadoAnimal(str, Enum):
    DISPONIBLE = "DISPONIBLE"
    ADOPTADO = "ADOPTADO"
    EN_CUARENTENA = "EN_CUARENTENA"
    RESERVADO = "RESERVADO"


class AnimalBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    especie: str = Field(..., min_length=1, max_length=50)
    raza: Optional[str] = Field(None, max_length=100)
    edad: Optional[int] = Field(None, ge=0, le=100)
    sexo: Optional[str] = Field(None, max_length=10)
    descripcion: Optional[str] = None
    estado: EstadoAnimal = EstadoAnimal.DISPONIBLE
    foto_url: Optional[str] = Field(None, max_length=500)
    fecha_ingreso: Optional[date] = None


class AnimalCreate(AnimalBase):
    """Si no se envía `fecha_ingreso` se usa la fecha de hoy."""
    pass


class AnimalUpdate(BaseModel):
    nombre: Optional[str] = Field(None, min_length=1, max_length=100)
    especie: Optional[str] = Field(None, min_length=1, max_length=50)
    raza: Optional[str] = Field(None, max_length=100)
    edad: Optional[int] = Field(None, ge=0, le=100)
    sexo: Optional[str] = Field(None, max_length=10)
    descripcion: Optional[str] = None
    estado: Optional[EstadoAnimal] = None
    foto_url: Optional[str] = Field(None, max_length=500)
    fecha_ingreso: Optional[date] = None


class Animal(AnimalBase):
    id_animal: int
    activo: bool = True
