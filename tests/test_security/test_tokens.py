"""
Tests for JWT issuing and the authorization gate.

Tests cover:
- Standard claims
- Expired / tampered / foreign tokens
- Missing token vs. insufficient role
"""

from datetime import datetime, timedelta, timezone
from typing import Dict

import pytest
from jose import jwt
from fastapi.testclient import TestClient

from auth import create_access_token, create_token_for_usuario, decode_token
from config import settings
from core.exceptions import ForbiddenException
from database.models import UsuarioORM


def _claims(usuario: UsuarioORM) -> dict:
    return {"sub": usuario.id, "id": usuario.id, "correo": usuario.correo, "rol": usuario.rol}


class TestCreateToken:

    def test_requiere_sub(self):
        with pytest.raises(ValueError):
            create_access_token({"correo": "x@y.com"})

    def test_claims_estandar(self, admin_usuario: UsuarioORM):
        payload = decode_token(create_token_for_usuario(admin_usuario))

        assert payload["sub"] == str(admin_usuario.id)
        assert payload["rol"] == "ADMIN"
        assert payload["iss"] == settings.jwt_issuer
        assert payload["aud"] == settings.jwt_audience
        assert payload["exp"] > payload["iat"]

    def test_expiracion_personalizada(self, admin_usuario: UsuarioORM):
        token = create_access_token(_claims(admin_usuario), expires_delta=timedelta(minutes=5))
        payload = decode_token(token)

        assert payload["exp"] - payload["iat"] == 300


class TestDecodeToken:

    def test_token_expirado(self, admin_usuario: UsuarioORM):
        token = create_access_token(_claims(admin_usuario), expires_delta=timedelta(seconds=-10))

        with pytest.raises(ForbiddenException):
            decode_token(token)

    def test_firma_invalida(self, admin_usuario: UsuarioORM):
        token = jwt.encode(
            {
                **_claims(admin_usuario),
                "sub": str(admin_usuario.id),
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
                "iss": settings.jwt_issuer,
                "aud": settings.jwt_audience,
            },
            "otra-clave-secreta-que-no-es-la-del-servidor",
            algorithm="HS256",
        )

        with pytest.raises(ForbiddenException):
            decode_token(token)

    def test_audiencia_incorrecta(self, admin_usuario: UsuarioORM):
        token = jwt.encode(
            {
                **_claims(admin_usuario),
                "sub": str(admin_usuario.id),
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
                "iss": settings.jwt_issuer,
                "aud": "OtroCliente",
            },
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(ForbiddenException):
            decode_token(token)

    def test_basura(self):
        with pytest.raises(ForbiddenException):
            decode_token("esto.no.es-un-jwt")


class TestAuthorizationGate:

    def test_sin_token_401(self, client: TestClient):
        response = client.get("/api/usuarios")

        assert response.status_code == 401
        assert response.json()["error"] == "Unauthorized"

    def test_esquema_distinto_de_bearer_401(self, client: TestClient, admin_usuario: UsuarioORM):
        token = create_token_for_usuario(admin_usuario)

        response = client.get("/api/usuarios", headers={"Authorization": f"Basic {token}"})

        assert response.status_code == 401

    def test_token_expirado_403(self, client: TestClient, admin_usuario: UsuarioORM):
        token = create_access_token(_claims(admin_usuario), expires_delta=timedelta(seconds=-1))

        response = client.get("/api/usuarios", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    def test_token_sin_rol_403(self, client: TestClient, admin_usuario: UsuarioORM):
        token = create_access_token({"sub": admin_usuario.id})

        response = client.get("/api/solicitudes/mias", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    def test_rol_no_permitido_403(
        self,
        client: TestClient,
        auth_headers_voluntario: Dict[str, str]
    ):
        response = client.get("/api/usuarios", headers=auth_headers_voluntario)

        assert response.status_code == 403
        assert response.json()["details"]["user_role"] == "VOLUNTARIO"

    def test_rol_en_minusculas_no_coincide(self, client: TestClient, admin_usuario: UsuarioORM):
        token = create_access_token({**_claims(admin_usuario), "rol": "admin"})

        response = client.get("/api/usuarios", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403

    def test_rol_permitido(self, client: TestClient, auth_headers_admin: Dict[str, str]):
        assert client.get("/api/usuarios", headers=auth_headers_admin).status_code == 200
