"""
Tests for the login endpoint (POST /api/login).

Tests cover:
- Successful login and token contents
- Non-enumerable credential errors
- Inactive accounts
- Per-IP rate limiting
"""

import logging

from fastapi.testclient import TestClient

from database.models import UsuarioORM
from auth import decode_token
from config import settings


class TestLogin:
    """Tests for POST /api/login."""

    def test_login_exitoso(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        response = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": password}
        )

        assert response.status_code == 200
        data = response.json()
        assert "token" in data

        payload = decode_token(data["token"])
        assert payload["sub"] == str(adoptante_usuario.id)
        assert payload["id"] == adoptante_usuario.id
        assert payload["correo"] == "adoptante@correo.com"
        assert payload["rol"] == "ADOPTANTE"
        assert payload["iss"] == settings.jwt_issuer
        assert payload["aud"] == settings.jwt_audience
        assert payload["exp"] - payload["iat"] == settings.jwt_expires_in

    def test_login_no_devuelve_hash(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        response = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": password}
        )

        usuario = response.json()["usuario"]
        assert usuario == {
            "id_usuario": adoptante_usuario.id,
            "nombre": "Adoptante Test",
            "correo": "adoptante@correo.com",
            "telefono": "5512345678",
            "direccion": "Calle Falsa 123",
            "rol": "ADOPTANTE",
            "estado": "ACTIVO",
        }
        assert "password_hash" not in response.text

    def test_password_incorrecta_y_correo_inexistente_son_indistinguibles(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM
    ):
        wrong_password = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": "incorrecta"}
        )
        unknown = client.post(
            "/api/login",
            json={"correo": "nadie@correo.com", "password": "incorrecta"}
        )

        assert wrong_password.status_code == unknown.status_code == 401
        a, b = wrong_password.json(), unknown.json()
        assert a["success"] is False
        assert a["error"] == b["error"] == "InvalidCredentials"
        assert a["message"] == b["message"] == "Credenciales inválidas"

    def test_usuario_inactivo_con_credenciales_correctas(
        self,
        client: TestClient,
        usuario_inactivo: UsuarioORM,
        password: str
    ):
        response = client.post(
            "/api/login",
            json={"correo": usuario_inactivo.correo, "password": password}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "InactiveAccount"

    def test_usuario_inactivo_con_password_incorrecta_no_revela_estado(
        self,
        client: TestClient,
        usuario_inactivo: UsuarioORM
    ):
        response = client.post(
            "/api/login",
            json={"correo": usuario_inactivo.correo, "password": "incorrecta"}
        )

        assert response.status_code == 401
        assert response.json()["error"] == "InvalidCredentials"

    def test_correo_se_compara_exacto(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        response = client.post(
            "/api/login",
            json={"correo": "ADOPTANTE@correo.com", "password": password}
        )

        assert response.status_code == 401

    def test_body_incompleto(self, client: TestClient):
        response = client.post("/api/login", json={"correo": "x@y.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "Validation"

    def test_intentos_quedan_en_bitacora(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str,
        caplog
    ):
        with caplog.at_level(logging.INFO, logger="audit.login"):
            client.post("/api/login", json={"correo": adoptante_usuario.correo, "password": "mala"})
            client.post("/api/login", json={"correo": adoptante_usuario.correo, "password": password})

        audit = [r for r in caplog.records if r.name == "audit.login"]
        assert len(audit) == 2
        assert "contraseña incorrecta" in audit[0].getMessage()
        assert "exitoso" in audit[1].getMessage()
        assert all(adoptante_usuario.correo in r.getMessage() for r in audit)

    def test_bitacora_escapa_saltos_de_linea(self, client: TestClient, caplog):
        correo = "x@x.com\nLogin exitoso correo='admin@refugio.com' id=1 ip=1.1.1.1"

        with caplog.at_level(logging.INFO, logger="audit.login"):
            response = client.post("/api/login", json={"correo": correo, "password": "mala"})

        assert response.status_code == 401
        audit = [r for r in caplog.records if r.name == "audit.login"]
        assert len(audit) == 1
        assert "\n" not in audit[0].getMessage()
        assert "\\n" in audit[0].getMessage()


class TestLoginRateLimit:
    """El límite es por IP y cuenta todos los intentos."""

    def test_undecimo_intento_recibe_429(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        for _ in range(settings.login_rate_limit_attempts):
            response = client.post(
                "/api/login",
                json={"correo": adoptante_usuario.correo, "password": "incorrecta"}
            )
            assert response.status_code == 401

        # credenciales correctas, pero ya se agotó el cupo
        response = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": password}
        )

        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "TooManyRequests"
        assert body["message"] == settings.login_rate_limit_message
        assert int(response.headers["Retry-After"]) >= 1

    def test_logins_exitosos_tambien_cuentan(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        credentials = {"correo": adoptante_usuario.correo, "password": password}
        for _ in range(settings.login_rate_limit_attempts):
            assert client.post("/api/login", json=credentials).status_code == 200

        assert client.post("/api/login", json=credentials).status_code == 429

    def test_limite_no_afecta_otras_rutas(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM
    ):
        for _ in range(settings.login_rate_limit_attempts + 1):
            client.post("/api/login", json={"correo": adoptante_usuario.correo, "password": "x"})

        assert client.get("/api/animales").status_code == 200
