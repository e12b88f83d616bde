"""
Tests for Usuario API endpoints.

Tests cover:
- Public registration (ADOPTANTE / VISITANTE only)
- Privileged creation by ADMIN
- Listing, retrieval and update
- Password change
- Soft delete (estado = INACTIVO)
- Role-based access control
"""

from typing import Dict, Any

import bcrypt
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from database.models import UsuarioORM


class TestUsuarioRegistration:
    """Tests for POST /api/usuarios/register."""

    def test_registro_por_defecto_adoptante(
        self,
        client: TestClient,
        usuario_data: Dict[str, Any]
    ):
        response = client.post("/api/usuarios/register", json=usuario_data)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert data["correo"] == usuario_data["correo"]
        assert data["rol"] == "ADOPTANTE"
        assert data["estado"] == "ACTIVO"
        assert isinstance(data["id_usuario"], int)
        assert "password" not in data
        assert "password_hash" not in data

    def test_registro_visitante(self, client: TestClient, usuario_data: Dict[str, Any]):
        response = client.post(
            "/api/usuarios/register",
            json={**usuario_data, "rol": "VISITANTE"}
        )

        assert response.status_code == 201
        assert response.json()["data"]["rol"] == "VISITANTE"

    def test_registro_publico_no_permite_staff(
        self,
        client: TestClient,
        usuario_data: Dict[str, Any]
    ):
        for rol in ("ADMIN", "VOLUNTARIO"):
            response = client.post("/api/usuarios/register", json={**usuario_data, "rol": rol})
            assert response.status_code == 403

    def test_password_guardada_con_bcrypt(
        self,
        client: TestClient,
        db_session: Session,
        usuario_data: Dict[str, Any]
    ):
        client.post("/api/usuarios/register", json=usuario_data)

        usuario = db_session.query(UsuarioORM).filter_by(correo=usuario_data["correo"]).one()
        assert usuario.password_hash.startswith("$2b$")
        assert bcrypt.checkpw(
            usuario_data["password"].encode("utf-8"),
            usuario.password_hash.encode("utf-8")
        )

    def test_correo_duplicado(
        self,
        client: TestClient,
        adoptante_usuario: UsuarioORM,
        usuario_data: Dict[str, Any]
    ):
        response = client.post(
            "/api/usuarios/register",
            json={**usuario_data, "correo": adoptante_usuario.correo}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Duplicate"

    def test_datos_invalidos(self, client: TestClient, usuario_data: Dict[str, Any]):
        response = client.post("/api/usuarios/register", json={"nombre": "Sin correo"})
        assert response.status_code == 400

        response = client.post("/api/usuarios/register", json={**usuario_data, "correo": "no-es-correo"})
        assert response.status_code == 400

        response = client.post("/api/usuarios/register", json={**usuario_data, "password": "123"})
        assert response.status_code == 400

        response = client.post("/api/usuarios/register", json={**usuario_data, "rol": "admin"})
        assert response.status_code == 400


class TestUsuarioAdmin:
    """Endpoints reservados a ADMIN."""

    def test_crear_voluntario(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        usuario_data: Dict[str, Any]
    ):
        response = client.post(
            "/api/usuarios",
            json={**usuario_data, "rol": "VOLUNTARIO"},
            headers=auth_headers_admin
        )

        assert response.status_code == 201
        assert response.json()["data"]["rol"] == "VOLUNTARIO"

    def test_crear_requiere_rol(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        usuario_data: Dict[str, Any]
    ):
        response = client.post("/api/usuarios", json=usuario_data, headers=auth_headers_admin)

        assert response.status_code == 400

    def test_crear_sin_token(self, client: TestClient, usuario_data: Dict[str, Any]):
        response = client.post("/api/usuarios", json={**usuario_data, "rol": "ADMIN"})

        assert response.status_code == 401

    def test_crear_con_voluntario_prohibido(
        self,
        client: TestClient,
        auth_headers_voluntario: Dict[str, str],
        usuario_data: Dict[str, Any]
    ):
        response = client.post(
            "/api/usuarios",
            json={**usuario_data, "rol": "ADMIN"},
            headers=auth_headers_voluntario
        )

        assert response.status_code == 403

    def test_listar_usuarios(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM,
        usuario_inactivo: UsuarioORM
    ):
        response = client.get("/api/usuarios", headers=auth_headers_admin)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        correos = {u["correo"] for u in body["data"]}
        assert adoptante_usuario.correo in correos
        assert usuario_inactivo.correo not in correos

        response = client.get(
            "/api/usuarios",
            params={"include_inactive": True},
            headers=auth_headers_admin
        )
        correos = {u["correo"] for u in response.json()["data"]}
        assert usuario_inactivo.correo in correos

    def test_listar_por_rol(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM,
        voluntario_usuario: UsuarioORM
    ):
        response = client.get(
            "/api/usuarios",
            params={"rol": "VOLUNTARIO"},
            headers=auth_headers_admin
        )

        data = response.json()["data"]
        assert [u["id_usuario"] for u in data] == [voluntario_usuario.id]

    def test_listar_con_adoptante_prohibido(
        self,
        client: TestClient,
        auth_headers_adoptante: Dict[str, str]
    ):
        response = client.get("/api/usuarios", headers=auth_headers_adoptante)

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"

    def test_obtener_usuario(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM
    ):
        response = client.get(f"/api/usuarios/{adoptante_usuario.id}", headers=auth_headers_admin)

        assert response.status_code == 200
        assert response.json()["correo"] == adoptante_usuario.correo

    def test_obtener_usuario_inexistente(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str]
    ):
        response = client.get("/api/usuarios/9999", headers=auth_headers_admin)

        assert response.status_code == 404
        assert response.json()["error"] == "NotFound"

    def test_actualizar_usuario(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM
    ):
        response = client.put(
            f"/api/usuarios/{adoptante_usuario.id}",
            json={"telefono": "5500000000", "rol": "VOLUNTARIO"},
            headers=auth_headers_admin
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["telefono"] == "5500000000"
        assert data["rol"] == "VOLUNTARIO"
        assert data["nombre"] == "Adoptante Test"

    def test_actualizar_correo_duplicado(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM,
        voluntario_usuario: UsuarioORM
    ):
        response = client.put(
            f"/api/usuarios/{adoptante_usuario.id}",
            json={"correo": voluntario_usuario.correo},
            headers=auth_headers_admin
        )

        assert response.status_code == 400

    def test_cambiar_password(
        self,
        client: TestClient,
        db_session: Session,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM
    ):
        hash_anterior = adoptante_usuario.password_hash

        response = client.patch(
            f"/api/usuarios/{adoptante_usuario.id}/password",
            json={"password": "nueva-clave"},
            headers=auth_headers_admin
        )

        assert response.status_code == 200
        db_session.refresh(adoptante_usuario)
        assert adoptante_usuario.password_hash != hash_anterior

        login = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": "nueva-clave"}
        )
        assert login.status_code == 200

    def test_desactivar_usuario(
        self,
        client: TestClient,
        auth_headers_admin: Dict[str, str],
        adoptante_usuario: UsuarioORM,
        password: str
    ):
        response = client.delete(f"/api/usuarios/{adoptante_usuario.id}", headers=auth_headers_admin)

        assert response.status_code == 200
        assert response.json()["deleted_id"] == adoptante_usuario.id

        # sigue visible por ID
        detalle = client.get(f"/api/usuarios/{adoptante_usuario.id}", headers=auth_headers_admin)
        assert detalle.status_code == 200
        assert detalle.json()["estado"] == "INACTIVO"

        # ya no puede iniciar sesión
        login = client.post(
            "/api/login",
            json={"correo": adoptante_usuario.correo, "password": password}
        )
        assert login.json()["error"] == "InactiveAccount"

        # desactivar dos veces es un error de negocio
        again = client.delete(f"/api/usuarios/{adoptante_usuario.id}", headers=auth_headers_admin)
        assert again.status_code == 400
