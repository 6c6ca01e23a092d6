"""Unit tests for the Firebase / Firestore connection service."""

from unittest.mock import patch

import pytest
from google.api_core.exceptions import ServiceUnavailable

from src.productos.core.errors import StorageError
from src.productos.core.services import FirestoreSessionService
from src.productos.runtime.config.config_data import FirestoreConfig

MODULE = "src.productos.core.services.firestore.firestore_session"


@pytest.fixture
def firebase():
    """Patch the firebase_admin entry points used by the service."""
    with (
        patch(f"{MODULE}.firebase_admin") as firebase_admin,
        patch(f"{MODULE}.credentials") as credentials,
        patch(f"{MODULE}.firestore") as firestore,
    ):
        yield firebase_admin, credentials, firestore


class TestFirestoreSessionService:
    def test_initializes_app_from_service_account_file(self, firebase):
        firebase_admin, credentials, firestore = firebase
        config = FirestoreConfig(
            credentials_file="/secrets/firebase.json",
            project_id="demo-project",
            app_name="productos-test",
            collection="items",
        )

        service = FirestoreSessionService(config)

        credentials.Certificate.assert_called_once_with("/secrets/firebase.json")
        firebase_admin.initialize_app.assert_called_once_with(
            credentials.Certificate.return_value,
            {"projectId": "demo-project"},
            name="productos-test",
        )
        firestore.client.assert_called_once_with(firebase_admin.initialize_app.return_value)
        assert service.client is firestore.client.return_value
        assert service.collection_name == "items"

    def test_falls_back_to_application_default_credentials(self, firebase):
        firebase_admin, credentials, _ = firebase

        FirestoreSessionService(FirestoreConfig())

        credentials.Certificate.assert_not_called()
        credentials.ApplicationDefault.assert_called_once_with()
        firebase_admin.initialize_app.assert_called_once_with(
            credentials.ApplicationDefault.return_value, None, name="productos"
        )

    def test_missing_credentials_file_raises_storage_error(self, firebase):
        firebase_admin, credentials, _ = firebase
        credentials.Certificate.side_effect = FileNotFoundError("firebase.json")

        with pytest.raises(StorageError) as exc_info:
            FirestoreSessionService(FirestoreConfig(credentials_file="firebase.json"))

        assert "Archivo de credenciales no encontrado" in exc_info.value.message
        firebase_admin.initialize_app.assert_not_called()

    def test_duplicate_app_raises_storage_error(self, firebase):
        firebase_admin, _, _ = firebase
        firebase_admin.initialize_app.side_effect = ValueError("The default Firebase app already exists.")

        with pytest.raises(StorageError) as exc_info:
            FirestoreSessionService(FirestoreConfig())

        assert "already exists" in exc_info.value.message

    def test_close_deletes_the_app(self, firebase):
        firebase_admin, _, _ = firebase
        service = FirestoreSessionService(FirestoreConfig())

        service.close()

        firebase_admin.delete_app.assert_called_once_with(
            firebase_admin.initialize_app.return_value
        )

    def test_health_check(self, firebase):
        _, _, firestore = firebase
        service = FirestoreSessionService(FirestoreConfig(collection="productos"))
        query = firestore.client.return_value.collection.return_value.limit.return_value

        assert service.health_check() is True
        firestore.client.return_value.collection.assert_called_with("productos")

        query.get.side_effect = ServiceUnavailable("down")
        assert service.health_check() is False
