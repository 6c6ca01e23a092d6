"""Firebase app and Firestore client used by the document storage backend."""

import firebase_admin
from firebase_admin import credentials, firestore
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud.firestore import Client
from loguru import logger

from src.productos.core.errors import StorageError
from src.productos.runtime.config.config_data import FirestoreConfig


class FirestoreSessionService:
    """Owns the firebase_admin app and its Firestore client.

    Construct it once at process start and pass `client` to the repository;
    `close` deletes the app again so a new service can be created later in
    the same process.
    """

    backend = "firestore"

    def __init__(self, firestore_config: FirestoreConfig):
        logger.info("Initializing Firebase app '{}'", firestore_config.app_name)
        self._config = firestore_config

        try:
            if firestore_config.credentials_file:
                cred = credentials.Certificate(firestore_config.credentials_file)
            else:
                cred = credentials.ApplicationDefault()

            options = (
                {"projectId": firestore_config.project_id}
                if firestore_config.project_id
                else None
            )
            self._app = firebase_admin.initialize_app(
                cred, options, name=firestore_config.app_name
            )
        except FileNotFoundError as e:
            logger.error("Firebase credentials file not found: {}", e)
            raise StorageError(
                "No se pudo inicializar Firebase: Archivo de credenciales no encontrado."
            ) from e
        except (OSError, ValueError, GoogleAuthError) as e:
            logger.error("Firebase initialization failed: {}", e)
            raise StorageError(f"No se pudo inicializar Firebase: {e}") from e

        try:
            self._client = firestore.client(self._app)
        except (ValueError, GoogleAuthError) as e:
            firebase_admin.delete_app(self._app)
            logger.error("Firestore client creation failed: {}", e)
            raise StorageError(f"No se pudo inicializar Firebase: {e}") from e

        logger.info("Firebase initialized for collection '{}'", firestore_config.collection)

    @property
    def client(self) -> Client:
        return self._client

    @property
    def collection_name(self) -> str:
        return self._config.collection

    def health_check(self) -> bool:
        """Read at most one document to verify connectivity and credentials."""
        try:
            self._client.collection(self._config.collection).limit(1).get()
            return True
        except (GoogleAPIError, GoogleAuthError) as e:
            logger.bind(error_type=type(e).__name__).error(
                "Firestore health check failed: {}", e
            )
            return False

    def close(self) -> None:
        logger.info("Deleting Firebase app '{}'", self._config.app_name)
        firebase_admin.delete_app(self._app)
