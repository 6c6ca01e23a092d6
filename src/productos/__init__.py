"""Producto management microservice.

HTTP/JSON CRUD over product records, persisted in Firebase Firestore
(or a SQL database for local development).
"""

__version__ = "0.1.0"
