import logging
from datetime import datetime, timezone
from typing import Dict, Any

from sqlalchemy.exc import SQLAlchemyError

from kcssc.core import database
from kcssc.services import storage_service

logger = logging.getLogger(__name__)


class HealthCheckService:
    """
    Checks the services the API depends on:
    - Database (events, programs, photos tables)
    - Storage (GCS bucket or local upload directory)
    """

    @staticmethod
    def liveness() -> Dict[str, Any]:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @staticmethod
    def check_database() -> Dict[str, Any]:
        if not database.is_database_enabled():
            return {
                "status": "not_configured",
                "message": "Database disabled (DB_ENABLED=false)"
            }

        try:
            database.check_connection()
            return {
                "status": "healthy",
                "message": "Database connected and responding",
                "dialect": database.engine.dialect.name
            }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "message": "Could not connect to the database",
                "error": str(e)
            }

    @staticmethod
    def check_storage() -> Dict[str, Any]:
        status = storage_service.get_storage_status()
        if status["object_storage_available"]:
            return {
                "status": "healthy",
                "message": f"Uploads stored in bucket {status['bucket']}",
                "storage_type": status["storage_type"]
            }
        if status["last_upload_error"]:
            return {
                "status": "unhealthy",
                "message": "Last upload failed",
                "storage_type": status["storage_type"],
                "error": status["last_upload_error"]
            }
        return {
            "status": "healthy",
            "message": "Uploads stored on the local filesystem",
            "storage_type": status["storage_type"]
        }

    @staticmethod
    def check_all() -> Dict[str, Any]:
        database_status = HealthCheckService.check_database()
        storage_status = HealthCheckService.check_storage()

        database_ok = database_status["status"] in ["healthy", "not_configured"]
        storage_ok = storage_status["status"] == "healthy"

        return {
            "status": "healthy" if database_ok and storage_ok else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "database": database_status,
                "storage": storage_status
            },
            "message": HealthCheckService._get_status_message(database_status["status"], storage_ok)
        }

    @staticmethod
    def _get_status_message(database_status: str, storage_ok: bool) -> str:
        if database_status == "not_configured":
            return "Running without a database. The site uses its built-in sample data."
        elif database_status == "unhealthy":
            return "Database unavailable. Event, program and photo endpoints will fail."
        elif not storage_ok:
            return "Photo uploads are failing. Check the storage configuration."
        return "All services running normally"
