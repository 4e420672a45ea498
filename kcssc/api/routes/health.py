from fastapi import APIRouter

from kcssc.services.health_service import HealthCheckService
from kcssc.services import storage_service

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness probe (does not check external services)"""
    return HealthCheckService.liveness()


@router.get("/api/health")
def health_check_detailed():
    """
    Checks the database and upload storage.

    Returns:
        Dict with the aggregate status ("healthy" or "degraded") and per-service details
    """
    return HealthCheckService.check_all()


@router.get("/api/health/database")
def health_check_database():
    return HealthCheckService.check_database()


@router.get("/api/system/storage-status")
def get_storage_status():
    """
    Returns:
        Dict with:
        - object_storage_available: bool - whether the GCS bucket is in use
        - fallback_mode: bool - whether uploads go to the local filesystem
        - storage_type: str - "gcs" or "local_filesystem"
    """
    return storage_service.get_storage_status()
