class KcsscError(Exception):
    """Base class for errors raised by the site's data layer."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(KcsscError):
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationError(KcsscError):
    status_code = 400


class ConfigurationError(KcsscError):
    """A write was attempted without a configured backend."""

    status_code = 503


class BackendError(KcsscError):
    """The backend could not be reached or answered with an unexpected error."""

    status_code = 502


class DatabaseDisabledError(ConfigurationError):
    def __init__(self):
        super().__init__(
            "Database is not enabled. Set DB_ENABLED=true and configure DATABASE_URL or the DB_* variables."
        )


class UploadTooLargeError(ValidationError):
    status_code = 413


class StorageError(KcsscError):
    """An upload could not be written to the bucket or the local upload directory."""

    status_code = 500
