class NearcareError(Exception):
    pass


class DirectoryError(NearcareError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LocationError(NearcareError):
    title = "Error"
    notice = "Could not get your location"


class PermissionDenied(LocationError):
    title = "Permission Denied"
    notice = "Location permission is required"


class LocationUnavailable(LocationError):
    pass


class AggregateFetchFailed(NearcareError):
    title = "Error"
    notice = "Failed to load nearby professionals"
