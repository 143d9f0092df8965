class ServiceError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NotFoundError(ServiceError):
    status_code = 404


class ConflictError(ServiceError):
    status_code = 400


class InvalidTransitionError(ConflictError):
    pass


class UnauthorizedError(ServiceError):
    status_code = 401


class StoreUnavailableError(ServiceError):
    status_code = 503
