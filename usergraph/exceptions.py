from starlette import status


class UserGraphError(Exception):
    """Base class of usergraph errors."""


class SchemaBindingError(UserGraphError):
    """Raised at schema build time when root fields and handlers do not line up."""


class HttpQueryError(UserGraphError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = 'bad request'

    def __init__(self, message: str = None, status_code: int = None, headers: dict = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)

    @property
    def formatted(self) -> dict:
        return {'errors': [{'message': self.message}]}


class UserInputError(HttpQueryError):
    message = 'user input error'


class MethodNotAllowedError(HttpQueryError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED
    message = 'GraphQL only supports GET and POST requests.'

    def __init__(self, message: str = None, allow: str = 'GET, POST'):
        super().__init__(message, headers={'Allow': allow})


class UnsupportedMediaTypeError(HttpQueryError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    message = 'Unsupported Media Type'
