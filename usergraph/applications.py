import contextlib
import json
import traceback
import typing
from inspect import isawaitable

from graphql import (
    ExecutionResult,
    GraphQLError,
    GraphQLSchema,
    OperationType,
    execute,
    get_operation_ast,
    parse,
    validate,
)
from starlette import status
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

from .exceptions import HttpQueryError, MethodNotAllowedError, UnsupportedMediaTypeError, UserInputError
from .middleware import LoggingMiddleware
from .playground import PLAYGROUND_HTML
from .schema import make_schema
from .store import UserStore


@contextlib.asynccontextmanager
async def lifespan(app: 'GraphQL'):
    await app.store.open()
    try:
        yield
    finally:
        await app.store.close()


class GraphQL(Starlette):
    """Starlette application serving the user API on ``/graphql``.

    The application owns ``store``: it is opened on startup, closed on
    shutdown and handed to every resolver through the execution context.
    """

    def __init__(
        self,
        store: UserStore,
        schema: GraphQLSchema = None,
        playground: bool = True,
        debug: bool = False,
        routes: typing.List[BaseRoute] = None,
    ):
        self.store = store
        self.schema = schema or make_schema()
        routes = list(routes or [])
        routes.append(Route('/graphql', GraphQLApp(self.schema, store, playground=playground, debug=debug)))
        super().__init__(debug=debug, routes=routes, lifespan=lifespan)
        self.state.store = store


class GraphQLApp:
    def __init__(
        self,
        schema: GraphQLSchema,
        store: UserStore,
        playground: bool = True,
        debug: bool = False,
        middleware: typing.List[typing.Any] = None,
    ) -> None:
        self.schema = schema
        self.store = store
        self.playground = playground
        self.debug = debug
        self.middleware = middleware if middleware is not None else [LoggingMiddleware()]

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive=receive)
        response = await self.handle_graphql(request)
        await response(scope, receive, send)

    async def handle_graphql(self, request: Request) -> Response:
        if request.method in ("GET", "HEAD") and "text/html" in request.headers.get("Accept", ""):
            if not self.playground:
                return PlainTextResponse("Not Found", status_code=status.HTTP_404_NOT_FOUND)
            return HTMLResponse(PLAYGROUND_HTML)

        try:
            data = await self.parse_body(request)
            query, variables, operation_name = self.get_graphql_params(request, data)
            response_data, status_code = await self.execute_graphql_request(
                request, query, variables, operation_name
            )
        except HttpQueryError as e:
            return JSONResponse(e.formatted, status_code=e.status_code, headers=e.headers)

        return JSONResponse(response_data, status_code=status_code)

    async def parse_body(self, request: Request) -> typing.Mapping[str, typing.Any]:
        if request.method in ("GET", "HEAD"):
            return request.query_params

        if request.method != "POST":
            raise MethodNotAllowedError()

        content_type = request.headers.get("Content-Type", "")

        if "application/json" in content_type:
            try:
                data = await request.json()
            except ValueError:
                raise UserInputError("POST body sent invalid JSON.")
            if not isinstance(data, dict):
                raise UserInputError("The received data is not a valid JSON query.")
            return data
        elif "application/graphql" in content_type:
            body = await request.body()
            try:
                return {"query": body.decode()}
            except UnicodeDecodeError:
                raise UserInputError("POST body is not valid UTF-8.")
        elif "query" in request.query_params:
            return request.query_params

        raise UnsupportedMediaTypeError()

    @staticmethod
    def get_graphql_params(request: Request, data: typing.Mapping[str, typing.Any]) -> tuple:
        query = data.get("query") or request.query_params.get("query")
        variables = data.get("variables") or request.query_params.get("variables")
        operation_name = data.get("operationName") or request.query_params.get("operationName")

        if not query:
            raise UserInputError("Must provide query string.")
        if not isinstance(query, str):
            raise UserInputError("The query must be a string.")

        if variables and isinstance(variables, str):
            try:
                variables = json.loads(variables)
            except ValueError:
                raise UserInputError("Variables are invalid JSON.")
        if variables is not None and not isinstance(variables, dict):
            raise UserInputError("Variables must be an object.")
        if operation_name == "null":
            operation_name = None
        if operation_name is not None and not isinstance(operation_name, str):
            raise UserInputError("The operation name must be a string.")

        return query, variables, operation_name

    async def execute_graphql_request(
        self,
        request: Request,
        query: str,
        variables: typing.Optional[dict],
        operation_name: typing.Optional[str],
    ) -> typing.Tuple[dict, int]:
        try:
            document = parse(query)
        except GraphQLError as error:
            return {"errors": [self.format_error(error)]}, status.HTTP_400_BAD_REQUEST

        validation_errors = validate(self.schema, document)
        if validation_errors:
            errors = [self.format_error(error) for error in validation_errors]
            return {"errors": errors}, status.HTTP_400_BAD_REQUEST

        if request.method in ("GET", "HEAD"):
            operation = get_operation_ast(document, operation_name)
            if operation and operation.operation != OperationType.QUERY:
                raise MethodNotAllowedError(
                    f"Can only perform a {operation.operation.value} operation from a POST request.",
                    allow="POST",
                )

        context = {"request": request, "store": self.store}
        result = execute(
            self.schema,
            document,
            variable_values=variables,
            operation_name=operation_name,
            context_value=context,
            middleware=self.middleware,
        )
        if isawaitable(result):
            result = await result
        result = typing.cast(ExecutionResult, result)

        errors = [self.format_error(error) for error in result.errors] if result.errors else None
        if result.data is None:
            # the operation never ran: unknown operation name or bad variables
            return {"errors": errors}, status.HTTP_400_BAD_REQUEST

        response_data: typing.Dict[str, typing.Any] = {"data": result.data}
        if errors:
            response_data["errors"] = errors
        return response_data, status.HTTP_200_OK

    def format_error(self, error: GraphQLError) -> dict:
        formatted = error.formatted
        if self.debug and error.original_error:
            original_error = error.original_error
            extensions = dict(formatted.get("extensions") or {})
            extensions["exception"] = {
                "traceback": traceback.format_exception(
                    type(original_error), original_error, original_error.__traceback__
                )
            }
            formatted["extensions"] = extensions
        return formatted
