import click
import uvicorn
from graphql import print_schema

from .config import BACKENDS, Settings, configure_logging
from .factory import create_app
from .schema import make_schema


@click.group()
def main():
    pass


@main.command()
@click.option('--backend', type=click.Choice(BACKENDS), help='user store, default is memory')
@click.option('--host', help='bind address, default is 127.0.0.1')
@click.option('--port', type=int, help='listening port, default is 3000')
@click.option('--seed/--no-seed', default=None, help='seed the in-memory store with Alice and Bob')
def serve(backend, host, port, seed):
    """Run the GraphQL server"""
    settings = Settings.from_env(backend=backend, host=host, port=port, seed=seed)
    configure_logging(settings.log_level)
    app = create_app(settings)
    click.echo(f'Server running on http://{settings.host}:{settings.port}/graphql')
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


@main.command()
def schema():
    """Print the schema SDL"""
    click.echo(print_schema(make_schema()))


if __name__ == '__main__':
    main()
