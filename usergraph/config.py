"""
Settings of the usergraph server, all namespaced with ``USERGRAPH_``.

Values come from the process environment first, then from a ``.env`` file in
the working directory when there is one, then from the defaults below:

    USERGRAPH_BACKEND=mongo
    USERGRAPH_MONGO_URL=mongodb://db:27017
"""
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from starlette.config import Config

BACKENDS = ('memory', 'mongo')

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


@dataclass
class Settings:
    backend: str = 'memory'
    host: str = '127.0.0.1'
    port: int = 3000
    seed: bool = True
    monotonic_ids: bool = False
    mongo_url: str = 'mongodb://localhost:27017'
    mongo_database: str = 'usergraph'
    mongo_collection: str = 'users'
    playground: bool = True
    debug: bool = False
    log_level: str = 'INFO'

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{self.backend}', expect one of {', '.join(BACKENDS)}.")

    @classmethod
    def from_env(cls, config: Optional[Config] = None, **overrides) -> 'Settings':
        if config is None:
            config = Config('.env' if os.path.isfile('.env') else None)

        values = {}
        for f in fields(cls):
            values[f.name] = config(f'USERGRAPH_{f.name.upper()}', cast=f.type, default=f.default)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def configure_logging(level: str = 'INFO') -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())
