from .applications import GraphQL, GraphQLApp  # noqa
from .config import Settings, configure_logging  # noqa
from .factory import create_app, create_store  # noqa
from .models import User  # noqa
from .resolver import Operation, ResolverMap  # noqa
from .schema import TYPE_DEFS, make_schema  # noqa
from .store import MemoryUserStore, MongoUserStore, UserStore  # noqa
from .utils import gql  # noqa

__version__ = '0.1.0'
