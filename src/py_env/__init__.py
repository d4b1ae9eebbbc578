"""py-env — typed access to environment configuration.

Importing the package loads ``.env`` from the working directory (if
present) into ``os.environ``, never overwriting variables that are
already set, and exposes the result as ``env``::

    from py_env import env

    port = env.number("PORT", 8000)

Build an independent configuration with ``create_env``::

    from py_env import Environment, create_env

    cfg = create_env(Environment(), path="settings.env")
"""

from py_env.accessors import Env, EnvUtils, create_env
from py_env.coerce import Coercion, parse_boolean, parse_number
from py_env.dotenv import ParsedLine, load_dotenv, merge_into, parse_dotenv, parse_line
from py_env.env import Environment
from py_env.logging import LogEntry, Logger, WarnSink

env = create_env()

__all__ = [
    "Coercion",
    "Env",
    "EnvUtils",
    "Environment",
    "LogEntry",
    "Logger",
    "ParsedLine",
    "WarnSink",
    "create_env",
    "env",
    "load_dotenv",
    "merge_into",
    "parse_boolean",
    "parse_dotenv",
    "parse_line",
    "parse_number",
]
