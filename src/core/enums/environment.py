"""Deployment environment, read from ENVIRONMENT."""

from enum import Enum


class Environment(str, Enum):
    """Where the API is running.

    DEVELOPMENT and TESTING create tables on startup; DEVELOPMENT logs to a
    coloured console instead of JSON.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
