"""Deployment environment selected through the ENVIRONMENT variable."""

from enum import Enum


class Environment(str, Enum):
    """Where the API is running.

    DEVELOPMENT renders logs for humans and creates tables on startup;
    PRODUCTION expects the schema to exist already.
    """

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
