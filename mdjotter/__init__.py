"""Async client for the MDJotter note-taking REST API."""

from mdjotter.client import (
    APIError,
    AuthenticationError,
    ClientOptions,
    ConfigurationError,
    LoginTransportError,
    MDJotterClient,
    MDJotterError,
    Session,
    TransportError,
)
from mdjotter.config import Settings, get_settings
from mdjotter.containers import ContainerService
from mdjotter.models import (
    Container,
    ContainerChildren,
    ContainerCreate,
    ContainerUpdate,
    Note,
    NoteCreate,
    NoteUpdate,
)
from mdjotter.notes import NoteService

__all__ = [
    "APIError",
    "AuthenticationError",
    "ClientOptions",
    "ConfigurationError",
    "Container",
    "ContainerChildren",
    "ContainerCreate",
    "ContainerService",
    "ContainerUpdate",
    "LoginTransportError",
    "MDJotterClient",
    "MDJotterError",
    "Note",
    "NoteCreate",
    "NoteService",
    "NoteUpdate",
    "Session",
    "Settings",
    "TransportError",
    "get_settings",
]
