"""Errors raised when talking to actors and their data."""


class ActorError(Exception):
    """Base class of every error an actor request can fail with."""


class ActorDoesNotExist(ActorError):
    """The actor addressed by a handle does not exist."""


class ActorIsNotLoaded(ActorError):
    """The actor exists but is not loaded yet."""


class IndexOutOfBounds(ActorError, IndexError):
    """A slot, index or id lies outside of what the actor holds."""


class BadRequest(ActorError, ValueError):
    """The request sent to the actor was malformed."""


class ComponentNotFound(ActorError, LookupError):
    """A data component is missing or holds a value of another type."""


class ActorHasBeenDropped(ActorError):
    """The actor went away while a request was in flight."""