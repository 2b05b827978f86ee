"""Error types raised by the timeline engine and its collaborators."""

from __future__ import annotations


class TimelineError(Exception):
    """Base class for timeline engine errors."""


class FetchError(TimelineError):
    """A fetcher failed to deliver a page of events."""


class LoadInProgressError(TimelineError):
    """Raised by a guarded section when a load is already running."""


class EventParseError(TimelineError, ValueError):
    """An input file holds a malformed event record."""
