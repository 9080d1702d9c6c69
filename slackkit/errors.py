"""Exceptions raised by the client and a small duration helper."""

from datetime import timedelta


class SlackError(Exception):
    """Base class for every error raised by this package."""

    default_message = "slack error"

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class SlackApiError(SlackError):
    """The API answered a call with ``ok`` set to false."""

    def __init__(self, error, response=None):
        super().__init__(error)
        self.error = error
        self.response = dict(response or {})


class AlreadyDisconnectedError(SlackError):
    default_message = "Invalid call to Disconnect - Slack API is already disconnected"


class RTMDisconnectedError(SlackError):
    default_message = "disconnect received while trying to connect"


class RTMGoodbyeError(SlackError):
    default_message = "goodbye detected"


class RTMDeadmanError(SlackError):
    default_message = "deadman switch triggered"


class ParametersMissingError(SlackError, ValueError):
    default_message = "received empty parameters"


class InvalidConfigurationError(SlackError):
    default_message = "invalid configuration"


class MissingHeadersError(SlackError):
    default_message = "missing headers"


class ExpiredTimestampError(SlackError):
    default_message = "timestamp is too old"


def max_duration(*args):
    """Return the longest of the given durations, never less than zero."""
    return max((timedelta(0), *args))