# raid_checker/errors.py
"""Typed failures raised by the raid checker core.

main.py is the only place these are turned into HTTP statuses or socket
error events.
"""


class RaidCheckerError(Exception):
    """Base class for every failure the core raises on purpose."""


class InvalidInputError(RaidCheckerError):
    """A caller-supplied value was missing or out of range."""

    def __init__(self, field, message=None):
        self.field = field
        self.message = message or f"Invalid value for '{field}'."
        super().__init__(self.message)


class ParseError(RaidCheckerError):
    MALFORMED_RECORD = "MalformedRecord"
    TRUNCATED = "Truncated"

    def __init__(self, kind, message, line_number=None):
        self.kind = kind
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(f"{kind}{location}: {message}")


class UpstreamUnavailableError(RaidCheckerError):
    """The hiscore source could not be reached or answered with a failure status."""

    def __init__(self, player_name, attempts=None):
        self.player_name = player_name
        self.attempts = list(attempts or [])
        detail = "; ".join(self.attempts) if self.attempts else "no source attempted"
        super().__init__(f"Hiscores unavailable for '{player_name}': {detail}")
