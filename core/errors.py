"""Error kinds raised by the SCP generation pipeline."""

from __future__ import annotations


class ScpGenError(ValueError):
    """Base class for input errors surfaced to the CLI."""

    exit_code = 1
    usage_error = False


class InvalidPolicyType(ScpGenError):
    exit_code = 2
    usage_error = True

    def __init__(self, value: object) -> None:
        super().__init__(f"policy type can be either 'Allow' or 'Deny', got: {value}")
        self.value = value


class InvalidThreshold(ScpGenError):
    exit_code = 2
    usage_error = True

    def __init__(self, value: object) -> None:
        super().__init__(f"threshold has to be a positive integer, got: {value}")
        self.value = value


class MalformedInput(ScpGenError):
    """Scanner report could not be read or does not match the expected schema."""


class MissingArgument(ScpGenError):
    exit_code = 2
    usage_error = True

    def __init__(self, *flags: str) -> None:
        super().__init__(f"missing required argument(s): {', '.join(flags)}")
        self.flags = flags


__all__ = ["ScpGenError", "InvalidPolicyType", "InvalidThreshold", "MalformedInput", "MissingArgument"]
