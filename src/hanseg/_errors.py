"""Hanseg error types."""


class HansegError(Exception):
    """Base error for all hanseg failures."""


class DictionaryUnavailableError(HansegError):
    """Dictionary or frequency data could not be loaded."""


class HansegVersionError(DictionaryUnavailableError):
    """Bundle manifest version mismatch."""


class HansegChecksumError(DictionaryUnavailableError):
    """Bundle file checksum verification failed."""
