"""Exceptions raised within the contain-exactly package"""


class ContainExactlyError(Exception):
    """Base class for the errors raised by this package

    The human-readable explanation is kept on the message attribute so that
    callers can log it without formatting the whole exception.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SequenceConversionError(ContainExactlyError):
    """A value could not be viewed as an ordered, indexable sequence"""


class ConfigurationError(ContainExactlyError):
    """The configuration file could not be read or holds invalid values"""


class InputFileError(ContainExactlyError):
    """A file given to the command could not be read or parsed"""
