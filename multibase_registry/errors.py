"""Multibase error hierarchy."""

from .constants import ErrorCode


class MultibaseError(Exception):
    """Base class for all multibase errors."""

    code: ErrorCode = ErrorCode.OK


class InvalidArgumentError(MultibaseError, ValueError):
    """An argument is empty, blank or of the wrong shape."""

    code = ErrorCode.ERR_INVALID_ARGUMENT


class DuplicateNameError(MultibaseError, ValueError):
    """An algorithm with the same name is already registered."""

    code = ErrorCode.ERR_DUPLICATE_NAME


class DuplicateCodeError(MultibaseError, ValueError):
    """An algorithm with the same code is already registered."""

    code = ErrorCode.ERR_DUPLICATE_CODE


class AlgorithmNotImplementedError(MultibaseError, NotImplementedError):
    """A placeholder algorithm was asked to encode or decode."""

    code = ErrorCode.ERR_NOT_IMPLEMENTED


class FormatError(MultibaseError, ValueError):
    """Encoded text is malformed for its algorithm."""

    code = ErrorCode.ERR_FORMAT


class AlgorithmNotFoundError(MultibaseError, LookupError):
    """No algorithm is registered under the requested name or code."""

    code = ErrorCode.ERR_NOT_FOUND
