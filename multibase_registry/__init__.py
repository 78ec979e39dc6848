# Copyright 2025 Maida.AI
# SPDX-License-Identifier: Apache-2.0
r"""multibase-registry - Self-describing text encodings for binary data.

A multibase string is encoded text prefixed with a single character naming
the encoding that produced it, so it can be decoded without outside context.

This package provides:
- A registry of algorithms indexed by unique name and unique code
- Strict alphabet validation in front of permissive decoders
- The standard base16, base32, base36, base58 and base64 algorithm set
- Prefix-aware encode/decode over a process default registry
- A reset/update/finalize digest adapter over hashlib and CRC32C
"""

# Import public API from modules
from .algorithm import Algorithm, AlgorithmInfo
from .codecs import (
    Codec,
    FunctionCodec,
    UnimplementedCodec,
    check_alphabet,
    strict_decode,
)
from .config import RegistryConfig, build_registry
from .constants import (
    DEFAULT_ALGORITHM,
    RESERVED_CODES,
    ErrorCode,
)
from .digest import Digest, new_digest
from .errors import (
    AlgorithmNotFoundError,
    AlgorithmNotImplementedError,
    DuplicateCodeError,
    DuplicateNameError,
    FormatError,
    InvalidArgumentError,
    MultibaseError,
)
from .multibase import (
    algorithm_of,
    decode,
    default_registry,
    deregister_algorithm,
    encode,
    get_algorithm,
    is_encoded,
    list_algorithms,
    register_algorithm,
)
from .registry import Registry
from .standard import STANDARD_ALGORITHMS, register_standard

# Public API exports
__all__ = [
    # Core classes
    "Algorithm",
    "AlgorithmInfo",
    "Registry",
    "RegistryConfig",
    "Codec",
    "FunctionCodec",
    "UnimplementedCodec",
    "Digest",
    # Constants and enums
    "DEFAULT_ALGORITHM",
    "RESERVED_CODES",
    "STANDARD_ALGORITHMS",
    "ErrorCode",
    # Errors
    "MultibaseError",
    "InvalidArgumentError",
    "DuplicateNameError",
    "DuplicateCodeError",
    "AlgorithmNotImplementedError",
    "AlgorithmNotFoundError",
    "FormatError",
    # Registry utilities
    "build_registry",
    "register_standard",
    "default_registry",
    "register_algorithm",
    "deregister_algorithm",
    "get_algorithm",
    "list_algorithms",
    # Encoding utilities
    "encode",
    "decode",
    "algorithm_of",
    "is_encoded",
    "check_alphabet",
    "strict_decode",
    "new_digest",
]
