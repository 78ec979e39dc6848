#!/usr/bin/env python3
"""Demo module for multibase functionality."""

from . import FormatError, Registry, decode, default_registry, encode


def run_demo(payload: bytes = b"yes mani !", registry: Registry | None = None) -> int:
    """Run a complete multibase demo.

    Returns:
        Number of algorithms whose output did not decode back to ``payload``
    """
    registry = default_registry if registry is None else registry
    print("Multibase Demo - Standard Algorithms")
    print("=" * 40)

    print(f"Payload: {payload!r}")
    mismatches = 0
    for algorithm in sorted(registry.all(), key=lambda a: a.name.lower()):
        text = encode(payload, algorithm)
        print(f"{algorithm.name:>14} {text}")
        decoded = decode(text, registry)
        if decoded != payload:
            mismatches += 1
            print(f"{'':>14} ✗ Round trip mismatch: got {decoded!r}")

    # Strict decode rejects characters outside the alphabet
    print("\nDecoding a corrupted base32 string...")
    try:
        decode("bpfsxgid!nmfxgsibb")
    except FormatError as exc:
        print(f"Rejected: {exc}")

    print("\nDemo completed!")
    return mismatches


def main():
    """Main entry point for the demo."""
    run_demo()


if __name__ == "__main__":
    main()
