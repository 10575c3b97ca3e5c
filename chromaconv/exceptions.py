class InvariantViolation(Exception):
    """
    A conversion reached a state its algorithm guarantees cannot happen.

    Raised when a formula produces an out-of-range component, when a
    requested component was not computed, or when the hue sector lookup
    finds no matching channel. These are defects in chromaconv itself and
    are never raised for bad caller input, so they should not be caught
    and retried.
    """
    pass
