"""
Two-block PRF MAC and the mix-and-match forgery that breaks it.

Main functions:
    mac_with_steps: tag plus intermediate values, or a MacError value
    vrfy: recompute and compare a tag
    forge: combine two authentic pairs into a new valid one
    run_tests: labelled pass/fail checks

Example usage:
    from macforge import mac_with_steps, vrfy

    result = mac_with_steps("1010", "010111")
    vrfy("1010", "010111", result.tag)  # True
"""

from .attack import forge
from .harness import run_tests
from .mac import mac_with_steps, vrfy

__all__ = ['mac_with_steps', 'vrfy', 'forge', 'run_tests']
__version__ = '1.0.0'
