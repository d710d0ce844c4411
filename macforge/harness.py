from dataclasses import dataclass

from macforge.attack import mix_and_match
from macforge.bits import flip_bit
from macforge.mac import LengthError, mac_with_steps, vrfy


@dataclass(frozen=True)
class TestCase:
    name: str
    description: str
    passed: bool

    # nao e uma classe de testes do pytest
    __test__ = False


def run_tests():
    results = []

    key = "1010"
    message = "010111"
    correct_mac = mac_with_steps(key, message).tag

    results.append(TestCase(
        name="Basic Verification",
        description="Generate a MAC and verify it correctly.",
        passed=vrfy(key, message, correct_mac),
    ))

    results.append(TestCase(
        name="Wrong Tag Verification",
        description="Modify the tag and check that verification fails.",
        passed=not vrfy(key, message, "00000000"),
    ))

    msg1 = "010111"
    msg2 = "101001"
    mac1 = mac_with_steps(key, msg1)
    mac2 = mac_with_steps(key, msg2)
    forged_msg, forged_tag = mix_and_match(msg1, mac1.tag, msg2, mac2.tag)
    results.append(TestCase(
        name="Attack Forgery Verification",
        description="Forge a new valid message using two legitimate message-tag pairs.",
        passed=vrfy(key, forged_msg, forged_tag),
    ))

    flipped_message = flip_bit(message, 0)
    results.append(TestCase(
        name="Random Bit Flip Verification",
        description="Flip one bit in the message and check that verification fails.",
        passed=not vrfy(key, flipped_message, correct_mac),
    ))

    bad_mac = mac_with_steps(key, "10101")
    results.append(TestCase(
        name="Invalid Length Message",
        description="Provide a wrong length message and check error handling.",
        passed=isinstance(bad_mac, LengthError),
    ))

    return results
