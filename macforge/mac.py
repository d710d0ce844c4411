"""
Two-block MAC built from the toy PRF Fk.

    Mac_k(m0 || m1) = Fk(0 || m0) || Fk(1 || m1)

with |k| = n and |m0| = |m1| = n - 1. The prefix bit separates the two PRF
calls but nothing ties m0 to m1, which is what attack.py exploits.

Errors in the inputs are returned as MacError values, never raised.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from cryptography.hazmat.primitives import constant_time

from macforge.bits import BitString, InvalidBitString
from macforge.prf import Fk


class MacError(ABC):
    """Base class for the error values returned by mac_with_steps."""

    @property
    @abstractmethod
    def message(self) -> str:
        pass


@dataclass(frozen=True)
class LengthError(MacError):
    expected: int
    actual: int

    @property
    def message(self) -> str:
        return f"Message length must be exactly {self.expected} bits."


@dataclass(frozen=True)
class MalformedInput(MacError):
    field: str
    detail: str

    @property
    def message(self) -> str:
        return f"Invalid {self.field}: {self.detail}"


@dataclass(frozen=True)
class MacSteps:
    m0: BitString
    m1: BitString
    input0: BitString
    input1: BitString
    t0: BitString
    t1: BitString


@dataclass(frozen=True)
class MacResult:
    tag: BitString
    steps: MacSteps


def expected_message_length(key) -> int:
    return 2 * (len(key) - 1)


def mac_with_steps(key, message) -> Union[MacResult, MacError]:
    try:
        key = BitString(key)
    except InvalidBitString as e:
        return MalformedInput("key", str(e))
    try:
        message = BitString(message)
    except InvalidBitString as e:
        return MalformedInput("message", str(e))

    n = len(key)
    if n == 0:
        return MalformedInput("key", "key must contain at least one bit")

    expected = expected_message_length(key)
    if len(message) != expected:
        return LengthError(expected, len(message))

    # divide a mensagem em duas metades de n-1 bits
    m0 = message[:n - 1]
    m1 = message[n - 1:]

    input0 = "0" + m0
    input1 = "1" + m1

    t0 = Fk(key, input0)
    t1 = Fk(key, input1)

    return MacResult(
        tag=t0 + t1,
        steps=MacSteps(m0=m0, m1=m1, input0=input0, input1=input1, t0=t0, t1=t1),
    )


def vrfy(key, message, tag, constant_time_compare=False) -> bool:
    result = mac_with_steps(key, message)
    if isinstance(result, MacError):
        return False

    try:
        tag = BitString(tag)
    except InvalidBitString:
        return False

    if constant_time_compare:
        return constant_time.bytes_eq(str(result.tag).encode(), str(tag).encode())
    # comparacao simples, nao e constant-time
    return result.tag == tag
