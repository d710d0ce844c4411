from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from macforge.bits import BitString
from macforge.mac import MacError, MacResult, mac_with_steps, vrfy

DEMO_KEY = "1010"
DEMO_MESSAGE_1 = "010111"
DEMO_MESSAGE_2 = "101001"


@dataclass(frozen=True)
class ForgeryResult:
    key: BitString
    mac1: MacResult
    mac2: MacResult
    forged_message: BitString
    forged_tag: BitString
    success: bool

    @property
    def novel(self) -> bool:
        # a forja so conta se a mensagem nunca foi autenticada
        message1 = self.mac1.steps.m0 + self.mac1.steps.m1
        message2 = self.mac2.steps.m0 + self.mac2.steps.m1
        return self.forged_message not in (message1, message2)


def mix_and_match(message1, tag1, message2, tag2):
    """
    Builds a new (message, tag) pair out of two authentic ones.

    Only public values are used: n comes from the tag length, the key is
    never needed. The first half of message1 keeps its half-tag Fk(0 || m0)
    and the second half of message2 keeps Fk(1 || m1).

    Both messages must be 2(n-1) bits and both tags 2n bits. Other lengths
    are not checked here and give a pair that does not verify.
    """
    message1, tag1 = BitString(message1), BitString(tag1)
    message2, tag2 = BitString(message2), BitString(tag2)
    n = len(tag1) // 2

    forged_message = message1[:n - 1] + message2[n - 1:]
    forged_tag = tag1[:n] + tag2[n:]
    return forged_message, forged_tag


def forge(key, message1, message2) -> Union[ForgeryResult, MacError]:
    mac1 = mac_with_steps(key, message1)
    if isinstance(mac1, MacError):
        return mac1
    mac2 = mac_with_steps(key, message2)
    if isinstance(mac2, MacError):
        return mac2

    forged_message, forged_tag = mix_and_match(message1, mac1.tag, message2, mac2.tag)

    # a chave so e usada pra verificar
    success = vrfy(key, forged_message, forged_tag)

    return ForgeryResult(
        key=BitString(key),
        mac1=mac1,
        mac2=mac2,
        forged_message=forged_message,
        forged_tag=forged_tag,
        success=success,
    )


def demonstrate_attack() -> ForgeryResult:
    return forge(DEMO_KEY, DEMO_MESSAGE_1, DEMO_MESSAGE_2)


class ForgeAdv(ABC):
    @abstractmethod
    def forge(self, oracle: callable) -> tuple[BitString, BitString]:
        pass


class MixAndMatchAdversary(ForgeAdv):
    def __init__(self, message1, message2):
        self.message1 = BitString(message1)
        self.message2 = BitString(message2)

    def forge(self, oracle: callable) -> tuple[BitString, BitString]:
        tag1 = oracle(self.message1)
        tag2 = oracle(self.message2)
        return mix_and_match(self.message1, tag1, self.message2, tag2)


def MAC_FORGE(key, A: ForgeAdv) -> bool:
    queries = []

    def mac_oracle(message):
        result = mac_with_steps(key, message)
        if isinstance(result, MacError):
            raise ValueError(result.message)
        queries.append(BitString(message))
        return result.tag

    message, tag = A.forge(mac_oracle)

    if not vrfy(key, message, tag):
        return False
    # mensagens ja pedidas ao oraculo nao contam como forja
    return BitString(message) not in queries
