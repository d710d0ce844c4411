import pytest

from macforge.attack import (
    DEMO_KEY, DEMO_MESSAGE_1, DEMO_MESSAGE_2, MAC_FORGE, ForgeAdv, ForgeryResult,
    MixAndMatchAdversary, demonstrate_attack, forge, mix_and_match,
)
from macforge.bits import BitString
from macforge.mac import LengthError, MalformedInput, mac_with_steps, vrfy


def test_demo_forgery():
    result = demonstrate_attack()

    assert isinstance(result, ForgeryResult)
    assert str(result.forged_message) == "010001"
    assert str(result.forged_tag) == "10000011"
    assert result.success is True
    assert result.novel is True
    assert str(result.mac1.tag) == "10000101"
    assert str(result.mac2.tag) == "11110011"
    assert vrfy(DEMO_KEY, "010001", "10000011") is True


def test_mix_and_match_without_key():
    forged_message, forged_tag = mix_and_match("010111", "10000101", "101001", "11110011")

    assert forged_message == BitString("010001")
    assert forged_tag == BitString("10000011")


def test_forgery_with_other_key():
    result = forge("1100", "000111", "111000")

    assert str(result.forged_message) == "000000"
    assert str(result.forged_tag) == "11000100"
    assert result.success is True


@pytest.mark.parametrize("key,message1,message2", [
    ("1", "", ""),
    ("011", "0000", "1111"),
    ("11110000", "00000001111111", "11111110000000"),
])
def test_forgery_always_verifies(key, message1, message2):
    result = forge(key, message1, message2)

    assert result.success is True
    assert result.forged_tag == mac_with_steps(key, result.forged_message).tag


def test_forging_same_message_is_not_novel():
    result = forge(DEMO_KEY, DEMO_MESSAGE_1, DEMO_MESSAGE_1)

    assert result.success is True
    assert result.novel is False


def test_forge_returns_error_value():
    assert isinstance(forge(DEMO_KEY, "10101", DEMO_MESSAGE_2), LengthError)
    assert isinstance(forge(DEMO_KEY, DEMO_MESSAGE_1, "1010x1"), MalformedInput)


def test_mac_forge_experiment_succeeds():
    assert MAC_FORGE(DEMO_KEY, MixAndMatchAdversary(DEMO_MESSAGE_1, DEMO_MESSAGE_2)) is True


class ReplayAdversary(ForgeAdv):
    def forge(self, oracle):
        return DEMO_MESSAGE_1, oracle(DEMO_MESSAGE_1)


class GuessAdversary(ForgeAdv):
    def forge(self, oracle):
        return "010001", "00000000"


class GarbageAdversary(ForgeAdv):
    def forge(self, oracle):
        return "01x001", "10000011"


class BadQueryAdversary(ForgeAdv):
    def forge(self, oracle):
        return "10101", oracle("10101")


def test_mac_forge_rejects_replayed_pair():
    assert MAC_FORGE(DEMO_KEY, ReplayAdversary()) is False


def test_mac_forge_rejects_wrong_tag():
    assert MAC_FORGE(DEMO_KEY, GuessAdversary()) is False


def test_mac_forge_invalid_query():
    with pytest.raises(ValueError, match="exactly 6 bits"):
        MAC_FORGE(DEMO_KEY, BadQueryAdversary())


def test_mac_forge_rejects_malformed_output():
    assert MAC_FORGE(DEMO_KEY, GarbageAdversary()) is False


def test_mix_and_match_with_unequal_lengths_does_not_verify():
    forged_message, forged_tag = mix_and_match("010111", "10000101", "1010", "100011")

    assert forged_message == BitString("0100")
    assert vrfy(DEMO_KEY, forged_message, forged_tag) is False
