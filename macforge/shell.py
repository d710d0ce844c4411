"""
Terminal front-end for the MAC demo.

MacShell keeps the last values shown to the user (tag, steps, verification
text, attack and test results) and renders them with typer. Those snapshots
are never passed back into mac_with_steps / vrfy / forge, every action
recomputes from the current key and message.
"""

import binascii

import typer

from macforge.attack import DEMO_KEY, DEMO_MESSAGE_1, DEMO_MESSAGE_2, forge
from macforge.harness import run_tests
from macforge.logs import Logger
from macforge.mac import MacError, mac_with_steps, vrfy

INFO = typer.colors.BLUE
SUCCESS = typer.colors.GREEN
ERROR = typer.colors.RED
WARNING = typer.colors.YELLOW


def render_steps(result):
    steps = result.steps
    return [
        "MAC Generation Process:",
        "Split Message into:",
        f"- m0: {steps.m0}",
        f"- m1: {steps.m1}",
        "Prefix Bits:",
        f"- 0 || m0 = {steps.input0}",
        f"- 1 || m1 = {steps.input1}",
        "Apply PRF (Fk):",
        f"- Fk(0||m0) = {steps.t0}",
        f"- Fk(1||m1) = {steps.t1}",
        f"Final Tag: {steps.t0 + steps.t1}",
    ]


def render_pair(label, tag_label, result):
    steps = result.steps
    return [
        f"{label}: {steps.m0 + steps.m1}",
        f"Split into: m0 = {steps.m0}, m1 = {steps.m1}",
        "Compute:",
        f"Fk(0 || m0) = Fk({steps.input0}) = {steps.t0}",
        f"Fk(1 || m1) = Fk({steps.input1}) = {steps.t1}",
        f"{tag_label} = {steps.t0} || {steps.t1} = {result.tag}",
    ]


def render_test(test):
    return [
        test.name,
        test.description,
        f"Result: {'Passed' if test.passed else 'Failed'}",
    ]


class MacShell:
    def __init__(self, key, message, logger: Logger = None, constant_time=False):
        self.key = key
        self.message = message
        self.logger = logger
        self.constant_time = constant_time

        self.tag = ""
        self.verification_result = ""
        self.mac_steps = None
        self.attack_result = None
        self.test_results = []

    @classmethod
    def from_settings(cls, settings):
        logger = None
        if settings.logging_enabled:
            try:
                logger = Logger(settings.log_password, settings.log_path, settings.log_salt)
            except binascii.Error as e:
                # salt invalido: continua sem logs
                typer.secho(f"LOG_SALT invalido ({e}), logs desativados.", fg=ERROR)
        return cls(settings.key, settings.message, logger=logger, constant_time=settings.constant_time)

    def _log(self, acao, status, detalhes="Sem Detalhes"):
        if self.logger is not None:
            self.logger.log(acao, status, detalhes)

    def _panel(self, lines, color):
        for line in lines:
            typer.secho(line, fg=color)
        typer.echo("")

    def generate_mac(self):
        result = mac_with_steps(self.key, self.message)
        if isinstance(result, MacError):
            self.tag = ""
            self.verification_result = result.message
            self.mac_steps = None
            self._panel([result.message], ERROR)
            self._log("mac", "ERRO", result.message)
            return result

        self.tag = str(result.tag)
        self.verification_result = ""
        self.mac_steps = result.steps
        self._panel([f"Generated Tag: {result.tag}"], INFO)
        self._panel(render_steps(result), INFO)
        self._log("mac", "OK", f"tag={result.tag}")
        return result

    def verify_mac(self, tag=None):
        if tag is not None:
            self.tag = tag
        valid = vrfy(self.key, self.message, self.tag, constant_time_compare=self.constant_time)
        self.verification_result = "MAC Verification SUCCESS" if valid else "MAC Verification FAILURE"
        self._panel([self.verification_result], SUCCESS if valid else ERROR)
        self._log("verify", "OK" if valid else "FALHOU", f"tag={self.tag}")
        return valid

    def demonstrate_attack(self, key=DEMO_KEY, message1=DEMO_MESSAGE_1, message2=DEMO_MESSAGE_2):
        result = forge(key, message1, message2)
        if isinstance(result, MacError):
            self.attack_result = None
            self._panel([result.message], ERROR)
            self._log("attack", "ERRO", result.message)
            return result

        self.attack_result = result
        typer.secho("Step-by-Step Attack Explanation", bold=True)
        typer.echo("")
        self._panel(render_pair("Original Message 1", "Tag1", result.mac1), INFO)
        self._panel(render_pair("Original Message 2", "Tag2", result.mac2), INFO)
        self._panel([
            f"Forged Message: {result.forged_message}",
            f"Forged Tag: {result.forged_tag}",
        ], WARNING)
        if result.success:
            self._panel(["Verification Result: Forgery Verified Successfully!"], SUCCESS)
        else:
            self._panel(["Verification Result: Forgery Failed."], ERROR)
        if not result.novel:
            self._panel(["Note: the forged message was already authenticated, this is not a new forgery."], WARNING)

        self._log("attack", "SUCESSO" if result.success else "FALHOU",
                  f"forged={result.forged_message}/{result.forged_tag}")
        return result

    def run_tests(self):
        self.test_results = run_tests()
        for test in self.test_results:
            self._panel(render_test(test), SUCCESS if test.passed else ERROR)
        passed = sum(1 for t in self.test_results if t.passed)
        self._log("tests", "OK", f"{passed}/{len(self.test_results)}")
        return self.test_results
