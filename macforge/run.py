import typer
from cryptography.fernet import InvalidToken

from macforge.attack import DEMO_KEY, DEMO_MESSAGE_1, DEMO_MESSAGE_2
from macforge.config import load_settings
from macforge.mac import MacError
from macforge.shell import MacShell

app = typer.Typer()


def _shell(key=None, message=None):
    settings = load_settings()
    shell = MacShell.from_settings(settings)
    if key is not None:
        shell.key = key
    if message is not None:
        shell.message = message
    return shell


@app.command(name="mac")
def mac(key: str, message: str):
    """Gera a tag de uma mensagem e mostra os passos."""
    result = _shell(key, message).generate_mac()
    if isinstance(result, MacError):
        raise typer.Exit(code=1)


@app.command(name="verify")
def verify(key: str, message: str, tag: str, constant_time: bool = False):
    """Verifica uma tag."""
    shell = _shell(key, message)
    if constant_time:
        shell.constant_time = True
    if not shell.verify_mac(tag):
        raise typer.Exit(code=1)


@app.command(name="attack")
def attack(key: str = DEMO_KEY, message1: str = DEMO_MESSAGE_1, message2: str = DEMO_MESSAGE_2):
    """Demonstra o ataque de forja mix-and-match."""
    result = _shell().demonstrate_attack(key, message1, message2)
    if isinstance(result, MacError) or not result.success:
        raise typer.Exit(code=1)


@app.command(name="tests")
def tests():
    """Corre os casos de teste."""
    results = _shell().run_tests()
    if not all(t.passed for t in results):
        raise typer.Exit(code=1)


@app.command(name="logs")
def logs():
    """Lista os logs."""
    settings = load_settings()
    shell = MacShell.from_settings(settings)
    if shell.logger is None:
        typer.echo("Logs nao configurados (LOG_PATH / LOG_PASSWORD).")
        raise typer.Exit(code=1)
    try:
        typer.echo(shell.logger.read_logs(), nl=False)
    except FileNotFoundError:
        typer.echo("Sem logs.")
    except InvalidToken:
        typer.echo("Erro ao decifrar logs: password ou salt errados.")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
