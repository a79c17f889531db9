import typer

from .emitters import emit_reference, emit_simulation, print_improvements

app = typer.Typer(help="Print the expected Gemini chat request shape next to a simulated payload.")


@app.command()
def main():
    """Print the reference payload, the simulated payload and the improvements footer."""
    emit_reference()
    emit_simulation()
    print_improvements()


if __name__ == "__main__":
    app()
