import typer

import clifit.cli

if __name__ == "__main__":
    typer_app: typer.Typer = clifit.cli.app
    typer_app()
