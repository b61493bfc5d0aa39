from tac_assistant.app.main import cli

if __name__ == "__main__":
    cli()
