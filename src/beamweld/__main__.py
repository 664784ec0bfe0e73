"""Package entrypoint so ``python -m beamweld`` runs the CLI."""

from beamweld.cli.main import main

if __name__ == "__main__":
    main()
