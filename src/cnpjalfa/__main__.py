from .cli import app


def main() -> None:
    app(prog_name="cnpjalfa")


if __name__ == "__main__":
    main()
