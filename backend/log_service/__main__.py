"""Entry point for `python -m log_service` and the `log-service` console script."""

from log_service.server import serve


def main() -> None:
    serve()


if __name__ == "__main__":
    main()
