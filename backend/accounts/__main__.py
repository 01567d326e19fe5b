import uvicorn

from accounts.config import settings


def main() -> None:
    uvicorn.run(
        "accounts.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
