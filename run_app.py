import uvicorn

from iss_flyover.logger import log_config


def main() -> None:
    """Run the ISS flyover FastAPI application with uvicorn."""
    uvicorn.run(
        "iss_flyover.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        log_config=log_config,
    )


if __name__ == "__main__":
    main()
