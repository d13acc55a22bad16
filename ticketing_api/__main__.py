"""Entry point for running the ticketing HTTP server."""

import os

import uvicorn

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))


def main():
    """Run the HTTP server. Logging is configured by ticketing_api.main on import."""
    uvicorn.run(
        "ticketing_api.main:app",
        host=HOST,
        port=PORT,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
