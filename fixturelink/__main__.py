"""Run the API server: python -m fixturelink"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "fixturelink.api.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "9195")),
        log_config=None,  # setup_logging() owns the handlers
    )


if __name__ == "__main__":
    main()
