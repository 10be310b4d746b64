"""
QuickNotes Backend — Server Runner
====================================

What:  `python -m quicknotes` / `quicknotes` console script.
How:   Starts uvicorn on BACKEND_HOST:BACKEND_PORT with the module-level app.
       If store initialization fails, uvicorn aborts startup and exits
       non-zero.
"""

import uvicorn

from quicknotes.config import settings


def main() -> None:
    uvicorn.run(
        "quicknotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        lifespan="on",
    )


if __name__ == "__main__":
    main()
