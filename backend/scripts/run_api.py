"""
Run the API locally with auto-reload.

Usage:
    python -m scripts.run_api
"""
import os

import uvicorn


def main():
    uvicorn.run(
        "ramp_rentals.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
